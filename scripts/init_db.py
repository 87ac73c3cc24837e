import logging
import sys
import os

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.database import SessionLocal, init_db
from core.logging import setup_logging
from storage.kv import SQLKeyValueStore
from storage.repositories import build_repositories

setup_logging("INFO")
logger = logging.getLogger(__name__)


def init_database():
    logger.info("Creating tables...")
    init_db()

    # First reads write the seed users and tasks
    repositories = build_repositories(SQLKeyValueStore(SessionLocal))
    users = repositories.users.get_all()
    tasks = repositories.tasks.get_all()

    logger.info(
        f"Store ready under prefix '{settings.STORE_KEY_PREFIX}': "
        f"{len(users)} users, {len(tasks)} tasks"
    )


if __name__ == "__main__":
    init_database()
