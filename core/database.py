"""
Database session management with SQLAlchemy
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from core.config import settings
from models.base import Base
import logging

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    """Create an engine, allowing SQLite connections to cross worker threads"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(
        database_url,
        echo=False,
        connect_args=connect_args,
        future=True
    )


# Create engine
engine = build_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(
    bind=engine,
    class_=Session,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)


def init_db(bind: Engine = engine) -> None:
    """Create all tables registered on the declarative base"""
    # Registers KeyValueEntry on Base.metadata
    import models.kv_entry  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured")

