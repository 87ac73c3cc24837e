"""
Health check endpoint with store status
"""

from fastapi import APIRouter, Depends
from api.dependencies import get_store, get_repositories
from core.exceptions import StorageError
from schemas.api import HealthCheckResponse
from storage.kv import KeyValueStore
from storage.repositories import Repositories, USERS, MARKETING_RECORDS, TASKS
from datetime import datetime
import logging

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthCheckResponse)
def health_check(
    store: KeyValueStore = Depends(get_store),
    repositories: Repositories = Depends(get_repositories)
):
    """
    Health check endpoint.

    Returns:
    - Store connectivity status
    - Number of entries per collection
    """
    store_connected = store.ping()

    collection_sizes = {}
    if store_connected:
        try:
            collection_sizes = {
                USERS: len(repositories.users.get_all()),
                MARKETING_RECORDS: len(repositories.records.get_all()),
                TASKS: len(repositories.tasks.get_all()),
            }
        except StorageError as e:
            logger.error(f"Failed to read collections: {str(e)}")
            store_connected = False

    return HealthCheckResponse(
        status="healthy" if store_connected else "unhealthy",
        timestamp=datetime.utcnow(),
        store_connected=store_connected,
        collection_sizes=collection_sizes
    )
