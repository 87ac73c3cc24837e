"""
Key-value store backed by the kv_store table
"""

from abc import ABC, abstractmethod
from typing import Optional, Callable
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import datetime
import logging

from core.exceptions import StorageError
from models.kv_entry import KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Text values addressed by key. Every write replaces the whole value."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Stored value, or None when the key is absent"""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the key; absent keys are ignored"""
        pass

    def ping(self) -> bool:
        return True


class SQLKeyValueStore(KeyValueStore):
    """
    KeyValueStore over a SQLAlchemy session factory.

    Each operation runs in its own short session and commits immediately.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get(self, key: str) -> Optional[str]:
        try:
            with self.session_factory() as session:
                result = session.execute(
                    select(KeyValueEntry.value).where(KeyValueEntry.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to read from store",
                context={"key": key, "operation": "get"},
                original_exception=e
            )

    def set(self, key: str, value: str) -> None:
        try:
            with self.session_factory() as session:
                session.merge(KeyValueEntry(key=key, value=value, updated_at=datetime.utcnow()))
                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to write to store",
                context={"key": key, "operation": "set"},
                original_exception=e
            )
        logger.debug(f"Stored {len(value)} chars under {key}")

    def delete(self, key: str) -> None:
        try:
            with self.session_factory() as session:
                entry = session.get(KeyValueEntry, key)
                if entry is not None:
                    session.delete(entry)
                    session.commit()
        except SQLAlchemyError as e:
            raise StorageError(
                "Failed to delete from store",
                context={"key": key, "operation": "delete"},
                original_exception=e
            )

    def ping(self) -> bool:
        """True when the backing database answers a trivial query"""
        try:
            with self.session_factory() as session:
                session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Store connection failed: {str(e)}")
            return False
