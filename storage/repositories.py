"""
Typed repositories over the key-value store.

Every collection lives under one key as a JSON array. Operations read the
whole collection, change it in memory and write the whole collection back.
"""

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Type, TypeVar
from pydantic import BaseModel
import json
import logging

from core.config import settings
from core.exceptions import StorageError
from schemas.entities import User, MarketingRecord, Task
from storage.kv import KeyValueStore
from storage.seed import initial_users, initial_tasks

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

USERS = "users"
MARKETING_RECORDS = "marketing-records"
TASKS = "tasks"
CURRENT_USER = "current-user"


def store_key(collection: str) -> str:
    return f"{settings.STORE_KEY_PREFIX}:{collection}"


def _dump(payload) -> str:
    return json.dumps(payload, default=str)


class CollectionRepository(Generic[T]):
    """
    CRUD over one collection of entities identified by ``id``.

    Ensures:
    - upsert replaces the entity with a matching id, else appends
    - deleting an unknown id is a no-op
    - an absent key is seeded on first read when a seed is given
    """

    def __init__(
        self,
        store: KeyValueStore,
        collection: str,
        model: Type[T],
        seed: Optional[Callable[[], List[T]]] = None
    ):
        self.store = store
        self.collection = collection
        self.key = store_key(collection)
        self.model = model
        self.seed = seed

    def get_all(self) -> List[T]:
        raw = self.store.get(self.key)
        if raw is None:
            items = self.seed() if self.seed else []
            if self.seed:
                logger.info(f"Seeding {self.collection} with {len(items)} entries")
                self._write(items)
            return items

        try:
            return [self.model(**obj) for obj in json.loads(raw)]
        except (ValueError, TypeError) as e:
            raise StorageError(
                "Stored collection could not be decoded",
                context={"key": self.key, "operation": "get"},
                original_exception=e
            )

    def get(self, entity_id: str) -> Optional[T]:
        for item in self.get_all():
            if item.id == entity_id:
                return item
        return None

    def upsert(self, entity: T) -> T:
        items = self.get_all()
        for index, item in enumerate(items):
            if item.id == entity.id:
                items[index] = entity
                break
        else:
            items.append(entity)

        self._write(items)
        return entity

    def delete_by_id(self, entity_id: str) -> bool:
        """Returns True when an entity was removed"""
        items = self.get_all()
        remaining = [item for item in items if item.id != entity_id]
        if len(remaining) == len(items):
            return False

        self._write(remaining)
        logger.info(f"Deleted {entity_id} from {self.collection}")
        return True

    def _write(self, items: List[T]) -> None:
        self.store.set(self.key, _dump([item.model_dump(mode="json") for item in items]))


class CurrentUserRepository:
    """Pointer to the logged-in user, absent when nobody is logged in"""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.key = store_key(CURRENT_USER)

    def get_current(self) -> Optional[User]:
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            return User(**json.loads(raw))
        except (ValueError, TypeError) as e:
            raise StorageError(
                "Stored current user could not be decoded",
                context={"key": self.key, "operation": "get"},
                original_exception=e
            )

    def set_current(self, user: Optional[User]) -> None:
        if user is None:
            self.store.delete(self.key)
        else:
            self.store.set(self.key, _dump(user.model_dump(mode="json")))


@dataclass
class Repositories:
    """The four collections of the dashboard, passed explicitly to whoever needs them"""
    users: CollectionRepository[User]
    records: CollectionRepository[MarketingRecord]
    tasks: CollectionRepository[Task]
    session: CurrentUserRepository


def build_repositories(store: KeyValueStore) -> Repositories:
    return Repositories(
        users=CollectionRepository(store, USERS, User, seed=initial_users),
        records=CollectionRepository(store, MARKETING_RECORDS, MarketingRecord),
        tasks=CollectionRepository(store, TASKS, Task, seed=initial_tasks),
        session=CurrentUserRepository(store),
    )
