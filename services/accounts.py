"""
Account management for the admin view
"""

from typing import List, Optional
import logging
import uuid

from core.exceptions import DuplicateUsernameError, ProtectedAccountError, ResourceNotFoundError
from models.base import Role
from schemas.entities import User
from storage.repositories import CollectionRepository, CurrentUserRepository, USERS
from storage.seed import ADMIN_USERNAME

logger = logging.getLogger(__name__)


class AccountService:
    """
    Create, update and delete dashboard users.

    Ensures:
    - Usernames stay unique
    - The built-in admin account cannot be deleted or lose the admin role
    - Deleting the logged-in user also ends their session
    - Only role and password change after creation
    """

    def __init__(
        self,
        users: CollectionRepository[User],
        session: Optional[CurrentUserRepository] = None
    ):
        self.users = users
        self.session = session

    def list_users(self) -> List[User]:
        return self.users.get_all()

    def create_user(self, username: str, password: str, role: Role = Role.ADS_SPECIALIST) -> User:
        user = User(id=str(uuid.uuid4()), username=username, password=password, role=role)

        if any(existing.username == user.username for existing in self.users.get_all()):
            raise DuplicateUsernameError(
                f"Username '{user.username}' is already taken",
                context={"username": user.username}
            )

        self.users.upsert(user)
        logger.info(f"Created user '{user.username}' with role {user.role.value}")
        return user

    def update_user(
        self,
        user_id: str,
        role: Optional[Role] = None,
        password: Optional[str] = None
    ) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise ResourceNotFoundError(
                "User not found",
                context={"collection": USERS, "entity_id": user_id}
            )

        changes = {}
        if role is not None:
            role = Role(role)
            if user.username == ADMIN_USERNAME and role != Role.ADMIN:
                raise ProtectedAccountError(
                    "The built-in admin account must keep the admin role",
                    context={"entity_id": user_id, "role": role.value}
                )
            changes["role"] = role
        if password is not None:
            changes["password"] = password

        updated = user.model_copy(update=changes)
        self.users.upsert(updated)

        if self.session is not None:
            current = self.session.get_current()
            if current is not None and current.id == user_id:
                self.session.set_current(updated)

        logger.info(f"Updated user '{user.username}' ({', '.join(changes) or 'no changes'})")
        return updated

    def delete_user(self, user_id: str) -> bool:
        user = self.users.get(user_id)
        if user is not None and user.username == ADMIN_USERNAME:
            raise ProtectedAccountError(
                "The built-in admin account cannot be deleted",
                context={"entity_id": user_id}
            )
        removed = self.users.delete_by_id(user_id)

        if removed and self.session is not None:
            current = self.session.get_current()
            if current is not None and current.id == user_id:
                self.session.set_current(None)
                logger.info(f"Ended session of deleted user '{current.username}'")
        return removed
