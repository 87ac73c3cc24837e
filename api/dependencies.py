"""
FastAPI dependencies: store, repositories, current user and capability
"""

from fastapi import Depends
from core.database import SessionLocal
from core.exceptions import AccessDeniedError
from models.base import View
from schemas.entities import User
from services.access import Capability, capabilities_for, can_view
from services.auth import require_current_user
from storage.kv import KeyValueStore, SQLKeyValueStore
from storage.repositories import Repositories, build_repositories


def get_store() -> KeyValueStore:
    """Store over the application session factory"""
    return SQLKeyValueStore(SessionLocal)


def get_repositories(store: KeyValueStore = Depends(get_store)) -> Repositories:
    return build_repositories(store)


def get_current_user(repositories: Repositories = Depends(get_repositories)) -> User:
    return require_current_user(repositories)


def get_capability(user: User = Depends(get_current_user)) -> Capability:
    """Capability set of the logged-in user's role, derived once per request"""
    return capabilities_for(user.role)


def require_view(view: View):
    """Dependency factory rejecting roles that cannot open ``view``"""

    def checker(capability: Capability = Depends(get_capability)) -> Capability:
        if not can_view(capability, view):
            raise AccessDeniedError(
                f"Role {capability.role.value} cannot open the {view.value} view",
                context={"role": capability.role.value, "view": view.value}
            )
        return capability

    return checker
