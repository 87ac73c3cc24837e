"""
Login and logout against the users collection.

Credentials are compared in plaintext with no hashing, expiry or lockout.
This is a placeholder gate for a single-tenant dashboard, not real
authentication.
"""

import logging

from core.exceptions import AuthenticationError
from schemas.entities import User
from storage.repositories import Repositories

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Username atau password salah."


def authenticate(repositories: Repositories, username: str, password: str) -> User:
    """Exact username/password match, else AuthenticationError"""
    for user in repositories.users.get_all():
        if user.username == username and user.password == password:
            return user

    logger.warning(f"Failed login attempt for username '{username}'")
    raise AuthenticationError(LOGIN_FAILED_MESSAGE, context={"username": username})


def login(repositories: Repositories, username: str, password: str) -> User:
    user = authenticate(repositories, username, password)
    repositories.session.set_current(user)
    logger.info(f"User '{user.username}' logged in as {user.role.value}")
    return user


def logout(repositories: Repositories) -> None:
    current = repositories.session.get_current()
    repositories.session.set_current(None)
    if current:
        logger.info(f"User '{current.username}' logged out")


def require_current_user(repositories: Repositories) -> User:
    user = repositories.session.get_current()
    if user is None:
        raise AuthenticationError("Not logged in")
    return user
