"""
Login, logout and current session endpoints
"""

from fastapi import APIRouter, Depends
from api.dependencies import get_repositories, get_current_user, get_capability
from schemas.api import LoginRequest, SessionResponse, UserResponse, CapabilityResponse
from schemas.entities import User
from services import auth
from services.access import Capability, capabilities_for, allowed_channels, default_entry_for
from storage.repositories import Repositories
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["Auth"])


def build_session_response(user: User, capability: Capability) -> SessionResponse:
    default_category, default_channel = default_entry_for(user.role)
    return SessionResponse(
        user=UserResponse(**user.model_dump()),
        capabilities=CapabilityResponse(
            visible_views=list(capability.visible_views),
            allowed_categories=list(capability.allowed_categories),
            allowed_channels=list(allowed_channels(capability)),
            default_category=default_category,
            default_channel=default_channel,
        ),
    )


@router.post("/login", response_model=SessionResponse)
def login(
    credentials: LoginRequest,
    repositories: Repositories = Depends(get_repositories)
):
    """Log in with username/password and remember the user as current"""
    user = auth.login(repositories, credentials.username, credentials.password)
    return build_session_response(user, capabilities_for(user.role))


@router.post("/logout", status_code=204)
def logout(repositories: Repositories = Depends(get_repositories)):
    auth.logout(repositories)


@router.get("/me", response_model=SessionResponse)
def me(
    user: User = Depends(get_current_user),
    capability: Capability = Depends(get_capability)
):
    return build_session_response(user, capability)
