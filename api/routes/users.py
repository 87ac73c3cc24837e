"""
Account management endpoints (management view)
"""

from fastapi import APIRouter, Depends
from api.dependencies import get_repositories, require_view
from models.base import View
from schemas.api import UserCreateRequest, UserUpdateRequest, UserResponse
from services.access import Capability
from services.accounts import AccountService
from storage.repositories import Repositories
from typing import List

router = APIRouter(prefix="/users", tags=["Accounts"])


@router.get("", response_model=List[UserResponse])
def list_users(
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.MANAGEMENT))
):
    return [UserResponse(**user.model_dump()) for user in AccountService(repositories.users).list_users()]


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    payload: UserCreateRequest,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.MANAGEMENT))
):
    user = AccountService(repositories.users).create_user(payload.username, payload.password, payload.role)
    return UserResponse(**user.model_dump())


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.MANAGEMENT))
):
    user = AccountService(repositories.users, repositories.session).update_user(user_id, role=payload.role, password=payload.password)
    return UserResponse(**user.model_dump())


@router.delete("/{user_id}", status_code=204)
def delete_user(
    user_id: str,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.MANAGEMENT))
):
    """Deleting an unknown id is a no-op; the built-in admin is protected"""
    AccountService(repositories.users, repositories.session).delete_user(user_id)
