"""
Task board endpoints
"""

from fastapi import APIRouter, Depends, Query
from api.dependencies import get_repositories, require_view
from models.base import TaskStatus, View
from schemas.api import TaskCreateRequest, TaskStatusUpdateRequest
from schemas.entities import Task
from services.access import Capability
from services.tasks import TaskService
from storage.repositories import Repositories
from typing import List, Optional

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=List[Task])
def list_tasks(
    status: Optional[TaskStatus] = Query(None, description="Only tasks in this column"),
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.TASK))
):
    return TaskService(repositories.tasks).list_tasks(status)


@router.post("", response_model=Task, status_code=201)
def create_task(
    payload: TaskCreateRequest,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.TASK))
):
    return TaskService(repositories.tasks).create_task(
        title=payload.title,
        label=payload.label,
        content=payload.content,
        status=payload.status,
    )


@router.patch("/{task_id}/status", response_model=Task)
def update_task_status(
    task_id: str,
    payload: TaskStatusUpdateRequest,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.TASK))
):
    return TaskService(repositories.tasks).update_status(task_id, payload.status)


@router.delete("/{task_id}", status_code=204)
def delete_task(
    task_id: str,
    repositories: Repositories = Depends(get_repositories),
    capability: Capability = Depends(require_view(View.TASK))
):
    TaskService(repositories.tasks).delete_task(task_id)
