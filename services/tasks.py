"""
Task board operations
"""

from typing import List, Optional
import logging
import uuid

from core.exceptions import ResourceNotFoundError
from models.base import TaskStatus
from schemas.entities import Task
from storage.repositories import CollectionRepository, TASKS

logger = logging.getLogger(__name__)


class TaskService:
    """Any logged-in user may create, move and delete tasks. Status moves are unrestricted."""

    def __init__(self, tasks: CollectionRepository[Task]):
        self.tasks = tasks

    def list_tasks(self, status: Optional[TaskStatus] = None) -> List[Task]:
        tasks = self.tasks.get_all()
        if status is not None:
            tasks = [task for task in tasks if task.status == status]
        return tasks

    def create_task(
        self,
        title: str,
        label: Optional[str] = None,
        content: Optional[str] = None,
        status: TaskStatus = TaskStatus.TODO
    ) -> Task:
        task = Task(
            id=str(uuid.uuid4()),
            title=title,
            label=label or "Task",
            content=content or "",
            status=status,
        )
        self.tasks.upsert(task)
        logger.info(f"Created task '{task.title}' in {task.status.value}")
        return task

    def update_status(self, task_id: str, status: TaskStatus) -> Task:
        task = self.tasks.get(task_id)
        if task is None:
            raise ResourceNotFoundError(
                "Task not found",
                context={"collection": TASKS, "entity_id": task_id}
            )

        moved = task.model_copy(update={"status": TaskStatus(status)})
        self.tasks.upsert(moved)
        logger.info(f"Moved task {task_id} from {task.status.value} to {moved.status.value}")
        return moved

    def delete_task(self, task_id: str) -> bool:
        return self.tasks.delete_by_id(task_id)
