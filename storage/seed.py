"""
Initial data written the first time an empty collection is read
"""

from typing import List
from models.base import Role, TaskStatus
from schemas.entities import User, Task

ADMIN_USERNAME = "admin"


def initial_users() -> List[User]:
    return [
        User(id="1", username=ADMIN_USERNAME, password="password", role=Role.ADMIN),
        User(id="2", username="ads_spesialis", password="password", role=Role.ADS_SPECIALIST),
        User(id="3", username="socmed_spesialis", password="password", role=Role.SOCIAL_MEDIA_SPECIALIST),
    ]


def initial_tasks() -> List[Task]:
    return [
        Task(
            id="t1",
            title="Audit Meta Ads",
            label="Urgent",
            content="Cek ROAS campaign Q4",
            status=TaskStatus.TODO,
        ),
        Task(
            id="t2",
            title="Plan Social Media Content",
            label="Planning",
            content="Buat kalender konten Januari",
            status=TaskStatus.IN_PROGRESS,
        ),
    ]
