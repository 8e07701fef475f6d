"""Data models for todolist."""

from todolist.models.task import Task, TaskStatus
from todolist.models.user import User

__all__ = [
    "Task",
    "TaskStatus",
    "User",
]
