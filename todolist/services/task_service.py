"""Task flow: ownership-checked CRUD and the status toggle."""

import logging
from datetime import datetime
from typing import List, Optional

from todolist.common.result import Result
from todolist.database.repository import TaskRepository
from todolist.models.constants import TASK_NOT_FOUND_MESSAGE
from todolist.models.task import Task, TaskStatus
from todolist.models.task_factory import create_task_base
from todolist.validation import validate_task_create, validate_task_update

logger = logging.getLogger(__name__)


class TaskService:
    """Task operations scoped to the requesting user.

    Every single-task operation loads the task and compares its owner with
    `user_id`. A task owned by someone else is reported exactly like a
    missing one.
    """

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def _get_owned(self, user_id: str, task_id: str) -> Optional[Task]:
        task = self.task_repository.get(task_id)
        if task is None or task.user_id != user_id:
            return None
        return task

    def list_tasks(self, user_id: str, status: Optional[TaskStatus] = None) -> Result[List[Task]]:
        return Result.success(self.task_repository.get_all(user_id, status))

    def get_task(self, user_id: str, task_id: str) -> Result[Task]:
        task = self._get_owned(user_id, task_id)
        if task is None:
            return Result.not_found(TASK_NOT_FOUND_MESSAGE)
        return Result.success(task)

    def create_task(self, user_id: str, title: Optional[str], description: Optional[str] = None) -> Result[Task]:
        errors = validate_task_create(title, description)
        if errors:
            return Result.failure(errors=errors)

        task = self.task_repository.create(create_task_base(user_id, title, description))
        logger.info(f"Created task {task.id} for user {user_id}")
        return Result.success(task)

    def update_task(
        self,
        user_id: str,
        task_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        status: Optional[TaskStatus] = None,
    ) -> Result[Task]:
        """Apply a partial update.

        None leaves a field unchanged and an empty or blank title is ignored. A
        supplied status goes through the same transitions as the toggle.
        """
        errors = validate_task_update(title, description)
        if errors:
            return Result.failure(errors=errors)

        task = self._get_owned(user_id, task_id)
        if task is None:
            return Result.not_found(TASK_NOT_FOUND_MESSAGE)

        now = datetime.utcnow()
        if title and title.strip():
            task.title = title
        if description is not None:
            task.description = description
        if status is not None:
            task.apply_status(status, now)
        task.updated_at = now

        updated = self.task_repository.update(task)
        logger.info(f"Updated task {task_id} for user {user_id}")
        return Result.success(updated)

    def delete_task(self, user_id: str, task_id: str) -> Result[bool]:
        task = self._get_owned(user_id, task_id)
        if task is None:
            return Result.not_found(TASK_NOT_FOUND_MESSAGE)

        self.task_repository.delete(user_id, task_id)
        logger.info(f"Deleted task {task_id} for user {user_id}")
        return Result.success(True)

    def toggle_status(self, user_id: str, task_id: str) -> Result[Task]:
        task = self._get_owned(user_id, task_id)
        if task is None:
            return Result.not_found(TASK_NOT_FOUND_MESSAGE)

        task.toggle_status()
        updated = self.task_repository.update(task)
        logger.info(f"Toggled task {task_id} to {TaskStatus(updated.status).value}")
        return Result.success(updated)
