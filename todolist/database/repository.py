"""Repository layer for task database operations."""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc

from todolist.models.task import Task, TaskStatus
from todolist.database.models import TaskDB, enum_to_value

logger = logging.getLogger(__name__)


class TaskRepository:
    """Repository for Task database operations.

    Lookups by id are not scoped to a user; callers compare `task.user_id`
    with the requesting user before exposing or mutating a task.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, task: Task) -> Task:
        """Create a new task."""
        try:
            task_db = TaskDB.from_pydantic(task)
            self.db.add(task_db)
            self.db.commit()
            self.db.refresh(task_db)
            logger.debug(f"Created task {task.id}: {task.title[:50]}")
            return task_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to create task {task.id}: {type(e).__name__}: {str(e)}")
            raise

    def get(self, task_id: str) -> Optional[Task]:
        """Get task by ID."""
        task_db = self.db.query(TaskDB).filter(TaskDB.id == task_id).first()
        return task_db.to_pydantic() if task_db else None

    def get_all(self, user_id: str, status: Optional[TaskStatus] = None) -> List[Task]:
        """Get tasks for a user sorted by creation date (newest first), optionally by status."""
        query = self.db.query(TaskDB).filter(TaskDB.user_id == user_id)
        if status is not None:
            query = query.filter(TaskDB.status == enum_to_value(status))
        tasks_db = query.order_by(desc(TaskDB.created_at)).all()
        return [task_db.to_pydantic() for task_db in tasks_db]

    def update(self, task: Task) -> Task:
        """Update an existing task (user_id must match task.user_id)."""
        task_db = self.db.query(TaskDB).filter(
            TaskDB.id == task.id,
            TaskDB.user_id == task.user_id,
        ).first()
        if not task_db:
            raise ValueError(f"Task {task.id} not found")

        task_db.title = task.title
        task_db.description = task.description or ""
        task_db.status = enum_to_value(task.status)
        task_db.updated_at = task.updated_at
        task_db.completed_at = task.completed_at

        try:
            self.db.commit()
            self.db.refresh(task_db)
            logger.debug(f"Updated task {task.id}: {task.title[:50]}")
            return task_db.to_pydantic()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to update task {task.id}: {type(e).__name__}: {str(e)}")
            raise

    def delete(self, user_id: str, task_id: str) -> bool:
        """Permanently delete a task by ID for a specific user."""
        task_db = self.db.query(TaskDB).filter(
            TaskDB.id == task_id,
            TaskDB.user_id == user_id,
        ).first()
        if not task_db:
            return False

        try:
            self.db.delete(task_db)
            self.db.commit()
            logger.debug(f"Deleted task {task_id}")
            return True
        except Exception as e:
            self.db.rollback()
            logger.error(f"Failed to delete task {task_id}: {type(e).__name__}: {str(e)}")
            raise

    def count_by_user(self, user_id: str) -> int:
        return self.db.query(TaskDB).filter(TaskDB.user_id == user_id).count()

    def count_by_user_and_status(self, user_id: str, status: TaskStatus) -> int:
        return self.db.query(TaskDB).filter(
            TaskDB.user_id == user_id,
            TaskDB.status == enum_to_value(status),
        ).count()
