"""Task creation factory for todolist.

Centralizes task creation so every new task starts from the same defaults.
"""

import uuid
from datetime import datetime
from typing import Optional

from todolist.models.task import Task, TaskStatus


def create_task_base(
    user_id: str,
    title: str,
    description: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Task:
    """Create a new pending task owned by `user_id`.

    Args:
        user_id: User ID who owns this task (required)
        title: Task title (required)
        description: Task description; None is stored as an empty string
        now: Creation timestamp (defaults to current UTC time)

    Returns:
        Task object with defaults applied
    """
    return Task(
        id=str(uuid.uuid4()),
        user_id=user_id,
        title=title,
        description=description if description is not None else "",
        status=TaskStatus.PENDING,
        created_at=now or datetime.utcnow(),
        updated_at=None,
        completed_at=None,
    )
