"""Task data model for todolist."""

from datetime import datetime
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "Pending"
    COMPLETED = "Completed"


class Task(BaseModel):
    """Canonical Task model.

    Status changes go through `mark_completed`, `mark_pending` or
    `toggle_status` so that `completed_at` is set if and only if the task
    is completed.
    """

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    user_id: str = Field(..., description="User ID who owns this task")
    title: str = Field(..., description="Task title")
    description: str = Field("", description="Task description (may be empty)")
    status: TaskStatus = Field(TaskStatus.PENDING, description="Task status")
    created_at: datetime = Field(..., description="Task creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Task last update timestamp")
    completed_at: Optional[datetime] = Field(None, description="Completion timestamp (set iff completed)")

    def mark_completed(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.utcnow()
        self.status = TaskStatus.COMPLETED
        self.completed_at = now
        self.updated_at = now

    def mark_pending(self, now: Optional[datetime] = None) -> None:
        now = now or datetime.utcnow()
        self.status = TaskStatus.PENDING
        self.completed_at = None
        self.updated_at = now

    def apply_status(self, status: TaskStatus, now: Optional[datetime] = None) -> None:
        """Move to `status` through the completion state machine."""
        if TaskStatus(status) == TaskStatus.COMPLETED:
            self.mark_completed(now)
        else:
            self.mark_pending(now)

    def toggle_status(self, now: Optional[datetime] = None) -> None:
        """Pending -> Completed, Completed -> Pending."""
        if TaskStatus(self.status) == TaskStatus.PENDING:
            self.mark_completed(now)
        else:
            self.mark_pending(now)
