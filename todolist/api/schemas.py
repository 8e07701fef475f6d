"""Request/response models for the todolist API.

JSON field names are camelCase; requests also accept snake_case.
"""

from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from todolist.models.task import Task, TaskStatus


class ApiModel(BaseModel):
    """Base model with camelCase aliases."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Mark a naive timestamp as UTC so it serializes with an offset."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LoginRequest(ApiModel):
    """Request model for login. Field rules are checked by the auth service."""
    email: Optional[str] = Field(None, description="Account email")
    password: Optional[str] = Field(None, description="Account password")


class LoginResponse(ApiModel):
    """Response model for a successful login."""
    token: str
    email: str
    full_name: str
    expires_at: datetime

    @field_validator("expires_at")
    @classmethod
    def expires_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class CreateTaskRequest(ApiModel):
    """Request model for task creation."""
    title: Optional[str] = Field(None, description="Task title (required, max 200 chars)")
    description: Optional[str] = Field(None, description="Task description (max 1000 chars)")


class UpdateTaskRequest(ApiModel):
    """Request model for a partial task update; omitted or null fields are left unchanged."""
    title: Optional[str] = Field(None, description="New title; empty string is ignored")
    description: Optional[str] = Field(None, description="New description")
    status: Optional[TaskStatus] = Field(None, description="New status (Pending or Completed)")


class TaskResponse(ApiModel):
    """Task as returned by the API."""
    id: str
    title: str
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at", "completed_at")
    @classmethod
    def timestamps_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at,
            completed_at=task.completed_at,
        )


class DashboardMetricsResponse(ApiModel):
    """Aggregate task counts for the current user."""
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    completion_percentage: float


class ErrorResponse(ApiModel):
    """Error body shared by every failure response."""
    status_code: int
    message: str
    detail: Optional[str] = None
    errors: List[str] = Field(default_factory=list)
