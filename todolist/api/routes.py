"""Route table for the todolist API."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from todolist.api.dependencies import get_auth_service, get_dashboard_service, get_task_service
from todolist.api.errors import unwrap
from todolist.api.schemas import (
    CreateTaskRequest,
    DashboardMetricsResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from todolist.auth.dependencies import get_current_user_id
from todolist.models.task import TaskStatus
from todolist.services.auth_service import AuthService
from todolist.services.dashboard_service import DashboardService
from todolist.services.task_service import TaskService


auth_router = APIRouter(prefix="/auth", tags=["auth"])
tasks_router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={401: {"model": ErrorResponse}},
)
dashboard_router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    responses={401: {"model": ErrorResponse}},
)


@auth_router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Authenticate with email and password and receive a bearer token."""
    login_result = unwrap(auth_service.login(request.email, request.password))
    return LoginResponse(
        token=login_result.token,
        email=login_result.email,
        full_name=login_result.full_name,
        expires_at=login_result.expires_at,
    )


@tasks_router.get("", response_model=List[TaskResponse], responses={400: {"model": ErrorResponse}})
def list_tasks(
    status_filter: Optional[TaskStatus] = Query(None, alias="status", description="Filter by status"),
    user_id: str = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    """List the current user's tasks, newest first."""
    tasks = unwrap(task_service.list_tasks(user_id, status_filter))
    return [TaskResponse.from_task(t) for t in tasks]


@tasks_router.get("/{task_id}", response_model=TaskResponse, responses={404: {"model": ErrorResponse}})
def get_task(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    """Get one of the current user's tasks."""
    return TaskResponse.from_task(unwrap(task_service.get_task(user_id, task_id)))


@tasks_router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_task(
    request: CreateTaskRequest,
    response: Response,
    user_id: str = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    """Create a task owned by the current user."""
    task = unwrap(task_service.create_task(user_id, request.title, request.description))
    response.headers["Location"] = f"/tasks/{task.id}"
    return TaskResponse.from_task(task)


@tasks_router.put(
    "/{task_id}",
    response_model=TaskResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_task(
    task_id: str,
    request: UpdateTaskRequest,
    user_id: str = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    """Partially update a task; omitted fields keep their values."""
    task = unwrap(
        task_service.update_task(
            user_id,
            task_id,
            title=request.title,
            description=request.description,
            status=request.status,
        )
    )
    return TaskResponse.from_task(task)


@tasks_router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
def delete_task(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    """Delete a task."""
    unwrap(task_service.delete_task(user_id, task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@tasks_router.patch(
    "/{task_id}/toggle-status",
    response_model=TaskResponse,
    responses={404: {"model": ErrorResponse}},
)
def toggle_task_status(
    task_id: str,
    user_id: str = Depends(get_current_user_id),
    task_service: TaskService = Depends(get_task_service),
):
    """Flip a task between Pending and Completed."""
    return TaskResponse.from_task(unwrap(task_service.toggle_status(user_id, task_id)))


@dashboard_router.get(
    "/metrics",
    response_model=DashboardMetricsResponse,
    responses={400: {"model": ErrorResponse}},
)
def get_dashboard_metrics(
    user_id: str = Depends(get_current_user_id),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
):
    """Task counts and completion percentage for the current user."""
    metrics = unwrap(dashboard_service.get_metrics(user_id))
    return DashboardMetricsResponse(
        total_tasks=metrics.total_tasks,
        completed_tasks=metrics.completed_tasks,
        pending_tasks=metrics.pending_tasks,
        completion_percentage=metrics.completion_percentage,
    )
