"""Application services (flows) for todolist."""

from todolist.services.auth_service import AuthService, LoginResult
from todolist.services.task_service import TaskService
from todolist.services.dashboard_service import DashboardService, DashboardMetrics

__all__ = [
    "AuthService",
    "LoginResult",
    "TaskService",
    "DashboardService",
    "DashboardMetrics",
]
