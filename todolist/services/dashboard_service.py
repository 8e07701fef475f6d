"""Dashboard metrics flow."""

from dataclasses import dataclass

from todolist.common.result import Result
from todolist.database.repository import TaskRepository
from todolist.models.task import TaskStatus


@dataclass(frozen=True)
class DashboardMetrics:
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    completion_percentage: float


def completion_percentage(completed: int, total: int) -> float:
    """Percentage of completed tasks, rounded to 2 decimals; 0 when there are none."""
    if total <= 0:
        return 0.0
    return round(completed / total * 100, 2)


class DashboardService:
    """Aggregates live task counts for a user. Nothing is cached."""

    def __init__(self, task_repository: TaskRepository):
        self.task_repository = task_repository

    def get_metrics(self, user_id: str) -> Result[DashboardMetrics]:
        total = self.task_repository.count_by_user(user_id)
        completed = self.task_repository.count_by_user_and_status(user_id, TaskStatus.COMPLETED)
        pending = self.task_repository.count_by_user_and_status(user_id, TaskStatus.PENDING)
        return Result.success(
            DashboardMetrics(
                total_tasks=total,
                completed_tasks=completed,
                pending_tasks=pending,
                completion_percentage=completion_percentage(completed, total),
            )
        )
