"""Tests for TaskService ownership checks and update semantics."""

import pytest

from todolist.common.errors import ErrorKind
from todolist.models.task import TaskStatus
from todolist.services.task_service import TaskService


@pytest.fixture
def task_service(task_repository):
    return TaskService(task_repository)


@pytest.fixture
def owned_task(task_service, test_user_id):
    return task_service.create_task(test_user_id, "Buy milk", "2 liters").value


class TestCreateTask:
    def test_create_task(self, task_service, test_user_id):
        result = task_service.create_task(test_user_id, "Buy milk")

        assert result.is_success
        task = result.value
        assert task.user_id == test_user_id
        assert task.status == TaskStatus.PENDING
        assert task.description == ""
        assert task.completed_at is None

    def test_create_rejects_empty_title(self, task_service, test_user_id, task_repository):
        result = task_service.create_task(test_user_id, "", None)

        assert result.is_failure
        assert result.kind == ErrorKind.VALIDATION
        assert result.errors == ["Title is required"]
        assert task_repository.count_by_user(test_user_id) == 0

    def test_create_reports_every_violation(self, task_service, test_user_id):
        result = task_service.create_task(test_user_id, "t" * 201, "d" * 1001)

        assert result.errors == [
            "Title must not exceed 200 characters",
            "Description must not exceed 1000 characters",
        ]
        assert result.message == ", ".join(result.errors)


class TestOwnership:
    """Another user's task must look exactly like a missing one."""

    def test_get_other_users_task_is_not_found(self, task_service, owned_task, other_user_id):
        result = task_service.get_task(other_user_id, owned_task.id)

        assert result.kind == ErrorKind.NOT_FOUND
        assert result.message == "Task not found"

    def test_missing_and_foreign_tasks_fail_identically(self, task_service, owned_task, other_user_id):
        foreign = task_service.get_task(other_user_id, owned_task.id)
        missing = task_service.get_task(other_user_id, "00000000-0000-4000-8000-000000000000")

        assert (foreign.kind, foreign.message) == (missing.kind, missing.message)

    def test_update_other_users_task_is_not_found(self, task_service, task_repository, owned_task, other_user_id):
        result = task_service.update_task(other_user_id, owned_task.id, title="Hijacked")

        assert result.kind == ErrorKind.NOT_FOUND
        assert task_repository.get(owned_task.id).title == "Buy milk"

    def test_delete_other_users_task_is_not_found(self, task_service, task_repository, owned_task, other_user_id):
        result = task_service.delete_task(other_user_id, owned_task.id)

        assert result.kind == ErrorKind.NOT_FOUND
        assert task_repository.get(owned_task.id) is not None

    def test_toggle_other_users_task_is_not_found(self, task_service, task_repository, owned_task, other_user_id):
        result = task_service.toggle_status(other_user_id, owned_task.id)

        assert result.kind == ErrorKind.NOT_FOUND
        assert task_repository.get(owned_task.id).status == TaskStatus.PENDING

    def test_list_only_returns_own_tasks(self, task_service, owned_task, test_user_id, other_user_id):
        task_service.create_task(other_user_id, "Someone else's")

        mine = task_service.list_tasks(test_user_id).value
        assert [t.id for t in mine] == [owned_task.id]


class TestUpdateTask:
    def test_partial_update_keeps_omitted_fields(self, task_service, owned_task, test_user_id):
        updated = task_service.update_task(test_user_id, owned_task.id, description="1 liter").value

        assert updated.title == "Buy milk"
        assert updated.description == "1 liter"
        assert updated.status == TaskStatus.PENDING
        assert updated.updated_at is not None

    def test_empty_title_is_ignored(self, task_service, owned_task, test_user_id):
        updated = task_service.update_task(test_user_id, owned_task.id, title="").value

        assert updated.title == "Buy milk"

    def test_blank_title_is_ignored(self, task_service, owned_task, test_user_id):
        updated = task_service.update_task(test_user_id, owned_task.id, title="   ").value

        assert updated.title == "Buy milk"

    def test_status_update_sets_and_clears_completed_at(self, task_service, owned_task, test_user_id):
        completed = task_service.update_task(test_user_id, owned_task.id, status=TaskStatus.COMPLETED).value
        assert completed.status == TaskStatus.COMPLETED
        assert completed.completed_at is not None

        reopened = task_service.update_task(test_user_id, owned_task.id, status=TaskStatus.PENDING).value
        assert reopened.status == TaskStatus.PENDING
        assert reopened.completed_at is None

    def test_update_validates_lengths(self, task_service, owned_task, test_user_id):
        result = task_service.update_task(test_user_id, owned_task.id, title="t" * 201)

        assert result.kind == ErrorKind.VALIDATION
        assert result.errors == ["Title must not exceed 200 characters"]

    def test_update_missing_task_is_not_found(self, task_service, test_user_id):
        result = task_service.update_task(test_user_id, "nonexistent-id", title="New")

        assert result.kind == ErrorKind.NOT_FOUND


class TestToggleAndDelete:
    def test_toggle_twice_returns_to_pending(self, task_service, owned_task, test_user_id):
        first = task_service.toggle_status(test_user_id, owned_task.id).value
        assert first.status == TaskStatus.COMPLETED
        assert first.completed_at is not None

        second = task_service.toggle_status(test_user_id, owned_task.id).value
        assert second.status == TaskStatus.PENDING
        assert second.completed_at is None

    def test_delete_removes_task(self, task_service, task_repository, owned_task, test_user_id):
        result = task_service.delete_task(test_user_id, owned_task.id)

        assert result.is_success
        assert task_repository.get(owned_task.id) is None
        assert task_service.get_task(test_user_id, owned_task.id).kind == ErrorKind.NOT_FOUND

    def test_list_filters_by_status(self, task_service, owned_task, test_user_id):
        other = task_service.create_task(test_user_id, "Walk the dog").value
        task_service.toggle_status(test_user_id, other.id)

        completed = task_service.list_tasks(test_user_id, TaskStatus.COMPLETED).value
        pending = task_service.list_tasks(test_user_id, TaskStatus.PENDING).value

        assert [t.id for t in completed] == [other.id]
        assert [t.id for t in pending] == [owned_task.id]
