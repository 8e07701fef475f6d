"""Tests for TaskRepository and UserRepository operations."""

import pytest
from datetime import datetime, timedelta

from todolist.models.task import TaskStatus
from todolist.models.task_factory import create_task_base


class TestTaskRepository:
    """Test TaskRepository CRUD and count operations."""

    def test_create_task(self, task_repository, test_user_id):
        """Test creating a task."""
        task = create_task_base(test_user_id, "Test Task", "Test description")
        created = task_repository.create(task)

        assert created.id == task.id
        assert created.title == "Test Task"
        assert created.description == "Test description"
        assert created.status == TaskStatus.PENDING
        assert created.user_id == test_user_id

    def test_get_task_by_id(self, task_repository, test_user_id):
        """Test retrieving a task by ID."""
        created = task_repository.create(create_task_base(test_user_id, "Test Task"))
        retrieved = task_repository.get(created.id)

        assert retrieved is not None
        assert retrieved.id == created.id
        assert retrieved.title == created.title

    def test_get_nonexistent_task(self, task_repository):
        """Test retrieving a nonexistent task returns None."""
        assert task_repository.get("nonexistent-id") is None

    def test_get_all_sorted_by_creation_date(self, task_repository, test_user_id):
        """Test that get_all() returns tasks sorted by creation date (newest first)."""
        now = datetime.utcnow()
        task_repository.create(create_task_base(test_user_id, "Task 3", now=now - timedelta(minutes=2)))
        task_repository.create(create_task_base(test_user_id, "Task 2", now=now - timedelta(minutes=1)))
        task_repository.create(create_task_base(test_user_id, "Task 1", now=now))

        titles = [t.title for t in task_repository.get_all(test_user_id)]
        assert titles == ["Task 1", "Task 2", "Task 3"]

    def test_get_all_scoped_to_user(self, task_repository, test_user_id, other_user_id):
        task_repository.create(create_task_base(test_user_id, "Mine"))
        task_repository.create(create_task_base(other_user_id, "Theirs"))

        assert [t.title for t in task_repository.get_all(test_user_id)] == ["Mine"]
        assert [t.title for t in task_repository.get_all(other_user_id)] == ["Theirs"]

    def test_get_all_filtered_by_status(self, task_repository, test_user_id):
        pending = create_task_base(test_user_id, "Pending Task")
        done = create_task_base(test_user_id, "Completed Task")
        done.mark_completed()
        task_repository.create(pending)
        task_repository.create(done)

        completed = task_repository.get_all(test_user_id, TaskStatus.COMPLETED)
        assert [t.title for t in completed] == ["Completed Task"]
        assert completed[0].completed_at is not None

        still_pending = task_repository.get_all(test_user_id, TaskStatus.PENDING)
        assert [t.title for t in still_pending] == ["Pending Task"]

    def test_update_task(self, task_repository, test_user_id):
        """Test updating a task."""
        created = task_repository.create(create_task_base(test_user_id, "Original"))

        created.title = "Updated Title"
        created.description = "Updated description"
        created.mark_completed()
        updated = task_repository.update(created)

        assert updated.title == "Updated Title"
        assert updated.description == "Updated description"
        assert updated.status == TaskStatus.COMPLETED
        assert updated.completed_at is not None
        assert updated.updated_at is not None

    def test_update_nonexistent_task_raises_error(self, task_repository, test_user_id):
        """Test updating a nonexistent task raises ValueError."""
        task = create_task_base(test_user_id, "Never stored")

        with pytest.raises(ValueError, match="Task.*not found"):
            task_repository.update(task)

    def test_delete_task(self, task_repository, test_user_id):
        """Test deleting a task."""
        created = task_repository.create(create_task_base(test_user_id, "Delete Me"))

        assert task_repository.delete(test_user_id, created.id) is True
        assert task_repository.get(created.id) is None

    def test_delete_requires_matching_user(self, task_repository, test_user_id, other_user_id):
        created = task_repository.create(create_task_base(test_user_id, "Keep Me"))

        assert task_repository.delete(other_user_id, created.id) is False
        assert task_repository.get(created.id) is not None

    def test_delete_nonexistent_task(self, task_repository, test_user_id):
        """Test deleting a nonexistent task returns False."""
        assert task_repository.delete(test_user_id, "nonexistent-id") is False

    def test_counts(self, task_repository, test_user_id, other_user_id):
        for i in range(3):
            task_repository.create(create_task_base(test_user_id, f"Task {i}"))
        done = create_task_base(test_user_id, "Done")
        done.mark_completed()
        task_repository.create(done)
        task_repository.create(create_task_base(other_user_id, "Not counted"))

        assert task_repository.count_by_user(test_user_id) == 4
        assert task_repository.count_by_user_and_status(test_user_id, TaskStatus.COMPLETED) == 1
        assert task_repository.count_by_user_and_status(test_user_id, TaskStatus.PENDING) == 3


class TestUserRepository:
    def test_get_by_email_is_exact_match(self, user_repository, test_user):
        found = user_repository.get_by_email("test@example.com")

        assert found is not None
        assert found.id == test_user.id
        assert found.full_name == "Test User"
        assert user_repository.get_by_email("missing@example.com") is None

    def test_get_by_id(self, user_repository, test_user):
        assert user_repository.get(test_user.id).email == test_user.email
        assert user_repository.get("nonexistent-id") is None

    def test_email_is_unique(self, user_repository, test_user):
        from sqlalchemy.exc import IntegrityError

        duplicate = test_user.model_copy(update={"id": "2b7a4c1e-0000-4000-8000-000000000000"})
        with pytest.raises(IntegrityError):
            user_repository.add(duplicate)
