"""Demo data seeding for todolist.

Creates two users with a handful of tasks the first time the application
starts against an empty database. There is no registration endpoint, so
this is how accounts come into existence.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import List, Tuple

from sqlalchemy.orm import Session

from todolist.auth.passwords import PasswordHasher
from todolist.database.repository import TaskRepository
from todolist.database.user_repository import UserRepository
from todolist.models.task_factory import create_task_base
from todolist.models.user import User

logger = logging.getLogger(__name__)

# (email, password, full name, [(title, description, completed_days_ago or None)])
SEED_USERS: List[Tuple[str, str, str, List[Tuple[str, str, object]]]] = [
    (
        "admin@todolist.com",
        "Admin123!",
        "Admin User",
        [
            ("Complete project documentation", "Write comprehensive documentation for the Todo List API", None),
            ("Review pull requests", "Review and merge pending pull requests", 1),
            ("Update dependencies", "Update all packages to latest stable versions", None),
        ],
    ),
    (
        "user@todolist.com",
        "User123!",
        "Regular User",
        [
            ("Buy groceries", "Milk, bread, eggs, and fruits", None),
            ("Morning exercise", "30 minutes cardio workout", 0),
        ],
    ),
]


def seed_database(db: Session, password_hasher: PasswordHasher) -> bool:
    """Seed demo users and tasks if the users table is empty.

    Returns:
        True if data was inserted, False if the database was already seeded
    """
    user_repo = UserRepository(db)
    if user_repo.count() > 0:
        logger.debug("Database already seeded; skipping")
        return False

    task_repo = TaskRepository(db)
    now = datetime.utcnow()
    for email, password, full_name, tasks in SEED_USERS:
        user = user_repo.add(
            User(
                id=str(uuid.uuid4()),
                email=email,
                password_hash=password_hasher.hash(password),
                full_name=full_name,
                created_at=now,
            )
        )
        for title, description, completed_days_ago in tasks:
            task = create_task_base(user.id, title, description, now=now)
            if completed_days_ago is not None:
                task.mark_completed(now - timedelta(days=completed_days_ago))
            task_repo.create(task)

    logger.info(f"Seeded {len(SEED_USERS)} users with demo tasks")
    return True
