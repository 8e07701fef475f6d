"""FastAPI providers that assemble services from their collaborators.

Services are built per request from the request's database session and
the long-lived objects stored on `app.state` at startup.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from todolist.auth.dependencies import get_password_hasher, get_token_issuer
from todolist.auth.jwt import TokenIssuer
from todolist.auth.passwords import PasswordHasher
from todolist.database.database import get_db
from todolist.database.repository import TaskRepository
from todolist.database.user_repository import UserRepository
from todolist.services.auth_service import AuthService
from todolist.services.dashboard_service import DashboardService
from todolist.services.task_service import TaskService


def get_auth_service(
    db: Session = Depends(get_db),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(UserRepository(db), password_hasher, token_issuer)


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db))


def get_dashboard_service(db: Session = Depends(get_db)) -> DashboardService:
    return DashboardService(TaskRepository(db))
