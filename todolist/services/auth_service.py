"""Login flow: credential verification followed by token issuance."""

import logging
from dataclasses import dataclass
from datetime import datetime

from todolist.auth.jwt import TokenIssuer
from todolist.auth.passwords import PasswordHasher
from todolist.common.result import Result
from todolist.database.user_repository import UserRepository
from todolist.models.constants import INVALID_CREDENTIALS_MESSAGE
from todolist.validation import validate_login

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Successful login payload."""
    token: str
    email: str
    full_name: str
    expires_at: datetime


class AuthService:
    """Authenticates users by email and password."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_issuer = token_issuer

    def login(self, email: str, password: str) -> Result[LoginResult]:
        """Verify credentials and issue an access token.

        An unknown email and a wrong password produce the same failure, so
        callers cannot tell which one happened.
        """
        errors = validate_login(email, password)
        if errors:
            return Result.failure(errors=errors)

        user = self.user_repository.get_by_email(email)
        if user is None:
            logger.info("Login rejected: invalid credentials")
            return Result.unauthenticated(INVALID_CREDENTIALS_MESSAGE)

        if not self.password_hasher.verify(password, user.password_hash):
            logger.info("Login rejected: invalid credentials")
            return Result.unauthenticated(INVALID_CREDENTIALS_MESSAGE)

        issued = self.token_issuer.issue(user)
        logger.info(f"Login succeeded for user {user.id}")
        return Result.success(
            LoginResult(
                token=issued.token,
                email=user.email,
                full_name=user.full_name,
                expires_at=issued.expires_at,
            )
        )
