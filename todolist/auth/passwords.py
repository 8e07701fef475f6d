"""Password hashing and verification (bcrypt via passlib)."""

import logging

from passlib.context import CryptContext

from todolist.config import DEFAULT_BCRYPT_ROUNDS

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Hashes and verifies passwords with bcrypt.

    The salt and work factor are embedded in each hash, so verification
    only needs the stored hash.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Returns False for a mismatch and for a stored hash that is not a
        recognizable bcrypt hash.
        """
        if not password or not password_hash:
            return False
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError) as e:
            logger.warning(f"Stored password hash could not be verified: {type(e).__name__}")
            return False
