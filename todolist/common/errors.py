"""Error kinds and exceptional conditions for todolist."""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of an expected (non-exceptional) failure."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHENTICATED = "unauthenticated"


class ConfigurationError(RuntimeError):
    """Raised when the application is misconfigured (fatal at startup)."""
