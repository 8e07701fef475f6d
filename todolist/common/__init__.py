"""Shared building blocks for todolist."""

from todolist.common.errors import ConfigurationError, ErrorKind
from todolist.common.result import Result

__all__ = [
    "ConfigurationError",
    "ErrorKind",
    "Result",
]
