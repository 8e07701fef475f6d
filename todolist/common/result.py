"""Result envelope returned by every service operation.

Services report expected negative outcomes (not found, bad credentials,
invalid input) as a failed Result instead of raising. Exceptions are
reserved for conditions the system cannot handle as designed.
"""

from typing import Generic, List, Optional, TypeVar

from todolist.common.errors import ErrorKind

T = TypeVar("T")


class Result(Generic[T]):
    """Tagged success/failure outcome."""

    __slots__ = ("_is_success", "_value", "message", "errors", "kind")

    def __init__(
        self,
        is_success: bool,
        value: Optional[T] = None,
        message: Optional[str] = None,
        errors: Optional[List[str]] = None,
        kind: Optional[ErrorKind] = None,
    ):
        if is_success and (message is not None or errors):
            raise ValueError("A successful result cannot carry an error message")
        if not is_success and not message:
            raise ValueError("A failed result requires an error message")
        if not is_success and not errors:
            errors = [message]
        self._is_success = is_success
        self._value = value
        self.message = message
        self.errors = list(errors or [])
        self.kind = kind

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(True, value=value)

    @classmethod
    def failure(
        cls,
        message: Optional[str] = None,
        *,
        errors: Optional[List[str]] = None,
        kind: ErrorKind = ErrorKind.VALIDATION,
    ) -> "Result[T]":
        """Build a failed result.

        Either a single message or a list of granular errors must be given.
        With only `errors`, the message is the errors joined by ", ".
        With only `message`, the errors list is `[message]`.
        """
        if errors:
            errors = list(errors)
            if message is None:
                message = ", ".join(errors)
        elif message:
            errors = [message]
        else:
            raise ValueError("failure() needs a message or a non-empty errors list")
        return cls(False, message=message, errors=errors, kind=kind)

    @classmethod
    def not_found(cls, message: str) -> "Result[T]":
        return cls.failure(message, kind=ErrorKind.NOT_FOUND)

    @classmethod
    def unauthenticated(cls, message: str) -> "Result[T]":
        return cls.failure(message, kind=ErrorKind.UNAUTHENTICATED)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        """Success value; raises if this is a failure."""
        if not self._is_success:
            raise ValueError(f"Failed result has no value: {self.message}")
        return self._value

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self.message!r}, kind={self.kind})"
