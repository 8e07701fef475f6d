"""Input validation for todolist requests.

Each function returns a list of human-readable error strings; an empty
list means the input is valid. Services call these before touching the
store and turn a non-empty list into a failed Result.
"""

import re
from typing import List, Optional

from todolist.models.constants import (
    TITLE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)

# Pragmatic shape check (local@domain.tld); deliverability is not checked.
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_login(email: Optional[str], password: Optional[str]) -> List[str]:
    errors: List[str] = []
    if not email or not email.strip():
        errors.append("Email is required")
    elif not _EMAIL_RE.match(email.strip()):
        errors.append("Invalid email format")

    if not password:
        errors.append("Password is required")
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    return errors


def validate_task_create(title: Optional[str], description: Optional[str]) -> List[str]:
    errors: List[str] = []
    if not title or not title.strip():
        errors.append("Title is required")
    elif len(title) > TITLE_MAX_LENGTH:
        errors.append(f"Title must not exceed {TITLE_MAX_LENGTH} characters")

    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters")
    return errors


def validate_task_update(title: Optional[str], description: Optional[str]) -> List[str]:
    """Validate a partial update. Absent or empty fields are not checked."""
    errors: List[str] = []
    if title and len(title) > TITLE_MAX_LENGTH:
        errors.append(f"Title must not exceed {TITLE_MAX_LENGTH} characters")
    if description and len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters")
    return errors
