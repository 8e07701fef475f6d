"""Constants for todolist.

This module centralizes field limits and fixed messages used throughout the application.
"""


# Field limits
TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000
PASSWORD_MIN_LENGTH = 6

# Failure messages
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"  # same for unknown email and wrong password
TASK_NOT_FOUND_MESSAGE = "Task not found"  # same for missing and not-owned tasks
