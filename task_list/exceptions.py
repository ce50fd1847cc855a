"""Custom exceptions for the task list application.

A missing task is not an exception here: the repository returns None/False
and the controller reports it as a message.
"""

from __future__ import annotations


class TaskListError(Exception):
    """Base exception for all task list errors."""


class ConfigError(TaskListError):
    """Configuration errors (missing file, bad YAML, unknown keys or values)."""

    def __init__(self, message: str, path: str | None = None) -> None:
        """Initialize config error with the offending file path, if any."""
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
