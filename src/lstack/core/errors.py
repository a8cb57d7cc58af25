"""
Exception taxonomy for large stack operations.

- InvalidArgumentError: bad input detected before any remote call
- RemoteOperationError: failure reported by the remote executor
- DecodeError: remote result does not have the promised shape
"""

from typing import Any, Optional

__all__ = [
    "LargeStackError",
    "InvalidArgumentError",
    "RemoteOperationError",
    "DecodeError",
]


class LargeStackError(Exception):
    """Base class for all lstack errors."""


class InvalidArgumentError(LargeStackError, ValueError):
    """A required argument is missing or out of range."""


class RemoteOperationError(LargeStackError):
    """
    The executor failed while running a remote function.

    Covers network faults, server-side errors, missing stacks, permission
    failures and capacity rejections alike. No finer classification is made.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"{self.code}: {self.message}"
        return self.message


class DecodeError(LargeStackError, TypeError):
    """A remote result could not be interpreted as the expected type."""

    def __init__(self, message: str, result: Any = None):
        super().__init__(message)
        self.result = result
