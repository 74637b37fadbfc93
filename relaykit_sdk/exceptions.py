"""
Exceptions for the RelayKit SDK.
"""
from typing import Optional


class RelayKitError(Exception):
    """Base exception for all RelayKit SDK errors."""
    pass


class ConfigurationError(RelayKitError):
    """Raised when the SDK is configured with missing or invalid settings."""
    pass


class RelayError(RelayKitError):
    """Base exception for relay service errors."""
    pass


class RelayConnectionError(RelayError):
    """Raised when the relay service cannot be reached."""
    pass


class RelayTimeoutError(RelayError):
    """Raised when a relay operation times out."""
    pass


class RelayResponseError(RelayError):
    """Raised when the relay service returns an error or malformed response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None
    ):
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(message)


class TaskNotFoundError(RelayError):
    """Raised when the relay service does not know a task identifier."""

    def __init__(self, task_id: str):
        self.task_id = task_id
        super().__init__(f"Unknown relay task: {task_id}")
