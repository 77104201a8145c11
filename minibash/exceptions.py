"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ListError(BaseAppError):
    """Exception raised when a path cannot be listed.

    Attributes:
        path: The path the caller asked for, as a printable string
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class NotFoundError(ListError):
    """Exception raised when a path cannot be resolved."""

    def __init__(self, path: str, reason: str | None = None):
        super().__init__(
            path, f"cannot access '{path}': {reason or 'No such file or directory'}"
        )


class PermissionDeniedError(ListError):
    """Exception raised when the file system refuses access to a path."""

    def __init__(self, path: str, reason: str | None = None):
        super().__init__(
            path, f"cannot open '{path}': {reason or 'Permission denied'}"
        )


class InvalidNameError(ListError):
    """Exception raised for a file name that cannot be represented as text."""

    def __init__(self, path: str):
        super().__init__(path, f"invalid file name: '{path}'")
