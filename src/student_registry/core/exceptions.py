"""
Student Registry Exception Hierarchy.

Defines the error taxonomy returned by registry operations and the
host-side errors raised by stores and configuration loading.
"""

from typing import Any


class StudentRegistryError(Exception):
    """
    Base exception for all Student Registry errors.

    Every error carries a stable ``code`` that hosts surface to their
    clients, so callers can branch on it without parsing messages.
    """

    code: str = "RegistryError"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None):
        """
        Initialize a StudentRegistryError.

        Args:
            message: Human-readable error message
            details: Optional structured data for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation with details."""
        base = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{base} ({details_str})"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotAuthorizedError(StudentRegistryError):
    """Raised when the caller is not the current owner."""

    code = "NotAuthorized"

    def __init__(
        self,
        message: str = "Caller is not the registry owner",
        *,
        caller: str | None = None,
        operation: str | None = None,
    ):
        details: dict[str, Any] = {}
        if caller is not None:
            details["caller"] = caller
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details)
        self.caller = caller
        self.operation = operation


class InvalidIdError(StudentRegistryError):
    """Raised when a student id falls outside the accepted range."""

    code = "InvalidId"

    def __init__(self, message: str = "Invalid student id", *, student_id: Any = None):
        super().__init__(message, details={"student_id": student_id})
        self.student_id = student_id


class InvalidNameError(StudentRegistryError):
    """Raised when a student name is empty or too long."""

    code = "InvalidName"

    def __init__(self, message: str = "Invalid student name", *, length: int | None = None):
        details: dict[str, Any] = {}
        if length is not None:
            details["length"] = length
        super().__init__(message, details=details)
        self.length = length


class StudentExistsError(StudentRegistryError):
    """Raised when registering an id that is already present."""

    code = "StudentExists"

    def __init__(self, message: str = "Student already exists", *, student_id: int | None = None):
        super().__init__(message, details={"student_id": student_id})
        self.student_id = student_id


class StudentNotFoundError(StudentRegistryError):
    """Raised when updating or reading an id that was never registered."""

    code = "StudentNotFound"

    def __init__(self, message: str = "Student not found", *, student_id: int | None = None):
        super().__init__(message, details={"student_id": student_id})
        self.student_id = student_id


class RegistryStateError(StudentRegistryError):
    """
    Raised when the registry lifecycle is violated.

    Covers initializing a registry twice and operating on a store
    that has never been initialized with an owner.
    """

    code = "RegistryState"


class StoreError(StudentRegistryError):
    """
    Errors in the persistent store backing a registry.

    Raised when a durable snapshot cannot be read or parsed.
    """

    code = "StoreError"

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details=details)
        self.path = path


class ChecksumMismatchError(StoreError):
    """Raised when a stored snapshot does not match its recorded checksum."""

    code = "ChecksumMismatch"

    def __init__(
        self,
        message: str = "Checksum mismatch",
        *,
        path: str | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ):
        super().__init__(
            message,
            path=path,
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class ConfigurationError(StudentRegistryError):
    """
    Errors in configuration loading or validation.

    Raised when an environment variable holds a value that cannot be
    coerced to the expected type.
    """

    code = "ConfigurationError"

    def __init__(
        self,
        message: str,
        *,
        env_var: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if env_var:
            details["env_var"] = env_var
        super().__init__(message, details=details)
        self.env_var = env_var


def format_exception(error: Exception) -> str:
    """
    Format an exception for user-friendly display.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, StudentRegistryError):
        return f"{error.code}: {error}"
    return f"{error.__class__.__name__}: {error}"
