"""
Student Registry Core Module.

Provides the error taxonomy, bounds and event models for the registry.
"""

__all__ = [
    "Identity",
    "NAME_MAX_LENGTH",
    "STUDENT_ID_MAX",
    "STUDENT_ID_MIN",
    "EventType",
    "OperationResult",
    "OwnerChanged",
    "RegistryEvent",
    "RegistryOperation",
    "StudentRegistered",
    "StudentUpdated",
    # Exceptions
    "StudentRegistryError",
    "NotAuthorizedError",
    "InvalidIdError",
    "InvalidNameError",
    "StudentExistsError",
    "StudentNotFoundError",
    "RegistryStateError",
    "StoreError",
    "ChecksumMismatchError",
    "ConfigurationError",
]

from student_registry.core.exceptions import (
    ChecksumMismatchError,
    ConfigurationError,
    InvalidIdError,
    InvalidNameError,
    NotAuthorizedError,
    RegistryStateError,
    StoreError,
    StudentExistsError,
    StudentNotFoundError,
    StudentRegistryError,
)
from student_registry.core.models import (
    NAME_MAX_LENGTH,
    STUDENT_ID_MAX,
    STUDENT_ID_MIN,
    EventType,
    Identity,
    OperationResult,
    OwnerChanged,
    RegistryEvent,
    RegistryOperation,
    StudentRegistered,
    StudentUpdated,
)
