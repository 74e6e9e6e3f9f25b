"""
HTTP error mapping for registry exceptions.
"""

from fastapi import status

from student_registry.core.exceptions import (
    ChecksumMismatchError,
    InvalidIdError,
    InvalidNameError,
    NotAuthorizedError,
    RegistryStateError,
    StoreError,
    StudentExistsError,
    StudentNotFoundError,
    StudentRegistryError,
)

# Most specific classes first; the first isinstance match wins.
_STATUS_BY_ERROR: list[tuple[type[StudentRegistryError], int]] = [
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (InvalidIdError, status.HTTP_400_BAD_REQUEST),
    (InvalidNameError, status.HTTP_400_BAD_REQUEST),
    (StudentExistsError, status.HTTP_409_CONFLICT),
    (StudentNotFoundError, status.HTTP_404_NOT_FOUND),
    (RegistryStateError, status.HTTP_409_CONFLICT),
    (ChecksumMismatchError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_code_for(error: StudentRegistryError) -> int:
    """Return the HTTP status code used to report ``error``."""
    for error_cls, code in _STATUS_BY_ERROR:
        if isinstance(error, error_cls):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(error: StudentRegistryError) -> dict[str, object]:
    """Build the JSON error envelope for ``error``."""
    return {
        "error": {
            "type": error.code,
            "message": error.message,
            "detail": error.details or None,
        }
    }
