"""
API request/response schemas and error mapping.
"""

__all__ = [
    "HealthResponse",
    "OperationResponse",
    "OwnerResponse",
    "RegisterStudentRequest",
    "SetOwnerRequest",
    "StudentExistsResponse",
    "StudentResponse",
    "UpdateStudentRequest",
    "error_body",
    "status_code_for",
]

from student_registry.api.schemas.exceptions import error_body, status_code_for
from student_registry.api.schemas.requests import (
    RegisterStudentRequest,
    SetOwnerRequest,
    UpdateStudentRequest,
)
from student_registry.api.schemas.responses import (
    HealthResponse,
    OperationResponse,
    OwnerResponse,
    StudentExistsResponse,
    StudentResponse,
)
