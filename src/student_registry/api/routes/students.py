"""
Student endpoints.

Register, rename and look up student records.
"""

import logging

from fastapi import APIRouter, Depends, status

from student_registry.api.dependencies import get_caller, get_registry
from student_registry.api.schemas.requests import RegisterStudentRequest, UpdateStudentRequest
from student_registry.api.schemas.responses import (
    OperationResponse,
    StudentExistsResponse,
    StudentResponse,
)
from student_registry.registry.service import StudentRegistry

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=OperationResponse, status_code=status.HTTP_201_CREATED)
async def register_student(
    request: RegisterStudentRequest,
    caller: str = Depends(get_caller),
    registry: StudentRegistry = Depends(get_registry),
) -> OperationResponse:
    """
    Register a new student.

    Raises:
        NotAuthorizedError: Caller is not the owner (403)
        InvalidIdError / InvalidNameError: Bad id or name (400)
        StudentExistsError: Id already registered (409)
    """
    result = registry.register_student(caller, request.id, request.name)
    return OperationResponse.from_result(result)


# Specific routes must be defined before parameterized routes
@router.get("/{student_id}/exists", response_model=StudentExistsResponse)
async def student_exists(
    student_id: int,
    registry: StudentRegistry = Depends(get_registry),
) -> StudentExistsResponse:
    """Check whether a student id is registered."""
    return StudentExistsResponse(id=student_id, exists=registry.student_exists(student_id))


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(
    student_id: int,
    registry: StudentRegistry = Depends(get_registry),
) -> StudentResponse:
    """
    Get a student's name.

    Raises:
        InvalidIdError: Id out of range (400)
        StudentNotFoundError: Id never registered (404)
    """
    name = registry.get_student_name(student_id)
    return StudentResponse(id=student_id, name=name)


@router.put("/{student_id}", response_model=OperationResponse)
async def update_student(
    student_id: int,
    request: UpdateStudentRequest,
    caller: str = Depends(get_caller),
    registry: StudentRegistry = Depends(get_registry),
) -> OperationResponse:
    """
    Rename an existing student.

    Raises:
        NotAuthorizedError: Caller is not the owner (403)
        InvalidIdError / InvalidNameError: Bad id or name (400)
        StudentNotFoundError: Id never registered (404)
    """
    result = registry.update_student_name(caller, student_id, request.new_name)
    return OperationResponse.from_result(result)
