"""
Pydantic request schemas for API endpoints.

Student fields are accepted as raw JSON values: type, range and length
rules are left to the registry so every host reports the same error codes.
"""

from typing import Any

from pydantic import BaseModel, Field


class RegisterStudentRequest(BaseModel):
    """Request to register a new student."""

    id: Any = Field(..., description="Student id (1-1000000)", examples=[123])
    name: Any = Field(..., description="Student name (1-49 characters)", examples=["Alice Smith"])

    model_config = {"extra": "forbid"}


class UpdateStudentRequest(BaseModel):
    """Request to rename an existing student."""

    new_name: Any = Field(..., description="New student name (1-49 characters)")

    model_config = {"extra": "forbid"}


class SetOwnerRequest(BaseModel):
    """Request to transfer registry ownership."""

    new_owner: str = Field(..., min_length=1, description="Identity of the new owner")

    model_config = {"extra": "forbid"}
