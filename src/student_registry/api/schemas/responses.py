"""
Pydantic response schemas for API endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field

from student_registry.core.models import OperationResult


class OperationResponse(BaseModel):
    """Result of a successful mutation."""

    status: str = "success"
    operation: str
    student_id: int | None = None
    events: list[dict[str, Any]] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: OperationResult) -> "OperationResponse":
        return cls(**result.to_dict())


class StudentResponse(BaseModel):
    """A single student record."""

    id: int
    name: str


class StudentExistsResponse(BaseModel):
    """Presence check for a student id."""

    id: int
    exists: bool


class OwnerResponse(BaseModel):
    """The current registry owner."""

    owner: str


class HealthResponse(BaseModel):
    """Health status of the registry host."""

    status: str
    version: str
    initialized: bool
    student_count: int
