"""
Student Registry Service Module.

Owner-gated create, update and lookup of student records.
"""

__all__ = [
    "StudentRegistry",
    "is_valid_student_id",
    "is_valid_student_name",
]

from student_registry.registry.service import (
    StudentRegistry,
    is_valid_student_id,
    is_valid_student_name,
)
