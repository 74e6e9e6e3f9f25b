"""
API route modules.
"""

__all__ = ["health", "owner", "students"]

from student_registry.api.routes import health, owner, students
