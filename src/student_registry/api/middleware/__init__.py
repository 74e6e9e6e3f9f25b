"""
API middleware.
"""

__all__ = ["RequestLoggingMiddleware"]

from student_registry.api.middleware.logging import RequestLoggingMiddleware
