"""
Student Registry REST API.

Serves the registry over HTTP; the caller identity travels in a request
header (x-caller-id by default).
"""

__all__ = ["create_app"]

from student_registry.api.app import create_app
