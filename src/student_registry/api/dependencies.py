"""
Request dependencies: the shared registry and the caller identity.
"""

from fastapi import Request

from student_registry.config import RegistryConfig
from student_registry.core.exceptions import NotAuthorizedError
from student_registry.registry.service import StudentRegistry


def get_registry(request: Request) -> StudentRegistry:
    """Return the registry attached to the application."""
    return request.app.state.registry


def get_caller(request: Request) -> str:
    """
    Read the caller identity from the configured header.

    Raises:
        NotAuthorizedError: If the header is missing or blank
    """
    config: RegistryConfig = request.app.state.config
    caller = request.headers.get(config.caller_header, "").strip()
    if not caller:
        raise NotAuthorizedError(
            f"Missing caller identity header '{config.caller_header}'",
        )
    return caller
