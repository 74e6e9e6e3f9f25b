"""
Health check endpoint.
"""

from fastapi import APIRouter, Depends

from student_registry import __version__
from student_registry.api.dependencies import get_registry
from student_registry.api.schemas.responses import HealthResponse
from student_registry.registry.service import StudentRegistry

router = APIRouter()


@router.get("", response_model=HealthResponse)
@router.get("/", response_model=HealthResponse, include_in_schema=False)
async def health_check(registry: StudentRegistry = Depends(get_registry)) -> HealthResponse:
    """Report whether the registry is initialized and how many students it holds."""
    initialized = registry.is_initialized
    return HealthResponse(
        status="healthy" if initialized else "uninitialized",
        version=__version__,
        initialized=initialized,
        student_count=registry.store.student_count(),
    )
