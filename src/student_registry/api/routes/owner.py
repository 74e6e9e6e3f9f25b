"""
Ownership endpoints.
"""

from fastapi import APIRouter, Depends

from student_registry.api.dependencies import get_caller, get_registry
from student_registry.api.schemas.requests import SetOwnerRequest
from student_registry.api.schemas.responses import OperationResponse, OwnerResponse
from student_registry.registry.service import StudentRegistry

router = APIRouter()


@router.get("", response_model=OwnerResponse)
async def get_owner(registry: StudentRegistry = Depends(get_registry)) -> OwnerResponse:
    """Return the current registry owner."""
    return OwnerResponse(owner=registry.get_owner())


@router.put("", response_model=OperationResponse)
async def set_owner(
    request: SetOwnerRequest,
    caller: str = Depends(get_caller),
    registry: StudentRegistry = Depends(get_registry),
) -> OperationResponse:
    """Transfer ownership. Only the current owner may call this."""
    result = registry.set_owner(caller, request.new_owner)
    return OperationResponse.from_result(result)
