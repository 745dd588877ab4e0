# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Temporary (date-specific) availability endpoints.
Thin HTTP layer, delegates ALL logic to AvailabilityService.
"""

from fastapi import APIRouter, Depends

from team_scheduler.core.dependencies import get_availability_service
from team_scheduler.schemas.scheduler import (
    TemporaryAvailabilityRequest,
    TemporaryAvailabilityResponse,
)
from team_scheduler.services.availability_service import AvailabilityService

router = APIRouter(prefix="/api/users/{user_id}", tags=["Availability"])


@router.get(
    "/temporary-availability", response_model=TemporaryAvailabilityResponse
)
def get_temporary_availability(
    user_id: int,
    service: AvailabilityService = Depends(get_availability_service),
):
    """All date-specific overrides for a team member."""
    return service.get_overrides(user_id)


@router.put("/temporary-availability")
def set_temporary_availability(
    user_id: int,
    payload: TemporaryAvailabilityRequest,
    service: AvailabilityService = Depends(get_availability_service),
):
    """Set or overwrite the override for one date."""
    return service.set_override(user_id, payload.date, payload.availability)


@router.delete("/temporary-availability/{date}")
def remove_temporary_availability(
    user_id: int,
    date: str,
    service: AvailabilityService = Depends(get_availability_service),
):
    """Remove the override for a date. Succeeds even if none was set."""
    return service.remove_override(user_id, date)
