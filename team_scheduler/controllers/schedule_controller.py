# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Weekly schedule and permanent availability endpoints.
Thin HTTP layer, delegates ALL logic to WeekService.
"""

from fastapi import APIRouter, Depends

from team_scheduler.core.dependencies import (
    get_permanent_availability_service,
    get_schedule_service,
)
from team_scheduler.schemas.scheduler import (
    AvailabilityResponse,
    AvailabilityUpdateRequest,
    ScheduleResponse,
    ScheduleUpdateRequest,
)
from team_scheduler.services.week_service import WeekService

router = APIRouter(prefix="/api/users/{user_id}", tags=["Schedules"])


# ── Committed Schedule ──

@router.get("/schedule", response_model=ScheduleResponse)
def get_schedule(
    user_id: int,
    service: WeekService = Depends(get_schedule_service),
):
    """Get a team member's schedule for the week."""
    return service.get_week(user_id)


@router.put("/schedule", response_model=ScheduleResponse)
def update_schedule(
    user_id: int,
    payload: ScheduleUpdateRequest,
    service: WeekService = Depends(get_schedule_service),
):
    """Replace a team member's whole weekly schedule."""
    return service.set_week(user_id, payload.schedule)


# ── Permanent Availability ──

@router.get("/permanent-availability", response_model=AvailabilityResponse)
def get_permanent_availability(
    user_id: int,
    service: WeekService = Depends(get_permanent_availability_service),
):
    """Get a team member's recurring availability."""
    return service.get_week(user_id)


@router.put("/permanent-availability", response_model=AvailabilityResponse)
def update_permanent_availability(
    user_id: int,
    payload: AvailabilityUpdateRequest,
    service: WeekService = Depends(get_permanent_availability_service),
):
    """Replace a team member's recurring availability."""
    return service.set_week(user_id, payload.availability)
