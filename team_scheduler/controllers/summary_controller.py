# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Weekly summary and time-slot picker endpoints.
"""

from fastapi import APIRouter, Depends

from team_scheduler.core.dependencies import get_summary_service
from team_scheduler.schemas.scheduler import WeeklySummaryResponse
from team_scheduler.services.summary_service import SummaryService
from team_scheduler.services.time_slots import display_time_slots

router = APIRouter(prefix="/api", tags=["Summary"])


@router.get("/weekly-summary", response_model=WeeklySummaryResponse)
def weekly_summary(
    service: SummaryService = Depends(get_summary_service),
):
    """Per-member daily and weekly hours plus the team's grand total."""
    return service.weekly_summary()


@router.get("/time-slots", response_model=list[str])
def time_slots():
    """Clock times the client offers when editing a schedule."""
    return display_time_slots()
