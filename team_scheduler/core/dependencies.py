# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection: wire the store into services.
The store is built once per process; services are thin views over it.
Tests swap the store through ``app.dependency_overrides[get_store]``.
"""

from fastapi import Depends

from team_scheduler.repositories.store import (
    PERMANENT_AVAILABILITY,
    SCHEDULE,
    SchedulerStore,
)
from team_scheduler.services.availability_service import AvailabilityService
from team_scheduler.services.directory_service import DirectoryService
from team_scheduler.services.summary_service import SummaryService
from team_scheduler.services.week_service import WeekService


def create_store(seed: bool = False) -> SchedulerStore:
    """Build a store, optionally with the default team."""
    store = SchedulerStore()
    if seed:
        DirectoryService(store).seed_defaults()
    return store


# ── Process-wide store (in-memory, created empty, seeded at startup) ──
_store = create_store()


# ── FastAPI dependency functions ──
def get_store() -> SchedulerStore:
    return _store


def get_directory_service(
    store: SchedulerStore = Depends(get_store),
) -> DirectoryService:
    return DirectoryService(store)


def get_schedule_service(
    store: SchedulerStore = Depends(get_store),
) -> WeekService:
    return WeekService(store, kind=SCHEDULE)


def get_permanent_availability_service(
    store: SchedulerStore = Depends(get_store),
) -> WeekService:
    return WeekService(store, kind=PERMANENT_AVAILABILITY)


def get_availability_service(
    store: SchedulerStore = Depends(get_store),
) -> AvailabilityService:
    return AvailabilityService(store)


def get_summary_service(
    store: SchedulerStore = Depends(get_store),
) -> SummaryService:
    return SummaryService(store)
