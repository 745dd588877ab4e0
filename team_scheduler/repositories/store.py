# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
The scheduler's in-memory state as one explicit object.

Built once at process start and handed to request handlers through
FastAPI dependency injection. FastAPI runs sync endpoints in a thread
pool, so every mutation, and every snapshot taken by a read, happens
while holding ``lock``.
"""

import threading

from team_scheduler.core.errors import InternalError
from team_scheduler.repositories.override_repository import OverrideRepository
from team_scheduler.repositories.user_repository import UserRepository
from team_scheduler.repositories.week_repository import WeekRepository

SCHEDULE = "schedule"
PERMANENT_AVAILABILITY = "permanent_availability"


class SchedulerStore:
    """Users plus their schedule, permanent and temporary availability."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users = UserRepository()
        self.schedules = WeekRepository(kind=SCHEDULE)
        self.permanent_availability = WeekRepository(kind=PERMANENT_AVAILABILITY)
        self.temporary_availability = OverrideRepository()

    def weeks(self, kind: str) -> WeekRepository:
        if kind == SCHEDULE:
            return self.schedules
        if kind == PERMANENT_AVAILABILITY:
            return self.permanent_availability
        raise InternalError(f"Unknown week kind '{kind}'")

    def clear(self) -> None:
        with self.lock:
            self.users.clear()
            self.schedules.clear()
            self.permanent_availability.clear()
            self.temporary_availability.clear()
