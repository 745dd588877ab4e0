# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models: pure data structures, NO FastAPI dependency.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from team_scheduler.core.config import settings

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

CLOCK_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class TimeSlot(BaseModel):
    """A half-open clock-time range within a single day."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: str = Field(..., pattern=CLOCK_PATTERN, description="Start time, HH:MM")
    end: str = Field(..., pattern=CLOCK_PATTERN, description="End time, HH:MM")

    @model_validator(mode="after")
    def check_order(self) -> "TimeSlot":
        # Fixed-width 24h strings compare in clock order.
        if self.start >= self.end:
            raise ValueError(
                f"slot start {self.start} must be before end {self.end}"
            )
        return self


WeekMap = dict[str, list[TimeSlot]]


class User(BaseModel):
    """A team member. ``id`` is assigned by the directory and never reused."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    email: str = ""
    role: str = Field(default_factory=lambda: settings.DEFAULT_ROLE)


def empty_week() -> WeekMap:
    """A WeekMap with every weekday present and no slots."""
    return {day: [] for day in WEEKDAYS}


def copy_week(week: WeekMap) -> WeekMap:
    """Snapshot a WeekMap (slots are frozen, so list copies are enough)."""
    return {day: list(week.get(day, [])) for day in WEEKDAYS}


def dump_week(week: dict[str, list[TimeSlot]]) -> dict[str, list[dict[str, str]]]:
    """JSON-ready form of a (full or partial) week map, in weekday order."""
    return {
        day: [slot.model_dump() for slot in week[day]]
        for day in WEEKDAYS
        if day in week
    }
