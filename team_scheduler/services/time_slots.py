# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Time-slot arithmetic, pure computation over clock times.
"""

from typing import Iterable

from team_scheduler.core.config import settings
from team_scheduler.core.logging import get_logger
from team_scheduler.metrics.prometheus import SLOT_INTEGRITY_WARNINGS
from team_scheduler.models.domain import WEEKDAYS, TimeSlot, WeekMap

logger = get_logger(__name__)

MINUTES_PER_DAY = 24 * 60


def parse_clock(value: str) -> int:
    """Convert "HH:MM" into minutes since midnight."""
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def format_clock(minutes: int) -> str:
    """Convert minutes since midnight back into "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def slot_minutes(slot: TimeSlot) -> int:
    """
    Length of a slot in minutes.
    A negative length can only come from data that bypassed write
    validation; it counts as zero and is reported.
    """
    duration = parse_clock(slot.end) - parse_clock(slot.start)
    if duration < 0:
        SLOT_INTEGRITY_WARNINGS.inc()
        logger.warning(
            "Negative slot duration ignored: start=%s, end=%s", slot.start, slot.end
        )
        return 0
    return duration


def total_hours(slots: Iterable[TimeSlot]) -> float:
    """Total hours covered by a list of slots. Overlaps are counted twice."""
    return sum(slot_minutes(slot) for slot in slots) / 60


def week_hours(week: WeekMap) -> dict[str, float]:
    """Per-day hours for every weekday, in weekday order."""
    return {day: total_hours(week.get(day, [])) for day in WEEKDAYS}


def week_total(week: WeekMap) -> float:
    return sum(week_hours(week).values())


def display_time_slots(
    start: str | None = None,
    end: str | None = None,
    step_minutes: int | None = None,
) -> list[str]:
    """
    Clock times offered by the client's pickers: every ``step_minutes``
    from ``start`` up to and including ``end``.
    """
    first = parse_clock(start or settings.TIME_SLOT_START)
    last = parse_clock(end or settings.TIME_SLOT_END)
    step = step_minutes or settings.TIME_SLOT_STEP_MINUTES
    if step <= 0:
        raise ValueError("step_minutes must be positive")
    return [
        format_clock(minute)
        for minute in range(first, min(last, MINUTES_PER_DAY - 1) + 1, step)
    ]
