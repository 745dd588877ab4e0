# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: input validation for week maps, partial weeks and dates.
Everything here runs before any store mutation; failures raise
``ValidationError`` with a message naming the offending day or field.
"""

import re
from datetime import date as date_type
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from team_scheduler.core.errors import ValidationError
from team_scheduler.models.domain import WEEKDAYS, TimeSlot, WeekMap

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _describe(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    message = error["msg"].removeprefix("Value error, ")
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {message}" if field else message


def _parse_slots(raw: Any, day: str, label: str) -> list[TimeSlot]:
    if not isinstance(raw, list):
        raise ValidationError(
            f"Invalid {label} for {day}: expected a list of time slots"
        )
    slots: list[TimeSlot] = []
    for index, item in enumerate(raw):
        try:
            slots.append(TimeSlot.model_validate(item))
        except PydanticValidationError as exc:
            raise ValidationError(
                f"Invalid {label} for {day}: slot {index} {_describe(exc)}"
            ) from exc
    return slots


def _check_keys(raw: dict[str, Any], label: str) -> None:
    unknown = [key for key in raw if key not in WEEKDAYS]
    if unknown:
        raise ValidationError(
            f"Invalid {label}: unknown day '{unknown[0]}'"
        )


def parse_week(raw: Any, label: str = "schedule") -> WeekMap:
    """Validate a full WeekMap: all seven weekdays, each a list of slots."""
    if raw is None:
        raise ValidationError(f"{label.capitalize()} object is required")
    if not isinstance(raw, dict):
        raise ValidationError(f"{label.capitalize()} must be an object keyed by weekday")
    _check_keys(raw, label)
    week: WeekMap = {}
    for day in WEEKDAYS:
        if day not in raw:
            raise ValidationError(f"Invalid {label} for {day}: day is missing")
        week[day] = _parse_slots(raw[day], day, label)
    return week


def parse_partial_week(raw: Any, label: str = "availability") -> dict[str, list[TimeSlot]]:
    """Validate a partial week: any subset of weekdays, each a list of slots."""
    if raw is None:
        raise ValidationError(f"{label.capitalize()} object is required")
    if not isinstance(raw, dict):
        raise ValidationError(f"{label.capitalize()} must be an object keyed by weekday")
    _check_keys(raw, label)
    return {
        day: _parse_slots(raw[day], day, label)
        for day in WEEKDAYS
        if day in raw
    }


def parse_iso_date(raw: Any) -> str:
    """Validate a calendar date given as YYYY-MM-DD and return it unchanged."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("Date is required")
    if not isinstance(raw, str) or not ISO_DATE_PATTERN.match(raw.strip()):
        raise ValidationError(f"Invalid date '{raw}': expected YYYY-MM-DD")
    value = raw.strip()
    try:
        date_type.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid date '{value}': {exc}") from exc
    return value
