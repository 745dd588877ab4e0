# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Temporary availability, date-specific exceptions to a user's
permanent availability. Stored alongside the schedule, never folded
into schedule totals or the weekly summary.
"""

from typing import Any

from team_scheduler.core.logging import get_logger
from team_scheduler.metrics.prometheus import TEMPORARY_OVERRIDES
from team_scheduler.models.domain import dump_week
from team_scheduler.repositories.store import SchedulerStore
from team_scheduler.services.directory_service import DirectoryService
from team_scheduler.services.validation import parse_iso_date, parse_partial_week

logger = get_logger(__name__)


class AvailabilityService:
    """Business logic for temporary availability overrides."""

    def __init__(self, store: SchedulerStore) -> None:
        self._store = store
        self._directory = DirectoryService(store)

    # ── Commands ──

    def set_override(self, user_id: int, date: Any, raw_availability: Any) -> dict[str, Any]:
        """
        Set (or overwrite) the override for one date.
        Raises NotFoundError / ValidationError.
        """
        with self._store.lock:
            self._directory.get_user(user_id)
            override_date = parse_iso_date(date)
            partial = parse_partial_week(raw_availability)
            self._store.temporary_availability.save(user_id, override_date, partial)

        TEMPORARY_OVERRIDES.labels(action="set").inc()
        logger.info(
            "Temporary availability set: user_id=%d, date=%s, days=%s",
            user_id, override_date, list(partial.keys()),
            extra={"user_id": user_id},
        )
        return {
            "message": "Temporary availability updated",
            "userId": user_id,
            "date": override_date,
            "availability": dump_week(partial),
        }

    def remove_override(self, user_id: int, date: str) -> dict[str, Any]:
        """Drop the override for a date if present. Raises NotFoundError for unknown users only."""
        with self._store.lock:
            self._directory.get_user(user_id)
            removed = self._store.temporary_availability.delete(user_id, date)

        if removed is not None:
            TEMPORARY_OVERRIDES.labels(action="remove").inc()
            logger.info("Temporary availability removed: user_id=%d, date=%s", user_id, date)
        return {
            "message": "Temporary availability removed",
            "userId": user_id,
            "date": date,
        }

    # ── Queries ──

    def get_overrides(self, user_id: int) -> dict[str, Any]:
        """All overrides of a user keyed by date. Raises NotFoundError."""
        with self._store.lock:
            user = self._directory.get_user(user_id)
            overrides = self._store.temporary_availability.get_by_user(user_id) or {}
        return {
            "userId": user.id,
            "userName": user.name,
            "temporaryAvailability": {
                date: dump_week(partial) for date, partial in overrides.items()
            },
        }
