# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: full-week records per user.
The same logic backs the committed schedule and the permanent
availability; each instance is bound to one of the two stores.
"""

from typing import Any

from team_scheduler.core.logging import get_logger
from team_scheduler.metrics.prometheus import WEEK_UPDATES
from team_scheduler.models.domain import dump_week, empty_week
from team_scheduler.repositories.store import SCHEDULE, SchedulerStore
from team_scheduler.services.directory_service import DirectoryService
from team_scheduler.services.time_slots import week_total
from team_scheduler.services.validation import parse_week

logger = get_logger(__name__)


class WeekService:
    """Read and replace one kind of WeekMap for a user."""

    def __init__(self, store: SchedulerStore, kind: str = SCHEDULE) -> None:
        self._store = store
        self._directory = DirectoryService(store)
        self._weeks = store.weeks(kind)
        self.kind = kind
        # Response field holding the week: "schedule" or "availability".
        self.field = "schedule" if kind == SCHEDULE else "availability"

    def get_week(self, user_id: int) -> dict[str, Any]:
        """Return the user's week and its total hours. Raises NotFoundError."""
        with self._store.lock:
            user = self._directory.get_user(user_id)
            week = self._weeks.get_by_user(user_id) or empty_week()
        return self._render(user.id, user.name, week)

    def set_week(self, user_id: int, raw_week: Any) -> dict[str, Any]:
        """
        Replace the user's whole week.
        Raises NotFoundError for an unknown user and ValidationError for a
        malformed week; nothing is stored unless the whole week is valid.
        """
        with self._store.lock:
            user = self._directory.get_user(user_id)
            week = parse_week(raw_week, label=self.field)
            self._weeks.save(user_id, week)

        WEEK_UPDATES.labels(kind=self.kind).inc()
        result = self._render(user.id, user.name, week)
        logger.info(
            "Week replaced: kind=%s, user_id=%d, total_hours=%s",
            self.kind, user_id, result["totalHours"],
            extra={"user_id": user_id},
        )
        return result

    def _render(self, user_id: int, user_name: str, week) -> dict[str, Any]:
        return {
            "userId": user_id,
            "userName": user_name,
            self.field: dump_week(week),
            "totalHours": week_total(week),
        }
