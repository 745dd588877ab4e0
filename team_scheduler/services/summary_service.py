# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Weekly summary, a read-side projection over the directory and
the committed schedules. Recomputed on every request, nothing cached.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from team_scheduler.core.logging import get_logger
from team_scheduler.metrics.prometheus import SUMMARIES_GENERATED
from team_scheduler.models.domain import User, WeekMap, dump_week, empty_week
from team_scheduler.repositories.store import SchedulerStore
from team_scheduler.services.time_slots import week_hours

logger = get_logger(__name__)


def build_weekly_summary(
    users: list[User],
    schedules: dict[int, WeekMap],
    generated_at: Optional[datetime] = None,
) -> dict[str, Any]:
    """
    Per-user hours plus the grand total.
    Pure function: no I/O, no metrics, no logging.
    """
    entries: list[dict[str, Any]] = []
    for user in users:
        week = schedules.get(user.id) or empty_week()
        hours = week_hours(week)
        entries.append({
            "userId": user.id,
            "userName": user.name,
            "userRole": user.role,
            "totalHours": sum(hours.values()),
            "hours": hours,
            "schedule": dump_week(week),
        })
    return {
        "users": entries,
        "grandTotal": sum(e["totalHours"] for e in entries),
        "generatedAt": (generated_at or datetime.now(timezone.utc)).isoformat(),
    }


class SummaryService:
    """Snapshot the store and project it into a weekly summary."""

    def __init__(self, store: SchedulerStore) -> None:
        self._store = store

    def weekly_summary(self) -> dict[str, Any]:
        with self._store.lock:
            users = self._store.users.get_all()
            schedules = {
                user.id: self._store.schedules.get_by_user(user.id) for user in users
            }
        summary = build_weekly_summary(users, schedules)
        SUMMARIES_GENERATED.inc()
        logger.debug(
            "Weekly summary generated: users=%d, grand_total=%s",
            len(summary["users"]), summary["grandTotal"],
        )
        return summary
