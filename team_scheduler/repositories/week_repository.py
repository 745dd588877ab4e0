# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: per-user WeekMap data access.
One instance holds committed schedules, another permanent availability.
"""

from typing import Optional

from team_scheduler.models.domain import WeekMap, copy_week


class WeekRepository:
    """In-memory storage of one WeekMap per user."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._store: dict[int, WeekMap] = {}

    # ── Read ──

    def get_by_user(self, user_id: int) -> Optional[WeekMap]:
        week = self._store.get(user_id)
        return copy_week(week) if week is not None else None

    def exists(self, user_id: int) -> bool:
        return user_id in self._store

    # ── Write ──

    def save(self, user_id: int, week: WeekMap) -> None:
        self._store[user_id] = copy_week(week)

    def delete(self, user_id: int) -> Optional[WeekMap]:
        return self._store.pop(user_id, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
