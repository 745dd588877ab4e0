# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Temporary availability data access.
Per user, an ISO date maps to a partial week (only the overridden days).
"""

from typing import Optional

from team_scheduler.models.domain import TimeSlot

PartialWeek = dict[str, list[TimeSlot]]


def _copy_partial(partial: PartialWeek) -> PartialWeek:
    return {day: list(slots) for day, slots in partial.items()}


class OverrideRepository:
    """In-memory temporary availability storage."""

    def __init__(self) -> None:
        self._store: dict[int, dict[str, PartialWeek]] = {}

    # ── Read ──

    def get_by_user(self, user_id: int) -> Optional[dict[str, PartialWeek]]:
        overrides = self._store.get(user_id)
        if overrides is None:
            return None
        return {date: _copy_partial(p) for date, p in sorted(overrides.items())}

    def exists(self, user_id: int) -> bool:
        return user_id in self._store

    def count(self) -> int:
        return sum(len(o) for o in self._store.values())

    # ── Write ──

    def init_user(self, user_id: int) -> None:
        self._store.setdefault(user_id, {})

    def save(self, user_id: int, date: str, partial: PartialWeek) -> None:
        self._store.setdefault(user_id, {})[date] = _copy_partial(partial)

    def delete(self, user_id: int, date: str) -> Optional[PartialWeek]:
        return self._store.get(user_id, {}).pop(date, None)

    def delete_user(self, user_id: int) -> Optional[dict[str, PartialWeek]]:
        return self._store.pop(user_id, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
