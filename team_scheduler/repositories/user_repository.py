# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: User directory data access.
Insertion-ordered in-memory store plus the id sequence.
NO business rules here, pure CRUD.
"""

from typing import Optional

from team_scheduler.models.domain import User


class UserRepository:
    """In-memory user storage."""

    def __init__(self) -> None:
        self._store: dict[int, User] = {}
        self._next_id = 1

    # ── Read ──

    def get_all(self) -> list[User]:
        return list(self._store.values())

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._store.get(user_id)

    def count(self) -> int:
        return len(self._store)

    # ── Write ──

    def allocate_id(self) -> int:
        """Hand out the next id. Ids are never reused, even after deletes."""
        user_id = self._next_id
        self._next_id += 1
        return user_id

    def save(self, user: User) -> None:
        self._store[user.id] = user
        self._next_id = max(self._next_id, user.id + 1)

    def delete(self, user_id: int) -> Optional[User]:
        return self._store.pop(user_id, None)

    # ── Bulk / internal ──

    def clear(self) -> None:
        self._store.clear()
        self._next_id = 1
