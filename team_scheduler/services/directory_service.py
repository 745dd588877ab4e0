# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: User directory, business logic for team member CRUD.
Creating or deleting a user creates or deletes all of that user's
schedule and availability records in the same locked step.
"""

from typing import Any, Optional

from team_scheduler.core.config import settings
from team_scheduler.core.errors import NotFoundError, ValidationError
from team_scheduler.core.logging import get_logger
from team_scheduler.metrics.prometheus import ACTIVE_USERS, USERS_CREATED, USERS_DELETED
from team_scheduler.models.domain import User, empty_week
from team_scheduler.repositories.store import SchedulerStore
from team_scheduler.services.validation import parse_week

logger = get_logger(__name__)


def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


class DirectoryService:
    """Business logic for the team member directory."""

    def __init__(self, store: SchedulerStore) -> None:
        self._store = store

    # ── Commands ──

    def add_user(
        self,
        name: Optional[str],
        email: Optional[str] = None,
        role: Optional[str] = None,
    ) -> User:
        """Create a user with empty schedule and availability. Raises ValidationError."""
        clean_name = _clean(name)
        if not clean_name:
            raise ValidationError("Name is required")

        with self._store.lock:
            user = User(
                id=self._store.users.allocate_id(),
                name=clean_name,
                email=_clean(email),
                role=_clean(role) or settings.DEFAULT_ROLE,
            )
            self._store.users.save(user)
            self._store.schedules.save(user.id, empty_week())
            self._store.permanent_availability.save(user.id, empty_week())
            self._store.temporary_availability.init_user(user.id)
            ACTIVE_USERS.set(self._store.users.count())

        USERS_CREATED.inc()
        logger.info("User created: id=%d, name=%s, role=%s", user.id, user.name, user.role)
        return user

    def delete_user(self, user_id: int) -> dict[str, Any]:
        """Delete a user and every record keyed by it. Raises NotFoundError."""
        with self._store.lock:
            user = self._store.users.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")
            self._store.users.delete(user_id)
            self._store.schedules.delete(user_id)
            self._store.permanent_availability.delete(user_id)
            self._store.temporary_availability.delete_user(user_id)
            ACTIVE_USERS.set(self._store.users.count())

        USERS_DELETED.inc()
        logger.info("User deleted: id=%d, name=%s", user_id, user.name)
        return {"message": f"User '{user.name}' deleted", "userId": user_id}

    # ── Queries ──

    def list_users(self) -> list[User]:
        with self._store.lock:
            return self._store.users.get_all()

    def get_user(self, user_id: int) -> User:
        """Look up one user. Raises NotFoundError."""
        with self._store.lock:
            user = self._store.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    # ── Seed ──

    def seed_defaults(self) -> None:
        """Create the default team so the service is usable immediately."""
        nine_to_five = [{"start": "09:00", "end": "17:00"}]
        default_users = [
            {
                "name": "John Doe",
                "email": "john.doe@example.com",
                "role": "Team Lead",
                "schedule": {
                    "monday": nine_to_five,
                    "tuesday": [
                        {"start": "09:00", "end": "12:30"},
                        {"start": "13:00", "end": "17:00"},
                    ],
                    "wednesday": nine_to_five,
                    "thursday": [{"start": "10:00", "end": "16:00"}],
                    "friday": nine_to_five,
                    "saturday": [],
                    "sunday": [],
                },
            },
            {
                "name": "Jane Smith",
                "email": "jane.smith@example.com",
                "role": "Developer",
                "schedule": {
                    "monday": nine_to_five,
                    "tuesday": nine_to_five,
                    "wednesday": [{"start": "09:00", "end": "13:00"}],
                    "thursday": nine_to_five,
                    "friday": nine_to_five,
                    "saturday": [{"start": "10:00", "end": "14:00"}],
                    "sunday": [],
                },
            },
            {
                "name": "Mike Johnson",
                "email": "mike.johnson@example.com",
                "role": "Designer",
                "schedule": {
                    "monday": [{"start": "12:00", "end": "18:00"}],
                    "tuesday": [
                        {"start": "08:00", "end": "12:00"},
                        {"start": "13:00", "end": "17:00"},
                    ],
                    "wednesday": nine_to_five,
                    "thursday": nine_to_five,
                    "friday": [{"start": "09:00", "end": "16:00"}],
                    "saturday": [],
                    "sunday": [{"start": "10:00", "end": "13:00"}],
                },
            },
        ]
        with self._store.lock:
            for seed in default_users:
                user = self.add_user(seed["name"], seed["email"], seed["role"])
                self._store.schedules.save(user.id, parse_week(seed["schedule"]))
        logger.info("Seeded %d default team members", len(default_users))
