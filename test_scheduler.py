# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for time-slot arithmetic, input validation and the service layer,
exercised directly without HTTP.
"""

import io
import json
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from prometheus_client import REGISTRY
from pydantic import ValidationError as PydanticValidationError

from team_scheduler.core.dependencies import create_store
from team_scheduler.core.errors import InternalError, NotFoundError, ValidationError
from team_scheduler.core.logging import JSONFormatter
from team_scheduler.middleware import normalize_path
from team_scheduler.models.domain import WEEKDAYS, TimeSlot, User, empty_week
from team_scheduler.repositories.store import PERMANENT_AVAILABILITY, SCHEDULE
from team_scheduler.services.availability_service import AvailabilityService
from team_scheduler.services.directory_service import DirectoryService
from team_scheduler.services.summary_service import SummaryService, build_weekly_summary
from team_scheduler.services.time_slots import (
    display_time_slots,
    parse_clock,
    total_hours,
    week_hours,
    week_total,
)
from team_scheduler.services.validation import parse_iso_date, parse_partial_week, parse_week
from team_scheduler.services.week_service import WeekService


def slot(start, end):
    return TimeSlot(start=start, end=end)


def raw_week(**days):
    base = {day: [] for day in WEEKDAYS}
    base.update(days)
    return base


@contextmanager
def json_log_lines(logger_name):
    """Collect the JSON lines written by one logger."""
    buffer = io.StringIO()
    handler = logging.StreamHandler(buffer)
    handler.setFormatter(JSONFormatter())
    target = logging.getLogger(logger_name)
    target.addHandler(handler)
    lines = []
    try:
        yield lines
    finally:
        target.removeHandler(handler)
        lines.extend(json.loads(line) for line in buffer.getvalue().splitlines())


@pytest.fixture
def store():
    return create_store(seed=True)


@pytest.fixture
def directory(store):
    return DirectoryService(store)


@pytest.fixture
def schedules(store):
    return WeekService(store, kind=SCHEDULE)


# ============================================
# Time-slot arithmetic
# ============================================
class TestTimeSlotArithmetic:
    def test_parse_clock(self):
        assert parse_clock("00:00") == 0
        assert parse_clock("09:30") == 570
        assert parse_clock("23:59") == 1439

    def test_empty_list_is_zero(self):
        assert total_hours([]) == 0

    def test_sum_of_slot_durations(self):
        slots = [slot("09:00", "12:00"), slot("13:00", "17:30"), slot("18:00", "18:15")]
        assert total_hours(slots) == 3 + 4.5 + 0.25

    def test_overlapping_slots_are_not_merged(self):
        assert total_hours([slot("09:00", "12:00"), slot("10:00", "11:00")]) == 4

    def test_negative_duration_counts_as_zero(self):
        broken = TimeSlot.model_construct(start="17:00", end="09:00")
        assert total_hours([broken, slot("09:00", "10:00")]) == 1

    def test_negative_duration_is_reported(self):
        broken = TimeSlot.model_construct(start="17:00", end="09:00")
        before = REGISTRY.get_sample_value("scheduler_slot_integrity_warnings_total") or 0
        with json_log_lines("team_scheduler.services.time_slots") as lines:
            total_hours([broken])
        after = REGISTRY.get_sample_value("scheduler_slot_integrity_warnings_total")
        assert after - before == 1
        assert [line["level"] for line in lines] == ["WARNING"]
        assert "17:00" in lines[0]["message"]

    def test_week_hours_covers_every_day(self):
        week = empty_week()
        week["friday"] = [slot("09:00", "11:00")]
        hours = week_hours(week)
        assert list(hours) == list(WEEKDAYS)
        assert hours["friday"] == 2
        assert week_total(week) == 2

    def test_display_time_slots_defaults(self):
        slots = display_time_slots()
        assert slots[0] == "06:00"
        assert slots[-1] == "22:00"
        assert len(slots) == 33

    def test_display_time_slots_excludes_past_end(self):
        assert display_time_slots("08:00", "09:45", 30) == ["08:00", "08:30", "09:00", "09:30"]

    def test_display_time_slots_rejects_bad_step(self):
        with pytest.raises(ValueError):
            display_time_slots(step_minutes=-5)


# ============================================
# Validation
# ============================================
class TestValidation:
    def test_time_slot_requires_start_before_end(self):
        with pytest.raises(PydanticValidationError):
            TimeSlot(start="10:00", end="09:00")

    def test_parse_week_accepts_full_week(self):
        week = parse_week(raw_week(monday=[{"start": "09:00", "end": "17:00"}]))
        assert week["monday"] == [slot("09:00", "17:00")]
        assert set(week) == set(WEEKDAYS)

    def test_parse_week_requires_every_day(self):
        raw = raw_week()
        del raw["wednesday"]
        with pytest.raises(ValidationError, match="wednesday"):
            parse_week(raw)

    def test_parse_week_names_bad_day(self):
        with pytest.raises(ValidationError, match="monday"):
            parse_week(raw_week(monday=[{"start": "09:00", "end": "08:00"}]))

    def test_parse_week_rejects_missing_and_non_mapping(self):
        with pytest.raises(ValidationError, match="required"):
            parse_week(None)
        with pytest.raises(ValidationError):
            parse_week(["monday"])

    def test_parse_partial_week(self):
        partial = parse_partial_week({"sunday": [{"start": "10:00", "end": "12:00"}]})
        assert list(partial) == ["sunday"]

    def test_slot_with_extra_field_is_rejected(self):
        raw = raw_week(tuesday=[{"start": "09:00", "end": "10:00", "note": "standup"}])
        with pytest.raises(ValidationError, match="tuesday.*note"):
            parse_week(raw)

    def test_parse_partial_week_rejects_unknown_day(self):
        with pytest.raises(ValidationError, match="someday"):
            parse_partial_week({"someday": []})

    def test_parse_iso_date(self):
        assert parse_iso_date("2026-10-19") == "2026-10-19"
        for bad in (None, "", "19/10/2026", "2026-13-01", 20261019):
            with pytest.raises(ValidationError):
                parse_iso_date(bad)


# ============================================
# User directory
# ============================================
class TestDirectoryService:
    def test_seeded_ids(self, directory):
        assert [u.id for u in directory.list_users()] == [1, 2, 3]

    def test_add_user_gets_next_id_and_defaults(self, directory):
        user = directory.add_user("Alex")
        assert user == User(id=4, name="Alex", email="", role="Team Member")

    def test_add_user_blank_name(self, directory, store):
        with pytest.raises(ValidationError):
            directory.add_user("  ")
        assert store.users.count() == 3

    def test_add_user_initializes_all_records(self, directory, store, schedules):
        user = directory.add_user("Alex")
        data = schedules.get_week(user.id)
        assert data["totalHours"] == 0
        assert all(data["schedule"][day] == [] for day in WEEKDAYS)
        assert store.permanent_availability.get_by_user(user.id) == empty_week()
        assert store.temporary_availability.get_by_user(user.id) == {}

    def test_delete_user_cascades(self, directory, schedules, store):
        directory.delete_user(1)
        with pytest.raises(NotFoundError):
            schedules.get_week(1)
        with pytest.raises(NotFoundError):
            WeekService(store, kind=PERMANENT_AVAILABILITY).get_week(1)
        with pytest.raises(NotFoundError):
            AvailabilityService(store).get_overrides(1)

    def test_delete_unknown_user(self, directory):
        with pytest.raises(NotFoundError):
            directory.delete_user(42)

    def test_get_user(self, directory):
        assert directory.get_user(2).name == "Jane Smith"
        with pytest.raises(NotFoundError):
            directory.get_user(42)

    def test_per_user_lookups_use_directory(self, store):
        with patch.object(
            DirectoryService, "get_user", side_effect=NotFoundError("User not found")
        ) as lookup:
            with pytest.raises(NotFoundError):
                WeekService(store).get_week(1)
            with pytest.raises(NotFoundError):
                AvailabilityService(store).get_overrides(1)
        assert lookup.call_count == 2

    def test_concurrent_adds_get_unique_ids(self, directory):
        with ThreadPoolExecutor(max_workers=8) as pool:
            users = list(pool.map(lambda i: directory.add_user(f"User {i}"), range(50)))
        ids = sorted(u.id for u in users)
        assert ids == list(range(4, 54))


# ============================================
# Schedule / permanent availability
# ============================================
class TestWeekService:
    def test_set_then_get_round_trip(self, schedules):
        raw = raw_week(
            monday=[{"start": "09:00", "end": "17:00"}],
            thursday=[{"start": "14:00", "end": "15:00"}, {"start": "07:00", "end": "08:30"}],
        )
        result = schedules.set_week(1, raw)
        fetched = schedules.get_week(1)
        assert fetched["schedule"] == raw
        assert result["totalHours"] == fetched["totalHours"] == 10.5
        assert fetched["totalHours"] == week_total(parse_week(raw))

    def test_failed_set_leaves_week_unchanged(self, schedules):
        before = schedules.get_week(1)
        with pytest.raises(ValidationError, match="monday"):
            schedules.set_week(1, raw_week(monday=[{"start": "09:00", "end": "08:00"}]))
        assert schedules.get_week(1) == before

    def test_unknown_user(self, schedules):
        with pytest.raises(NotFoundError):
            schedules.get_week(99)
        with pytest.raises(NotFoundError):
            schedules.set_week(99, raw_week())

    def test_permanent_availability_is_separate(self, store, schedules):
        availability = WeekService(store, kind=PERMANENT_AVAILABILITY)
        before = schedules.get_week(2)
        result = availability.set_week(2, raw_week(sunday=[{"start": "06:00", "end": "10:00"}]))
        assert result["availability"]["sunday"] == [{"start": "06:00", "end": "10:00"}]
        assert schedules.get_week(2) == before

    def test_unknown_kind(self, store):
        with pytest.raises(InternalError):
            WeekService(store, kind="holidays")


# ============================================
# Temporary availability
# ============================================
class TestAvailabilityService:
    def test_set_and_get(self, store):
        service = AvailabilityService(store)
        service.set_override(1, "2026-10-19", {"monday": [{"start": "12:00", "end": "14:00"}]})
        data = service.get_overrides(1)
        assert data["temporaryAvailability"] == {
            "2026-10-19": {"monday": [{"start": "12:00", "end": "14:00"}]},
        }

    def test_validation_happens_before_write(self, store):
        service = AvailabilityService(store)
        with pytest.raises(ValidationError):
            service.set_override(1, "2026-10-19", {"monday": [{"start": "14:00", "end": "12:00"}]})
        assert service.get_overrides(1)["temporaryAvailability"] == {}

    def test_remove_is_idempotent(self, store):
        service = AvailabilityService(store)
        service.set_override(1, "2026-10-19", {"friday": []})
        service.remove_override(1, "2026-10-19")
        after_first = service.get_overrides(1)
        service.remove_override(1, "2026-10-19")
        assert service.get_overrides(1) == after_first

    def test_unknown_user(self, store):
        service = AvailabilityService(store)
        with pytest.raises(NotFoundError):
            service.set_override(99, "2026-10-19", {"friday": []})
        with pytest.raises(NotFoundError):
            service.remove_override(99, "2026-10-19")


# ============================================
# Weekly summary
# ============================================
class TestWeeklySummary:
    def test_build_summary_is_pure(self):
        users = [User(id=1, name="A"), User(id=2, name="B", role="Developer")]
        schedules = {1: empty_week()}
        schedules[1]["monday"] = [slot("09:00", "17:00")]
        generated_at = datetime(2026, 10, 19, tzinfo=timezone.utc)

        summary = build_weekly_summary(users, schedules, generated_at)

        assert summary["generatedAt"] == generated_at.isoformat()
        assert [e["totalHours"] for e in summary["users"]] == [8, 0]
        assert summary["users"][1]["userRole"] == "Developer"
        assert summary["grandTotal"] == 8
        assert build_weekly_summary(users, schedules, generated_at) == summary

    def test_seeded_summary(self, store):
        summary = SummaryService(store).weekly_summary()
        assert [e["totalHours"] for e in summary["users"]] == [37.5, 40, 40]
        assert summary["grandTotal"] == 117.5

    def test_new_user_contributes_nothing(self, store, directory):
        before = SummaryService(store).weekly_summary()["grandTotal"]
        assert directory.add_user("Alex").id == 4
        assert SummaryService(store).weekly_summary()["grandTotal"] == before

    def test_deleted_user_excluded(self, store, directory):
        directory.delete_user(2)
        summary = SummaryService(store).weekly_summary()
        assert [e["userId"] for e in summary["users"]] == [1, 3]
        assert summary["grandTotal"] == 77.5


# ============================================
# Middleware helpers
# ============================================
class TestNormalizePath:
    def test_ids_and_dates_become_placeholders(self):
        assert (
            normalize_path("/api/users/7/temporary-availability/2026-10-19")
            == "/api/users/{id}/temporary-availability/{date}"
        )

    def test_static_paths_unchanged(self):
        assert normalize_path("/api/weekly-summary") == "/api/weekly-summary"


# ============================================
# JSON logging
# ============================================
class TestJSONFormatter:
    def test_exception_record_carries_stack(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            exc_info = sys.exc_info()
        record = logging.LogRecord(
            "team-scheduler", logging.ERROR, __file__, 1, "Unhandled exception", None, exc_info,
        )
        data = json.loads(JSONFormatter().format(record))
        assert data["error"] == "boom"
        assert data["error_type"] == "RuntimeError"
        assert data["stack"].startswith("Traceback")
        assert "test_exception_record_carries_stack" in data["stack"]

    def test_plain_record_has_no_error_fields(self):
        record = logging.LogRecord(
            "team-scheduler", logging.INFO, __file__, 1, "hello %s", ("team",), None,
        )
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "hello team"
        assert "stack" not in data
        assert "error" not in data
