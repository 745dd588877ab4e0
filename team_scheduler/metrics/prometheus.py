# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics: single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "scheduler_requests_total",
    "Total HTTP requests to the team scheduler",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "scheduler_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "scheduler_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
USERS_CREATED = Counter(
    "scheduler_users_created_total",
    "Total team members added",
)
USERS_DELETED = Counter(
    "scheduler_users_deleted_total",
    "Total team members removed",
)
ACTIVE_USERS = Gauge(
    "scheduler_active_users",
    "Number of team members in the directory",
)
WEEK_UPDATES = Counter(
    "scheduler_week_updates_total",
    "Total full-week replacements",
    ["kind"],
)
TEMPORARY_OVERRIDES = Counter(
    "scheduler_temporary_overrides_total",
    "Temporary availability overrides set or removed",
    ["action"],
)
SUMMARIES_GENERATED = Counter(
    "scheduler_weekly_summaries_total",
    "Total weekly summaries computed",
)
SLOT_INTEGRITY_WARNINGS = Counter(
    "scheduler_slot_integrity_warnings_total",
    "Stored time slots found with a negative duration",
)
