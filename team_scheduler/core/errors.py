# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain errors raised by the service layer.
Each carries the HTTP status it maps to; main.py turns them into
``{"error": message}`` responses.
"""


class SchedulerError(Exception):
    """Base class for every error the scheduler reports to callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SchedulerError):
    """Malformed or missing input."""

    status_code = 400


class NotFoundError(SchedulerError):
    """Unknown user id (or other addressed resource)."""

    status_code = 404


class InternalError(SchedulerError):
    """Unexpected failure; callers only ever see a generic message."""

    status_code = 500
