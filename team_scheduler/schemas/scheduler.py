# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas: API contract definitions.
Pydantic models used ONLY at the controller (HTTP) boundary. Week
payloads stay loosely typed here; the service layer validates them so
error messages can name the offending day.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


# ── User Schemas ──

class UserCreateRequest(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255, description="Display name")
    email: Optional[str] = Field(default=None, max_length=255, description="Contact email")
    role: Optional[str] = Field(default=None, max_length=255, description="Team role")


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: str


class UserDeletedResponse(BaseModel):
    message: str
    userId: int


# ── Week Schemas ──

class ScheduleUpdateRequest(BaseModel):
    schedule: Optional[dict[str, Any]] = Field(
        default=None, description="Weekday -> list of {start, end}"
    )


class AvailabilityUpdateRequest(BaseModel):
    availability: Optional[dict[str, Any]] = Field(
        default=None, description="Weekday -> list of {start, end}"
    )


class TemporaryAvailabilityRequest(BaseModel):
    date: Optional[str] = Field(default=None, description="ISO date, YYYY-MM-DD")
    availability: Optional[dict[str, Any]] = Field(
        default=None, description="Overridden weekdays -> list of {start, end}"
    )


class ScheduleResponse(BaseModel):
    userId: int
    userName: str
    schedule: dict[str, list[dict[str, str]]]
    totalHours: float


class AvailabilityResponse(BaseModel):
    userId: int
    userName: str
    availability: dict[str, list[dict[str, str]]]
    totalHours: float


class TemporaryAvailabilityResponse(BaseModel):
    userId: int
    userName: str
    temporaryAvailability: dict[str, dict[str, list[dict[str, str]]]]


# ── Summary Schemas ──

class WeeklySummaryEntry(BaseModel):
    userId: int
    userName: str
    userRole: str
    totalHours: float
    hours: dict[str, float]
    schedule: dict[str, list[dict[str, str]]]


class WeeklySummaryResponse(BaseModel):
    users: list[WeeklySummaryEntry]
    grandTotal: float
    generatedAt: str


class ErrorResponse(BaseModel):
    error: str
