"""Pydantic schemas for request/response validation."""

import datetime as dt
import math
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_date_value(value: Any) -> Any:
    """Normalize an incoming date value before pydantic validates it.

    Empty strings mean "not supplied". ISO datetimes with a time part are
    reduced to their calendar date.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if len(value) > 10:
            try:
                return dt.datetime.fromisoformat(value.replace("Z", "+00:00")).date()
            except ValueError:
                return value
    return value


class UserCreateRequest(BaseModel):
    """Body of POST /api/users."""
    username: str = Field(..., description="Username to register")

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("username must not be empty")
        return value


class UserResponse(BaseModel):
    username: str
    id: str


class ExerciseCreateRequest(BaseModel):
    """Body of POST /api/users/{user_id}/exercises."""
    model_config = ConfigDict(populate_by_name=True)

    description: str = Field(..., min_length=1, description="What was done")
    duration: Union[int, float] = Field(..., description="Duration in minutes")
    date: Optional[dt.date] = Field(None, description="Exercise date, defaults to today")
    user_id_override: Optional[str] = Field(
        None,
        alias=":_id",
        description="User id taking precedence over the path parameter",
    )

    @field_validator("date", mode="before")
    @classmethod
    def normalize_date(cls, value: Any) -> Any:
        return parse_date_value(value)

    @field_validator("duration", mode="before")
    @classmethod
    def duration_not_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("duration must be a number")
        return value

    @field_validator("duration")
    @classmethod
    def duration_is_finite(cls, value: Union[int, float]) -> Union[int, float]:
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("duration must be a finite number")
        return value

    @field_validator("user_id_override", mode="before")
    @classmethod
    def blank_override_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ExerciseResponse(BaseModel):
    """Created exercise; ``id`` is the user's id."""
    username: str
    description: str
    duration: Union[int, float]
    date: str
    id: str


class LogQuery(BaseModel):
    """Query parameters of GET /api/users/{user_id}/logs."""
    date_from: Optional[dt.date] = Field(None, description="Inclusive lower date bound")
    date_to: Optional[dt.date] = Field(None, description="Inclusive upper date bound")
    limit: Optional[int] = Field(None, ge=1, description="Maximum number of entries")

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def normalize_dates(cls, value: Any) -> Any:
        return parse_date_value(value)

    @field_validator("limit", mode="before")
    @classmethod
    def blank_limit_is_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LogEntry(BaseModel):
    description: str
    duration: Union[int, float]
    date: str


class ExerciseLogResponse(BaseModel):
    username: str
    count: int
    id: str
    log: List[LogEntry] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
