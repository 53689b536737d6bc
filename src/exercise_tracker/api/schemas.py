"""Pydantic models for the exercise tracker HTTP API."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    """Registration payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    username: str = Field(min_length=1)


class ExerciseCreate(BaseModel):
    """Exercise submission payload."""

    model_config = ConfigDict(str_strip_whitespace=True)

    description: str = Field(min_length=1)
    duration: int = Field(gt=0)
    date: dt.date | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _blank_date_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LogFilters(BaseModel):
    """Date bounds accepted in a log request body."""

    model_config = ConfigDict(populate_by_name=True)

    from_: dt.date | None = Field(default=None, alias="from")
    to: dt.date | None = None

    @field_validator("from_", "to", mode="before")
    @classmethod
    def _blank_bound_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class UserOut(BaseModel):
    """Public view of a user."""

    model_config = ConfigDict(from_attributes=True)

    username: str
    id: str


class ExerciseOut(BaseModel):
    """Response for a newly logged exercise."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    description: str
    duration: int
    date: str


class LogEntryOut(BaseModel):
    """A single entry in an exercise log."""

    model_config = ConfigDict(from_attributes=True)

    description: str
    duration: int
    date: str


class ExerciseLogOut(BaseModel):
    """Response for an exercise log query."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    count: int
    log: list[LogEntryOut]


class ErrorOut(BaseModel):
    """Error payload returned for every failed request."""

    error: str
