from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _promote_date(value: Any) -> Any:
    """
    Internal helper run before datetime parsing.
    - A date (not datetime) is promoted to a datetime at 00:00.
    - A date-only ISO string ('2099-01-01') is promoted the same way.
    - Anything else is left for pydantic to parse.
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, str):
        s = value.strip()
        if len(s) == 10:
            try:
                d = date.fromisoformat(s)
            except ValueError:
                return value
            return datetime(d.year, d.month, d.day)

    return value


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC already.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Wire names are camelCase (dueDate, isCompleted); python names stay snake_case.
_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.
    """

    model_config = ConfigDict(
        **_CAMEL,
        json_schema_extra={
            "example": {
                "name": "Buy groceries",
                "dueDate": "2099-01-01T00:00:00Z",
                "isCompleted": False,
            }
        },
    )

    name: str = Field(..., description="Free-form label for the todo item")
    due_date: datetime = Field(
        ...,
        description="Due date/time. Accepts ISO8601 date or datetime; dates are set to 00:00 UTC",
    )
    is_completed: bool = Field(default=False, description="Completion status flag")

    @field_validator("due_date", mode="before")
    @classmethod
    def promote_due_date(cls, v: Any) -> Any:
        return _promote_date(v)

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime) -> datetime:
        """
        Normalize due_date to an aware UTC datetime.
        """
        return _as_utc(v)


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        **_CAMEL,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Buy groceries",
                "dueDate": "2099-01-01T00:00:00Z",
                "isCompleted": False,
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    name: str = Field(..., description="Free-form label for the todo item")
    due_date: datetime = Field(..., description="Due date/time as an ISO8601 UTC datetime")
    is_completed: bool = Field(..., description="Completion status flag")
