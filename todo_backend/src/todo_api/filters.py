"""
Creation-time checks for new todos and the validation-problem error they raise.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .schemas import TodoCreate

PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
PROBLEM_TITLE = "One or more validation errors occurred."

DUE_DATE_IN_PAST = "Cannot have due date in the past."
COMPLETED_ON_CREATE = "Cannot add completed todo."


class ValidationProblem(Exception):
    """Raised when a request payload fails validation; maps field name to messages."""

    def __init__(self, errors: Dict[str, List[str]]) -> None:
        super().__init__(f"validation failed for: {', '.join(errors)}")
        self.errors = errors


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# PUBLIC_INTERFACE
def validate_new_todo(payload: TodoCreate) -> TodoCreate:
    """
    Dependency for the creation route. Both checks always run so the client sees
    every problem at once; nothing reaches the store when either fails.

    Raises:
        ValidationProblem: keyed `DueDate` and/or `IsCompleted`.
    """
    errors: Dict[str, List[str]] = {}
    if payload.due_date < _utcnow():
        errors["DueDate"] = [DUE_DATE_IN_PAST]
    if payload.is_completed:
        errors["IsCompleted"] = [COMPLETED_ON_CREATE]

    if errors:
        raise ValidationProblem(errors)
    return payload


def problem_response(errors: Dict[str, List[str]]) -> JSONResponse:
    """
    Build a 400 problem-details response:

        {
            "type": "...",
            "title": "One or more validation errors occurred.",
            "status": 400,
            "errors": {"DueDate": ["Cannot have due date in the past."]}
        }
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        media_type="application/problem+json",
        content={
            "type": PROBLEM_TYPE,
            "title": PROBLEM_TITLE,
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": errors,
        },
    )


async def validation_problem_handler(request: Request, exc: ValidationProblem) -> JSONResponse:
    return problem_response(exc.errors)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render structural errors (missing fields, unparseable values, non-integer ids)
    in the same problem shape, keyed by the offending field's wire name.
    """
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        raw_loc = list(err.get("loc", ()))
        # Malformed JSON is located by character offset, not by field.
        if len(raw_loc) == 2 and isinstance(raw_loc[1], int):
            raw_loc = raw_loc[:1]
        loc = [str(part) for part in raw_loc]
        # Drop the 'body'/'path'/'query' prefix FastAPI puts first.
        key = ".".join(loc[1:]) or (loc[0] if loc else "request")
        errors.setdefault(key, []).append(err.get("msg", "Invalid value"))
    return problem_response(errors)
