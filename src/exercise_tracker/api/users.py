"""User and exercise log API endpoints."""

from __future__ import annotations

import datetime as dt
import logging
from typing import TYPE_CHECKING, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from exercise_tracker.api.schemas import (
    ExerciseCreate,
    ExerciseLogOut,
    ExerciseOut,
    LogFilters,
    UserCreate,
    UserOut,
)
from exercise_tracker.domain.exercises import DateBounds
from exercise_tracker.services.users import UserNotFoundError

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

USER_NOT_FOUND = "User not found"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _store_failure(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message
    )


def _user_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)


async def _read_payload(request: Request, model: type[PayloadT]) -> PayloadT:
    """Validate a JSON or form-encoded request body against a model."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith(FORM_CONTENT_TYPES):
            form = await request.form()
            return model.model_validate(dict(form))
        return model.model_validate_json(await request.body())
    except ValidationError as exc:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in exc.errors()]
        ) from exc


async def user_payload(request: Request) -> UserCreate:
    return await _read_payload(request, UserCreate)


async def exercise_payload(request: Request) -> ExerciseCreate:
    return await _read_payload(request, ExerciseCreate)


async def log_filters(request: Request) -> LogFilters:
    """Optional ``from``/``to`` bounds sent in the request body."""
    raw = await request.body()
    if not raw.strip():
        return LogFilters()
    return await _read_payload(request, LogFilters)


@router.post("", response_model=UserOut)
async def create_user(
    request: Request, payload: UserCreate = Depends(user_payload)
) -> UserOut:
    """Register a username, returning the existing user when already taken."""
    try:
        user = await _container(request).user_service.register(payload.username)
    except Exception as exc:
        logger.exception("Failed to create user", extra={"username": payload.username})
        raise _store_failure("Failed to create user") from exc
    return UserOut.model_validate(user)


@router.get("", response_model=list[UserOut])
async def list_users(request: Request) -> list[UserOut]:
    """Return every registered user."""
    try:
        users = await _container(request).user_service.list_users()
    except Exception as exc:
        logger.exception("Failed to fetch users")
        raise _store_failure("Failed to fetch users") from exc
    return [UserOut.model_validate(user) for user in users]


@router.post("/{user_id}/exercises", response_model=ExerciseOut)
async def add_exercise(
    user_id: str,
    request: Request,
    payload: ExerciseCreate = Depends(exercise_payload),
) -> ExerciseOut:
    """Log an exercise for a user."""
    try:
        logged = await _container(request).exercise_log_service.add_exercise(
            user_id=user_id,
            description=payload.description,
            duration=payload.duration,
            performed_on=payload.date,
        )
    except UserNotFoundError as exc:
        raise _user_not_found() from exc
    except Exception as exc:
        logger.exception("Failed to add exercise", extra={"user_id": user_id})
        raise _store_failure("Failed to add exercise") from exc
    return ExerciseOut.model_validate(logged)


@router.get("/{user_id}/logs", response_model=ExerciseLogOut)
async def get_log(  # noqa: PLR0913
    user_id: str,
    request: Request,
    from_: dt.date | None = Query(default=None, alias="from"),
    to: dt.date | None = Query(default=None),
    limit: int | None = Query(default=None, ge=0),
    body_filters: LogFilters = Depends(log_filters),
) -> ExerciseLogOut:
    """Return a user's exercise log, optionally bounded by date and capped."""
    bounds = DateBounds(
        start=from_ if from_ is not None else body_filters.from_,
        end=to if to is not None else body_filters.to,
    )
    try:
        exercise_log = await _container(request).exercise_log_service.get_log(
            user_id, bounds=bounds, limit=limit
        )
    except UserNotFoundError as exc:
        raise _user_not_found() from exc
    except Exception as exc:
        logger.exception("Failed to fetch exercise log", extra={"user_id": user_id})
        raise _store_failure("Failed to fetch exercise log") from exc
    return ExerciseLogOut.model_validate(exercise_log)
