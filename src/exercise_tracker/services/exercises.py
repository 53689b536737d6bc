"""Exercise log business logic."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol

from exercise_tracker.domain.exercises import (
    DateBounds,
    ExerciseLog,
    ExerciseRecord,
    LogEntry,
    LoggedExercise,
    format_exercise_date,
    start_of_day,
)
from exercise_tracker.services.users import UserService

logger = logging.getLogger(__name__)


class ExerciseRepository(Protocol):
    """Persistence interface for exercises."""

    async def create_exercise(
        self, user_id: str, description: str, duration: int, performed_at: datetime
    ) -> ExerciseRecord:
        """Create and return a new exercise record."""

    async def list_exercises(
        self, user_id: str, bounds: DateBounds, limit: int | None
    ) -> list[ExerciseRecord]:
        """Return a user's exercises within bounds, oldest first."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ExerciseLogService:
    """Application service for logging and querying exercises."""

    user_service: UserService
    repository: ExerciseRepository
    clock: Callable[[], datetime] = field(default=_utc_now)

    async def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: int,
        performed_on: date | None = None,
    ) -> LoggedExercise:
        """Record an exercise for an existing user."""
        user = await self.user_service.get_user(user_id)
        performed_at = (
            start_of_day(performed_on) if performed_on is not None else self.clock()
        )
        logger.debug(
            "Parsed exercise data",
            extra={
                "user_id": user.id,
                "duration": duration,
                "performed_at": performed_at.isoformat(),
            },
        )
        exercise = await self.repository.create_exercise(
            user_id=user.id,
            description=description,
            duration=duration,
            performed_at=performed_at,
        )
        logger.info(
            "Logged exercise",
            extra={"user_id": user.id, "exercise_id": exercise.id},
        )
        return LoggedExercise(
            id=user.id,
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=format_exercise_date(exercise.date),
        )

    async def get_log(
        self,
        user_id: str,
        bounds: DateBounds | None = None,
        limit: int | None = None,
    ) -> ExerciseLog:
        """Return a user's exercises, optionally filtered and capped."""
        user = await self.user_service.get_user(user_id)
        resolved_bounds = bounds or DateBounds()
        resolved_limit = limit if limit and limit > 0 else None
        logger.debug(
            "Fetching exercise log",
            extra={
                "user_id": user.id,
                "from": resolved_bounds.start,
                "to": resolved_bounds.end,
                "limit": resolved_limit,
            },
        )
        exercises = await self.repository.list_exercises(
            user.id, resolved_bounds, resolved_limit
        )
        return ExerciseLog(
            id=user.id,
            username=user.username,
            log=[
                LogEntry(
                    description=exercise.description,
                    duration=exercise.duration,
                    date=format_exercise_date(exercise.date),
                )
                for exercise in exercises
            ],
        )
