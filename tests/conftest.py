"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime

import pytest
from bson import ObjectId

from exercise_tracker.config import Settings
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.exercises import DateBounds, ExerciseRecord
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.services.exercises import ExerciseLogService, ExerciseRepository
from exercise_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    created: list[str] = field(default_factory=list)

    async def get_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def get_by_id(self, user_id: str) -> UserRecord | None:
        return self.users.get(user_id)

    async def create_user(self, username: str) -> UserRecord:
        user = UserRecord(id=str(ObjectId()), username=username)
        self.users[user.id] = user
        self.created.append(username)
        return user

    async def list_users(self) -> list[UserRecord]:
        return list(self.users.values())


@dataclass
class InMemoryExerciseRepository(ExerciseRepository):
    """In-memory exercise repository for tests."""

    exercises: list[ExerciseRecord] = field(default_factory=list)

    async def create_exercise(
        self, user_id: str, description: str, duration: int, performed_at: datetime
    ) -> ExerciseRecord:
        exercise = ExerciseRecord(
            id=str(ObjectId()),
            user_id=user_id,
            description=description,
            duration=duration,
            date=performed_at,
        )
        self.exercises.append(exercise)
        return exercise

    async def list_exercises(
        self, user_id: str, bounds: DateBounds, limit: int | None
    ) -> list[ExerciseRecord]:
        matches = sorted(
            (
                exercise
                for exercise in self.exercises
                if exercise.user_id == user_id and bounds.contains(exercise.date)
            ),
            key=lambda exercise: exercise.date,
        )
        return matches[:limit] if limit else matches


@dataclass
class FailingUserRepository(UserRepository):
    """User repository that fails every call like an unreachable store."""

    message: str = "connection refused: mongo.internal:27017"

    async def get_by_username(self, username: str) -> UserRecord | None:
        raise RuntimeError(self.message)

    async def get_by_id(self, user_id: str) -> UserRecord | None:
        raise RuntimeError(self.message)

    async def create_user(self, username: str) -> UserRecord:
        raise RuntimeError(self.message)

    async def list_users(self) -> list[UserRecord]:
        raise RuntimeError(self.message)


def make_container(
    settings: Settings,
    user_repository: UserRepository,
    exercise_repository: ExerciseRepository,
) -> AppContainer:
    user_service = UserService(user_repository)
    exercise_log_service = ExerciseLogService(
        user_service=user_service,
        repository=exercise_repository,
    )

    async def open_resources() -> None:
        return None

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        exercise_log_service=exercise_log_service,
        open_resources=open_resources,
        close_resources=close_resources,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(mongo_uri="mongodb://localhost:27017/exercise_tracker_test")


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def exercise_repository() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    exercise_repository: InMemoryExerciseRepository,
) -> AppContainer:
    return make_container(settings, user_repository, exercise_repository)
