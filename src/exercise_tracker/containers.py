"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from exercise_tracker.adapters.mongo_client import create_mongo_client, init_odm
from exercise_tracker.adapters.mongo_exercise_repository import (
    MongoExerciseRepository,
)
from exercise_tracker.adapters.mongo_user_repository import MongoUserRepository
from exercise_tracker.config import Settings
from exercise_tracker.services.exercises import ExerciseLogService
from exercise_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    exercise_log_service: ExerciseLogService
    open_resources: Callable[[], Awaitable[None]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    mongo_client = create_mongo_client(resolved_settings.mongo_uri)
    user_service = UserService(MongoUserRepository())
    exercise_log_service = ExerciseLogService(
        user_service=user_service,
        repository=MongoExerciseRepository(),
    )

    async def open_resources() -> None:
        await init_odm(mongo_client, resolved_settings.mongo_database)

    async def close_resources() -> None:
        await mongo_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        exercise_log_service=exercise_log_service,
        open_resources=open_resources,
        close_resources=close_resources,
    )
