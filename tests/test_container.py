"""Tests for container wiring."""

import asyncio

from exercise_tracker.adapters.mongo_exercise_repository import (
    MongoExerciseRepository,
)
from exercise_tracker.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.user_service is not None
    assert isinstance(
        container.exercise_log_service.repository, MongoExerciseRepository
    )
    asyncio.run(container.close_resources())
