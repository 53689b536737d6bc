"""Beanie document models for the MongoDB collections."""

from datetime import datetime

from beanie import Document, Indexed
from pymongo import ASCENDING, IndexModel


class UserDocument(Document):
    """A registered user."""

    username: Indexed(str, unique=True)  # type: ignore[valid-type]

    class Settings:
        name = "users"


class ExerciseDocument(Document):
    """An exercise logged against a user id."""

    user_id: str
    description: str
    duration: int
    date: datetime

    class Settings:
        name = "exercises"
        indexes = [IndexModel([("user_id", ASCENDING), ("date", ASCENDING)])]


DOCUMENT_MODELS: list[type[Document]] = [UserDocument, ExerciseDocument]
