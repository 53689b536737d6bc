"""MongoDB-backed exercise repository."""

from dataclasses import dataclass
from datetime import datetime

from pymongo import ASCENDING

from exercise_tracker.adapters.mongo_documents import ExerciseDocument
from exercise_tracker.domain.exercises import DateBounds, ExerciseRecord
from exercise_tracker.services.exercises import ExerciseRepository

LOG_SORT = [("date", ASCENDING), ("_id", ASCENDING)]


@dataclass
class MongoExerciseRepository(ExerciseRepository):
    """Beanie implementation for exercise persistence."""

    documents: type[ExerciseDocument] = ExerciseDocument

    async def create_exercise(
        self, user_id: str, description: str, duration: int, performed_at: datetime
    ) -> ExerciseRecord:
        """Insert a new exercise document and return it."""
        document = self.documents(
            user_id=user_id,
            description=description,
            duration=duration,
            date=performed_at,
        )
        await document.insert()
        return to_exercise_record(document)

    async def list_exercises(
        self, user_id: str, bounds: DateBounds, limit: int | None
    ) -> list[ExerciseRecord]:
        """Return a user's exercises within bounds, oldest first."""
        query = self.documents.find(build_exercise_filter(user_id, bounds)).sort(
            LOG_SORT
        )
        if limit:
            query = query.limit(limit)
        documents = await query.to_list()
        return [to_exercise_record(document) for document in documents]


def build_exercise_filter(user_id: str, bounds: DateBounds) -> dict[str, object]:
    """Translate date bounds into a MongoDB query for one user's exercises."""
    date_filter: dict[str, datetime] = {}
    if bounds.lower is not None:
        date_filter["$gte"] = bounds.lower
    if bounds.upper is not None:
        date_filter["$lt"] = bounds.upper
    query: dict[str, object] = {"user_id": user_id}
    if date_filter:
        query["date"] = date_filter
    return query


def to_exercise_record(document: ExerciseDocument) -> ExerciseRecord:
    if document.id is None:
        raise RuntimeError("Exercise document has no id")
    return ExerciseRecord(
        id=str(document.id),
        user_id=document.user_id,
        description=document.description,
        duration=document.duration,
        date=document.date,
    )
