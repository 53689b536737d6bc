"""MongoDB-backed user repository."""

from dataclasses import dataclass

from beanie import PydanticObjectId
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from exercise_tracker.adapters.mongo_documents import UserDocument
from exercise_tracker.domain.models import UserRecord
from exercise_tracker.services.users import UserRepository


@dataclass
class MongoUserRepository(UserRepository):
    """Beanie implementation for user persistence."""

    documents: type[UserDocument] = UserDocument

    async def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user registered under a username, if present."""
        document = await self.documents.find_one({"username": username})
        if document:
            return to_user_record(document)
        return None

    async def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user for an id; malformed ids never match."""
        if not ObjectId.is_valid(user_id):
            return None
        document = await self.documents.get(PydanticObjectId(user_id))
        if document:
            return to_user_record(document)
        return None

    async def create_user(self, username: str) -> UserRecord:
        """Insert a new user document and return it."""
        document = self.documents(username=username)
        try:
            await document.insert()
        except DuplicateKeyError:
            # Lost a registration race on the unique index.
            existing = await self.get_by_username(username)
            if existing is None:
                raise
            return existing
        return to_user_record(document)

    async def list_users(self) -> list[UserRecord]:
        """Return every user document."""
        documents = await self.documents.find_all().to_list()
        return [to_user_record(document) for document in documents]


def to_user_record(document: UserDocument) -> UserRecord:
    if document.id is None:
        raise RuntimeError("User document has no id")
    return UserRecord(id=str(document.id), username=document.username)
