"""User directory business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from exercise_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """Raised when a referenced user id does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class UserRepository(Protocol):
    """Persistence interface for user data."""

    async def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user registered under a username, if present."""

    async def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""

    async def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    async def list_users(self) -> list[UserRecord]:
        """Return every registered user."""


@dataclass
class UserService:
    """Application service for the user directory."""

    repository: UserRepository

    async def register(self, username: str) -> UserRecord:
        """Return the user for a username, creating it on first use."""
        existing = await self.repository.get_by_username(username)
        if existing:
            return existing

        created = await self.repository.create_user(username)
        logger.info("Registered user", extra={"user_id": created.id})
        return created

    async def list_users(self) -> list[UserRecord]:
        """Return all registered users."""
        return await self.repository.list_users()

    async def get_user(self, user_id: str) -> UserRecord:
        """Return the user for an id or raise ``UserNotFoundError``."""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
