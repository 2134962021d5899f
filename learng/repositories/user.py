"""User repository for database operations."""

from learng.models import UserDB
from learng.repositories.base import BaseRepository
from learng.schemas import RegisterRequest


class UserRepository(BaseRepository[UserDB, RegisterRequest]):
    """Repository for user accounts."""

    model = UserDB

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email to search for

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.get_by_field("email", email)

    async def email_exists(self, email: str) -> bool:
        return await self._check_exists_by_field("email", email)

    async def add(self, user: UserDB) -> UserDB:
        """Persist a user built by the auth service (password already hashed)."""
        return await self._add_and_refresh(user)
