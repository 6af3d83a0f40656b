"""InMemoryUserRepository - in-memory implementation of UserRepository protocol.

Adapter for hexagonal architecture. Stores deep copies so a caller holding a
User cannot change stored state without calling save().
"""

from copy import deepcopy
from uuid import UUID

from src.domain.entities.user import User
from src.infrastructure.persistence.database import InMemoryDatabase


class InMemoryUserRepository:
    """In-memory implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        db: Shared in-memory database.

    Example:
        >>> repo = InMemoryUserRepository(InMemoryDatabase())
        >>> await repo.save(user)
        >>> await repo.find_by_email("USER@example.com")
        User(...)
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        """Initialize repository with database.

        Args:
            db: Shared in-memory database.
        """
        self.db = db

    async def save(self, user: User) -> None:
        """Insert or replace a user."""
        self.db.users[user.id] = deepcopy(user)

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            Copy of the stored User if found, None otherwise.
        """
        user = self.db.users.get(user_id)
        return deepcopy(user) if user is not None else None

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive)."""
        needle = email.strip().lower()
        for user in self.db.users.values():
            if user.email.lower() == needle:
                return deepcopy(user)
        return None

    async def find_by_username(self, username: str) -> User | None:
        """Find user by exact (trimmed) username."""
        needle = username.strip()
        for user in self.db.users.values():
            if user.username == needle:
                return deepcopy(user)
        return None

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    async def exists_by_username(self, username: str) -> bool:
        return await self.find_by_username(username) is not None
