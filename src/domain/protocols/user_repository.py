"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Lookups return None on a miss and never signal "not found" as an error.
    Uniqueness of email and username is enforced by callers through the
    ``exists_by_*`` queries.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        save: Insert or replace a user
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email
        find_by_username: Retrieve user by username
        exists_by_email: Email uniqueness check
        exists_by_username: Username uniqueness check
    """

    async def save(self, user: User) -> None:
        """Insert or replace a user.

        Args:
            user: User to persist. Later changes to this object are not
                visible to the store until it is saved again.
        """
        ...

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by username.

        Args:
            username: Trimmed username.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists."""
        ...

    async def exists_by_username(self, username: str) -> bool:
        """Check if a user with this username exists."""
        ...
