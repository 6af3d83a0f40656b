"""VaultEntryRepository protocol for vault persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import NotFoundError
from src.core.result import Result
from src.domain.entities.vault_entry import VaultEntry


class VaultEntryRepository(Protocol):
    """Vault entry repository protocol (port).

    Methods:
        save: Insert or replace one entry
        find_by_id: Retrieve entry by ID
        find_by_user_id: All entries owned by a user
        count_by_user_id: Number of entries owned by a user
        bulk_update_encrypted_passwords: Atomic envelope replacement
    """

    async def save(self, entry: VaultEntry) -> None:
        """Insert or replace a vault entry."""
        ...

    async def find_by_id(self, entry_id: UUID) -> VaultEntry | None:
        """Find entry by ID.

        Returns:
            VaultEntry if found, None otherwise.
        """
        ...

    async def find_by_user_id(self, user_id: UUID) -> list[VaultEntry]:
        """Find every entry owned by a user.

        Args:
            user_id: Owning user's ID.

        Returns:
            Entries in creation order (empty list when the user has none).
        """
        ...

    async def count_by_user_id(self, user_id: UUID) -> int:
        """Count entries owned by a user."""
        ...

    async def bulk_update_encrypted_passwords(
        self, entries: list[VaultEntry]
    ) -> Result[int, NotFoundError]:
        """Replace the stored envelope of several entries at once.

        All-or-nothing: every entry must already exist, otherwise nothing
        is written.

        Args:
            entries: Entries carrying their new encrypted_password.

        Returns:
            Success(count): Number of entries written.
            Failure(NotFoundError): At least one entry does not exist.
        """
        ...
