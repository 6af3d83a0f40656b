"""InMemoryVaultEntryRepository - in-memory implementation of VaultEntryRepository.

Adapter for hexagonal architecture. Stores deep copies of entries.
"""

from copy import deepcopy
from dataclasses import replace
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.vault_entry import VaultEntry
from src.domain.errors import VaultError
from src.infrastructure.persistence.database import InMemoryDatabase


class InMemoryVaultEntryRepository:
    """In-memory implementation of VaultEntryRepository protocol.

    Attributes:
        db: Shared in-memory database.
    """

    def __init__(self, db: InMemoryDatabase) -> None:
        """Initialize repository with database.

        Args:
            db: Shared in-memory database.
        """
        self.db = db

    async def save(self, entry: VaultEntry) -> None:
        """Insert or replace a vault entry."""
        self.db.vault_entries[entry.id] = deepcopy(entry)

    async def find_by_id(self, entry_id: UUID) -> VaultEntry | None:
        entry = self.db.vault_entries.get(entry_id)
        return deepcopy(entry) if entry is not None else None

    async def find_by_user_id(self, user_id: UUID) -> list[VaultEntry]:
        """Find all entries owned by a user, oldest first."""
        owned = [
            entry
            for entry in self.db.vault_entries.values()
            if entry.user_id == user_id
        ]
        owned.sort(key=lambda entry: entry.created_at)
        return deepcopy(owned)

    async def count_by_user_id(self, user_id: UUID) -> int:
        return sum(
            1 for entry in self.db.vault_entries.values() if entry.user_id == user_id
        )

    async def bulk_update_encrypted_passwords(
        self, entries: list[VaultEntry]
    ) -> Result[int, NotFoundError]:
        """Replace the envelopes of several entries atomically.

        Every entry is checked before anything is written.

        Args:
            entries: Entries carrying their new encrypted_password.

        Returns:
            Success(count) or Failure(NotFoundError) for the first unknown id.
        """
        # Step 1: Validate all entries exist
        for entry in entries:
            if entry.id not in self.db.vault_entries:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.VAULT_ENTRY_NOT_FOUND,
                        message=VaultError.ENTRY_NOT_FOUND.format(entry_id=entry.id),
                        resource_type="VaultEntry",
                        resource_id=str(entry.id),
                    )
                )

        # Step 2: Write envelopes
        for entry in entries:
            self.db.vault_entries[entry.id] = replace(
                self.db.vault_entries[entry.id],
                encrypted_password=entry.encrypted_password,
                updated_at=entry.updated_at,
            )

        return Success(value=len(entries))
