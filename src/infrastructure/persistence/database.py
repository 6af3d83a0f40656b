"""In-memory data store and transaction management.

Holds users and vault entries for the in-memory repositories and provides
a transaction boundary spanning both.

Following hexagonal architecture:
- This is an infrastructure concern
- Repositories share one InMemoryDatabase instance
- transaction() implements TransactionManagerProtocol
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from uuid import UUID

from src.domain.entities.user import User
from src.domain.entities.vault_entry import VaultEntry


class InMemoryDatabase:
    """Process-local tables with snapshot/restore transactions.

    Repositories always replace stored objects rather than mutating them,
    so a shallow copy of each table is a complete snapshot.

    Usage:
        db = InMemoryDatabase()
        async with db.transaction():
            await vault_entry_repo.bulk_update_encrypted_passwords(entries)
            await user_repo.save(user)
            # Both writes are kept together, or neither is if an
            # exception escapes the block
    """

    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}
        self.vault_entries: dict[UUID, VaultEntry] = {}

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[None, None]:
        """Provide an explicit transaction context.

        Yields:
            None. Writes made inside the block through any repository bound
            to this database are rolled back if the block raises.
        """
        users_snapshot = dict(self.users)
        entries_snapshot = dict(self.vault_entries)
        try:
            yield
        except BaseException:
            self.users.clear()
            self.users.update(users_snapshot)
            self.vault_entries.clear()
            self.vault_entries.update(entries_snapshot)
            raise

    def reset(self) -> None:
        """Drop all data.

        Warning: This will delete all data! Only use for testing.
        """
        self.users.clear()
        self.vault_entries.clear()
