"""Transaction manager protocol.

Groups writes across repositories so they commit together or not at all.
Master password rotation relies on it to keep the user's verifier and the
re-encrypted vault envelopes mutually consistent.
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManagerProtocol(Protocol):
    """Unit-of-work boundary.

    Usage:
        async with transaction_manager.transaction():
            await vault_entry_repo.bulk_update_encrypted_passwords(entries)
            await user_repo.save(user)
        # Any exception inside the block restores the pre-transaction state
    """

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction.

        Returns:
            Async context manager that commits on normal exit and rolls
            back, then re-raises, on exception.
        """
        ...
