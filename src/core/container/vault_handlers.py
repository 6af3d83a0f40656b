"""Vault handler dependency factories."""

from typing import TYPE_CHECKING

from src.core.container.infrastructure import (
    get_encryption_service,
    get_logger,
    get_password_service,
)
from src.core.container.repositories import (
    get_user_repository,
    get_vault_entry_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.create_vault_entry_handler import (
        CreateVaultEntryHandler,
    )
    from src.application.queries.handlers.list_vault_entries_handler import (
        ListVaultEntriesHandler,
    )


def get_create_vault_entry_handler() -> "CreateVaultEntryHandler":
    """Get CreateVaultEntryHandler."""
    from src.application.commands.handlers.create_vault_entry_handler import (
        CreateVaultEntryHandler,
    )

    return CreateVaultEntryHandler(
        user_repo=get_user_repository(),
        vault_entry_repo=get_vault_entry_repository(),
        password_service=get_password_service(),
        encryption_service=get_encryption_service(),
        logger=get_logger(),
    )


def get_list_vault_entries_handler() -> "ListVaultEntriesHandler":
    """Get ListVaultEntriesHandler."""
    from src.application.queries.handlers.list_vault_entries_handler import (
        ListVaultEntriesHandler,
    )

    return ListVaultEntriesHandler(vault_entry_repo=get_vault_entry_repository())
