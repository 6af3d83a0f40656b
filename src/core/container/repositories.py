"""Repository dependency factories.

Repositories are bound to the shared in-memory database and cached like the
other application-scoped services.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.infrastructure import get_database

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        InMemoryUserRepository,
        InMemoryVaultEntryRepository,
    )


# ============================================================================
# Repository Factories
# ============================================================================


@lru_cache()
def get_user_repository() -> "InMemoryUserRepository":
    """Get user repository.

    Returns:
        InMemoryUserRepository bound to get_database().

    Usage:
        from src.core.container import get_user_repository

        user_repo = get_user_repository()
        user = await user_repo.find_by_email("user@example.com")
    """
    from src.infrastructure.persistence.repositories import InMemoryUserRepository

    return InMemoryUserRepository(get_database())


@lru_cache()
def get_vault_entry_repository() -> "InMemoryVaultEntryRepository":
    """Get vault entry repository.

    Returns:
        InMemoryVaultEntryRepository bound to get_database().
    """
    from src.infrastructure.persistence.repositories import (
        InMemoryVaultEntryRepository,
    )

    return InMemoryVaultEntryRepository(get_database())
