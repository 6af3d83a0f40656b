"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from src.infrastructure.persistence.repositories.in_memory_vault_entry_repository import (
    InMemoryVaultEntryRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "InMemoryVaultEntryRepository",
]
