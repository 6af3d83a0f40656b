"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.user import User
from src.domain.entities.vault_entry import VaultEntry

__all__ = [
    "User",
    "VaultEntry",
]
