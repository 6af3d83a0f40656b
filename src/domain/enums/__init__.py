"""Domain enums for business logic.

Available Enums:
    - VaultCategory: Category of a stored credential
"""

from src.domain.enums.vault_category import VaultCategory

__all__ = ["VaultCategory"]
