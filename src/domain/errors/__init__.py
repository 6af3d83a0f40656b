"""Domain errors package.

Usage:
    from src.domain.errors import UserError, VaultError
"""

from src.domain.errors.user_error import UserError
from src.domain.errors.vault_error import VaultError

__all__ = [
    "UserError",
    "VaultError",
]
