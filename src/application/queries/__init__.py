"""Queries - Read operations that fetch data.

Queries are side-effect free apart from lazy blacklist eviction.
"""

from src.application.queries.auth_queries import VerifyAccessToken
from src.application.queries.vault_queries import ListVaultEntries

__all__ = [
    "ListVaultEntries",
    "VerifyAccessToken",
]
