"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.

Categories:
    - auth_dtos: Login, refresh and master password rotation results
    - vault_dtos: Vault listing results

Usage:
    from src.application.dtos import AuthTokens, VaultEntryPage
"""

from src.application.dtos.auth_dtos import (
    AuthTokens,
    MasterPasswordChanged,
    RefreshedAccessToken,
)
from src.application.dtos.vault_dtos import VaultEntryPage, VaultEntrySummary

__all__ = [
    # Auth DTOs
    "AuthTokens",
    "MasterPasswordChanged",
    "RefreshedAccessToken",
    # Vault DTOs
    "VaultEntryPage",
    "VaultEntrySummary",
]
