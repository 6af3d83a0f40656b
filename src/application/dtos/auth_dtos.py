"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication command handlers.
These carry data from handlers back to the caller.

DTOs:
    - AuthTokens: Result from LoginUser command
    - RefreshedAccessToken: Result from RefreshAccessToken command
    - MasterPasswordChanged: Result from ChangeMasterPassword command
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.value_objects.auth_tokens import AccessToken

ACCESS_TOKEN_EXPIRES_IN = int(AccessToken.lifetime().total_seconds())


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Response from successful login.

    Attributes:
        access_token: JWT access token (short-lived, 15 minutes).
        refresh_token: JWT refresh token (long-lived, 7 days).
        token_type: Token type (always "bearer").
        expires_in: Access token expiration in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = ACCESS_TOKEN_EXPIRES_IN


@dataclass(frozen=True, kw_only=True)
class RefreshedAccessToken:
    """Response from successful refresh (no new refresh token)."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int = ACCESS_TOKEN_EXPIRES_IN


@dataclass(frozen=True, kw_only=True)
class MasterPasswordChanged:
    """Response from successful master password rotation.

    Attributes:
        user_id: User whose master password changed.
        entries_re_encrypted: Number of vault entries re-keyed.
        changed_at: Commit timestamp.
    """

    user_id: UUID
    entries_re_encrypted: int
    changed_at: datetime
