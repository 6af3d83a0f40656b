"""Token blacklist protocol (port).

Deny-list of tokens revoked before their natural expiry (logout, master
password rotation). Entries are keyed by the raw token string and drop out
once the token would have expired anyway.
"""

from typing import NamedTuple, Protocol

from src.core.errors import ValidationError
from src.core.result import Result
from src.domain.value_objects.auth_tokens import AccessToken, RefreshToken


class BlacklistSize(NamedTuple):
    """Number of entries currently held per token type."""

    access_tokens: int
    refresh_tokens: int


class TokenBlacklistProtocol(Protocol):
    """Revoked token store.

    Membership checks and inserts are independent per token string and safe
    to run concurrently.
    """

    async def add_to_blacklist(
        self,
        access_token: AccessToken | None = None,
        refresh_token: RefreshToken | None = None,
    ) -> Result[None, ValidationError]:
        """Revoke one or both tokens.

        Returns:
            Success(None) once stored.
            Failure(ValidationError) if both tokens are None.
        """
        ...

    async def is_access_token_blacklisted(self, access_token: AccessToken) -> bool:
        """Check access token membership (expired entries count as absent)."""
        ...

    async def is_refresh_token_blacklisted(self, refresh_token: RefreshToken) -> bool:
        """Check refresh token membership (expired entries count as absent)."""
        ...

    async def cleanup_expired_tokens(self) -> int:
        """Evict every expired entry.

        Returns:
            Number of entries removed.
        """
        ...

    def get_blacklist_size(self) -> BlacklistSize:
        """Current entry counts (including not-yet-evicted expired ones)."""
        ...

    def clear(self) -> None:
        """Drop every entry."""
        ...
