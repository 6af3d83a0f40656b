"""In-memory token blacklist (adapter).

Implements TokenBlacklistProtocol with two dictionaries keyed by the raw
token string, each value being the instant the entry stops mattering.

Eviction:
    - Lazy: a membership check that finds an expired entry deletes it and
      reports the token as not blacklisted
    - Explicit: cleanup_expired_tokens() sweeps both maps
    - No background task

Limitations:
    - Process-local (lost on restart, not shared between instances)
"""

from datetime import UTC, datetime, timedelta

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import UserError
from src.domain.protocols.token_blacklist_protocol import BlacklistSize
from src.domain.value_objects.auth_tokens import AccessToken, RefreshToken


class InMemoryTokenBlacklist:
    """Process-local blacklist of revoked access and refresh tokens.

    Entries expire one token lifetime after they are added, which is never
    earlier than the token's own expiry.

    Usage:
        blacklist = InMemoryTokenBlacklist()
        await blacklist.add_to_blacklist(access_token=access, refresh_token=refresh)
        assert await blacklist.is_access_token_blacklisted(access)
    """

    def __init__(
        self,
        access_token_lifetime: timedelta | None = None,
        refresh_token_lifetime: timedelta | None = None,
    ) -> None:
        """Initialize empty blacklist.

        Args:
            access_token_lifetime: Retention for access tokens (default 15 min).
            refresh_token_lifetime: Retention for refresh tokens (default 7 days).
        """
        self._access_lifetime = access_token_lifetime or AccessToken.lifetime()
        self._refresh_lifetime = refresh_token_lifetime or RefreshToken.lifetime()
        self._access_tokens: dict[str, datetime] = {}
        self._refresh_tokens: dict[str, datetime] = {}

    async def add_to_blacklist(
        self,
        access_token: AccessToken | None = None,
        refresh_token: RefreshToken | None = None,
    ) -> Result[None, ValidationError]:
        """Blacklist one or both tokens.

        Args:
            access_token: Optional access token to revoke.
            refresh_token: Optional refresh token to revoke.

        Returns:
            Success(None) or Failure(ValidationError) if both are None.
        """
        if access_token is None and refresh_token is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=UserError.NO_TOKENS_TO_BLACKLIST,
                )
            )

        now = datetime.now(UTC)
        if access_token is not None:
            self._access_tokens[access_token.value] = now + self._access_lifetime
        if refresh_token is not None:
            self._refresh_tokens[refresh_token.value] = now + self._refresh_lifetime

        return Success(value=None)

    async def is_access_token_blacklisted(self, access_token: AccessToken) -> bool:
        return self._is_listed(self._access_tokens, access_token.value)

    async def is_refresh_token_blacklisted(self, refresh_token: RefreshToken) -> bool:
        return self._is_listed(self._refresh_tokens, refresh_token.value)

    async def cleanup_expired_tokens(self) -> int:
        """Remove every expired entry.

        Returns:
            Number of entries removed across both maps.
        """
        now = datetime.now(UTC)
        removed = 0
        for entries in (self._access_tokens, self._refresh_tokens):
            expired = [
                token for token, expires_at in entries.items() if now >= expires_at
            ]
            for token in expired:
                del entries[token]
            removed += len(expired)
        return removed

    def get_blacklist_size(self) -> BlacklistSize:
        return BlacklistSize(
            access_tokens=len(self._access_tokens),
            refresh_tokens=len(self._refresh_tokens),
        )

    def clear(self) -> None:
        self._access_tokens.clear()
        self._refresh_tokens.clear()

    @staticmethod
    def _is_listed(entries: dict[str, datetime], token: str) -> bool:
        expires_at = entries.get(token)
        if expires_at is None:
            return False

        if datetime.now(UTC) >= expires_at:
            # Past natural expiry: evict on read
            del entries[token]
            return False

        return True
