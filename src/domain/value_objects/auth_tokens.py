"""Access and refresh token value objects.

Tokens are validated structurally only: three non-empty dot-separated
segments (header.payload.signature). Signature and expiry checks belong to
the token service, so a structurally valid token can be blacklisted without
being verified.

Lifetimes live here so the signing adapter and the blacklist agree on them.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar


def _ensure_jwt_shape(value: object, kind: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{kind} cannot be empty")
    parts = value.split(".")
    if len(parts) != 3 or not all(parts):
        raise ValueError(f"{kind} must have three non-empty dot-separated segments")


@dataclass(frozen=True)
class AccessToken:
    """Short-lived bearer token (15 minutes).

    Attributes:
        value: Encoded token string.

    Raises:
        ValueError: If the token is not shaped like a JWT.

    Example:
        >>> AccessToken("aaa.bbb.ccc").value
        'aaa.bbb.ccc'
        >>> AccessToken("not-a-jwt")
        Traceback (most recent call last):
        ...
        ValueError: Access token must have three non-empty dot-separated segments
    """

    EXPIRATION_MINUTES: ClassVar[int] = 15

    value: str

    def __post_init__(self) -> None:
        _ensure_jwt_shape(self.value, "Access token")

    @classmethod
    def lifetime(cls) -> timedelta:
        """Natural lifetime of an access token."""
        return timedelta(minutes=cls.EXPIRATION_MINUTES)

    def __repr__(self) -> str:
        return "AccessToken('***')"


@dataclass(frozen=True)
class RefreshToken:
    """Long-lived token exchanged for new access tokens (7 days).

    Attributes:
        value: Encoded token string.

    Raises:
        ValueError: If the token is not shaped like a JWT.
    """

    EXPIRATION_DAYS: ClassVar[int] = 7

    value: str

    def __post_init__(self) -> None:
        _ensure_jwt_shape(self.value, "Refresh token")

    @classmethod
    def lifetime(cls) -> timedelta:
        """Natural lifetime of a refresh token."""
        return timedelta(days=cls.EXPIRATION_DAYS)

    def __repr__(self) -> str:
        return "RefreshToken('***')"
