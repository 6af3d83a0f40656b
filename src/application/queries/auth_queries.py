"""Authentication queries for CQRS read operations."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class VerifyAccessToken:
    """Query to resolve the user behind an access token.

    Attributes:
        access_token: Raw access token from the caller.
    """

    access_token: str
