"""Token generation protocol (port).

Issues and verifies signed access/refresh tokens. Expiry lives inside the
token; revocation before expiry is the blacklist's job.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
    - Verification failures are deliberately undifferentiated
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import AuthenticationError
from src.core.result import Result
from src.domain.value_objects.auth_tokens import AccessToken, RefreshToken


class TokenGenerationProtocol(Protocol):
    """Access/refresh token service.

    Token payload carries ``user_id`` and ``type`` ("access" | "refresh")
    plus issued-at and expiry claims.
    """

    def generate_access_token(self, user_id: UUID) -> AccessToken:
        """Issue an access token (expires in 15 minutes).

        Args:
            user_id: Token subject.

        Returns:
            Signed AccessToken.
        """
        ...

    def generate_refresh_token(self, user_id: UUID) -> RefreshToken:
        """Issue a refresh token (expires in 7 days).

        Args:
            user_id: Token subject.

        Returns:
            Signed RefreshToken.
        """
        ...

    def verify_refresh_token(
        self, refresh_token: RefreshToken
    ) -> Result[UUID, AuthenticationError]:
        """Verify a refresh token and extract its subject.

        Returns:
            Success(user_id) if signature, expiry, type and subject are valid.
            Failure(AuthenticationError(INVALID_REFRESH_TOKEN)) otherwise,
            whatever the underlying cause.
        """
        ...

    def verify_access_token(
        self, access_token: AccessToken
    ) -> Result[UUID, AuthenticationError]:
        """Verify an access token and extract its subject.

        Returns:
            Success(user_id) or Failure(AuthenticationError(TOKEN_INVALID)).
        """
        ...
