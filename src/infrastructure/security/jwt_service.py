"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - Secret of at least 32 characters, checked once at construction
    - Access tokens expire after 15 minutes, refresh tokens after 7 days
    - ``type`` claim keeps access tokens from being replayed as refresh tokens
    - Unique JWT ID (jti) so two tokens issued in the same second differ

Token payload:
    {"user_id": "<uuid>", "type": "access" | "refresh", "iat": ..., "exp": ..., "jti": ...}
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt
from jwt.exceptions import InvalidTokenError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.errors import UserError
from src.domain.value_objects.auth_tokens import AccessToken, RefreshToken

MIN_SECRET_KEY_LENGTH = 32
ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JWTService:
    """JWT token generation and verification service.

    Usage:
        # Via dependency injection
        from src.core.container import get_token_service

        token_service = get_token_service()

        access_token = token_service.generate_access_token(user.id)
        refresh_token = token_service.generate_refresh_token(user.id)

        match token_service.verify_refresh_token(refresh_token):
            case Success(value=user_id):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        secret_key: str | None,
        access_token_expire_minutes: int = AccessToken.EXPIRATION_MINUTES,
        refresh_token_expire_days: int = RefreshToken.EXPIRATION_DAYS,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Process-wide signing secret (at least 32 characters).
            access_token_expire_minutes: Access token lifetime (default: 15).
            refresh_token_expire_days: Refresh token lifetime (default: 7).

        Raises:
            ValueError: If secret_key is missing, blank or too short.

        Note:
            Secret key should come from settings, NEVER hardcoded.
        """
        if not secret_key:
            msg = "JWT secret key is required"
            raise ValueError(msg)
        if not secret_key.strip():
            msg = "JWT secret key cannot be empty or whitespace"
            raise ValueError(msg)
        if len(secret_key) < MIN_SECRET_KEY_LENGTH:
            msg = (
                f"JWT secret key must be at least {MIN_SECRET_KEY_LENGTH} characters "
                f"long (got {len(secret_key)})"
            )
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_lifetime = timedelta(minutes=access_token_expire_minutes)
        self._refresh_lifetime = timedelta(days=refresh_token_expire_days)
        self._algorithm = "HS256"  # HMAC-SHA256

    def generate_access_token(self, user_id: UUID) -> AccessToken:
        """Generate a JWT access token.

        Args:
            user_id: User's unique identifier.

        Returns:
            AccessToken wrapping header.payload.signature.
        """
        return AccessToken(
            self._encode(user_id, ACCESS_TOKEN_TYPE, self._access_lifetime)
        )

    def generate_refresh_token(self, user_id: UUID) -> RefreshToken:
        """Generate a JWT refresh token.

        Args:
            user_id: User's unique identifier.

        Returns:
            RefreshToken wrapping header.payload.signature.
        """
        return RefreshToken(
            self._encode(user_id, REFRESH_TOKEN_TYPE, self._refresh_lifetime)
        )

    def verify_refresh_token(
        self, refresh_token: RefreshToken
    ) -> Result[UUID, AuthenticationError]:
        """Verify a refresh token and extract the user ID.

        Invalid signature, expiry, wrong ``type`` and a missing or malformed
        ``user_id`` all produce the same failure.

        Args:
            refresh_token: Token to verify.

        Returns:
            Success(user_id) or Failure(AuthenticationError(INVALID_REFRESH_TOKEN)).
        """
        user_id = self._decode_subject(refresh_token.value, REFRESH_TOKEN_TYPE)
        if user_id is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_REFRESH_TOKEN,
                    message=UserError.INVALID_REFRESH_TOKEN,
                )
            )
        return Success(value=user_id)

    def verify_access_token(
        self, access_token: AccessToken
    ) -> Result[UUID, AuthenticationError]:
        """Verify an access token and extract the user ID.

        Args:
            access_token: Token to verify.

        Returns:
            Success(user_id) or Failure(AuthenticationError(TOKEN_INVALID)).
        """
        user_id = self._decode_subject(access_token.value, ACCESS_TOKEN_TYPE)
        if user_id is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=UserError.INVALID_ACCESS_TOKEN,
                )
            )
        return Success(value=user_id)

    def _encode(self, user_id: UUID, token_type: str, lifetime: timedelta) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "user_id": str(user_id),
            "type": token_type,
            "iat": int(now.timestamp()),  # Issued at
            "exp": int((now + lifetime).timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def _decode_subject(self, token: str, expected_type: str) -> UUID | None:
        """Return the token's user ID, or None if the token is unusable."""
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except InvalidTokenError:
            return None

        if payload.get("type") != expected_type:
            return None

        raw_user_id = payload.get("user_id")
        if not isinstance(raw_user_id, str) or not raw_user_id:
            return None

        try:
            return UUID(raw_user_id)
        except ValueError:
            return None
