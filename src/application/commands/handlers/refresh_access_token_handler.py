"""Refresh Access Token handler for User Authentication.

Flow (order matters):
1. Shape-check the refresh token
2. Blacklist check; a revoked token fails without signature verification
3. Verify signature, expiry and type, extract user_id
4. Issue a new access token only
5. Return Success(RefreshedAccessToken)

Refresh tokens are not rotated: the same refresh token stays valid until
its own expiry or until it is blacklisted.

Every failure returns the same INVALID_REFRESH_TOKEN error.

Architecture:
- Application layer ONLY imports from domain layer (protocols, value objects)
"""

from src.application.commands.auth_commands import RefreshAccessToken
from src.application.dtos.auth_dtos import (
    ACCESS_TOKEN_EXPIRES_IN,
    RefreshedAccessToken,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.errors import UserError
from src.domain.protocols import (
    LoggerProtocol,
    TokenBlacklistProtocol,
    TokenGenerationProtocol,
)
from src.domain.value_objects import RefreshToken


class RefreshAccessTokenHandler:
    """Handler for refresh access token command."""

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        token_blacklist: TokenBlacklistProtocol,
        logger: LoggerProtocol,
        access_token_expires_in: int = ACCESS_TOKEN_EXPIRES_IN,
    ) -> None:
        """Initialize refresh handler with dependencies.

        Args:
            token_service: JWT issuance and verification.
            token_blacklist: Revoked-token store.
            logger: Structured logger.
            access_token_expires_in: Seconds reported as ``expires_in``.
        """
        self._token_service = token_service
        self._token_blacklist = token_blacklist
        self._logger = logger
        self._access_token_expires_in = access_token_expires_in

    async def handle(
        self, cmd: RefreshAccessToken
    ) -> Result[RefreshedAccessToken, AuthenticationError]:
        """Handle refresh access token command.

        Args:
            cmd: RefreshAccessToken command.

        Returns:
            Success(RefreshedAccessToken) with a new access token.
            Failure(AuthenticationError(INVALID_REFRESH_TOKEN)) otherwise.
        """
        # Step 1: Shape check
        try:
            refresh_token = RefreshToken(cmd.refresh_token)
        except ValueError:
            return Failure(error=self._invalid_refresh_token())

        # Step 2: Blacklist check before any signature work
        if await self._token_blacklist.is_refresh_token_blacklisted(refresh_token):
            self._logger.info("Refresh rejected", reason="blacklisted")
            return Failure(error=self._invalid_refresh_token())

        # Step 3: Verify and extract user_id
        verification = self._token_service.verify_refresh_token(refresh_token)
        if isinstance(verification, Failure):
            self._logger.info("Refresh rejected", reason="verification_failed")
            return verification
        user_id = verification.value

        # Step 4: Issue new access token only
        access_token = self._token_service.generate_access_token(user_id)

        self._logger.info("Access token refreshed", user_id=str(user_id))

        # Step 5: Return token
        return Success(
            value=RefreshedAccessToken(
                access_token=access_token.value,
                expires_in=self._access_token_expires_in,
            )
        )

    @staticmethod
    def _invalid_refresh_token() -> AuthenticationError:
        return AuthenticationError(
            code=ErrorCode.INVALID_REFRESH_TOKEN,
            message=UserError.INVALID_REFRESH_TOKEN,
        )
