"""Logout handler for User Authentication.

Flow:
1. Convert raw strings to token value objects (shape check only)
2. Blacklist both tokens in a single call
3. Return Success(None)

No signature verification happens here: a token only needs to be well
formed to be revoked.

Architecture:
- Application layer ONLY imports from domain layer (protocols, value objects)
"""

from src.application.commands.auth_commands import LogoutUser
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.protocols import LoggerProtocol, TokenBlacklistProtocol
from src.domain.value_objects import AccessToken, RefreshToken


class LogoutUserHandler:
    """Handler for logout command.

    Blacklists the access token and, when supplied, the refresh token so
    neither can be used again before its natural expiry.
    """

    def __init__(
        self,
        token_blacklist: TokenBlacklistProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize logout handler with dependencies.

        Args:
            token_blacklist: Revoked-token store.
            logger: Structured logger.
        """
        self._token_blacklist = token_blacklist
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[None, ValidationError]:
        """Handle logout command.

        Args:
            cmd: LogoutUser command with access token and optional refresh token.

        Returns:
            Success(None) once the tokens are blacklisted.
            Failure(ValidationError) if a token is malformed.
        """
        # Step 1: Build token value objects
        try:
            access_token = AccessToken(cmd.access_token)
            refresh_token = (
                RefreshToken(cmd.refresh_token)
                if cmd.refresh_token is not None
                else None
            )
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED, message=str(e), field="token"
                )
            )

        # Step 2: Blacklist
        result = await self._token_blacklist.add_to_blacklist(
            access_token=access_token, refresh_token=refresh_token
        )
        if isinstance(result, Failure):
            return result

        self._logger.info("User logged out", refresh_revoked=refresh_token is not None)

        # Step 3: Return Success
        return Success(value=None)
