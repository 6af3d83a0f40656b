"""VerifyAccessToken query handler.

Resolves the user behind an access token for callers guarding vault
operations. Blacklist first, then signature, expiry and type. Every failure
collapses to TOKEN_INVALID.
"""

from uuid import UUID

from src.application.queries.auth_queries import VerifyAccessToken
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result
from src.domain.errors import UserError
from src.domain.protocols import TokenBlacklistProtocol, TokenGenerationProtocol
from src.domain.value_objects import AccessToken


class VerifyAccessTokenHandler:
    """Handler for VerifyAccessToken query."""

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        token_blacklist: TokenBlacklistProtocol,
    ) -> None:
        self._token_service = token_service
        self._token_blacklist = token_blacklist

    async def handle(
        self, query: VerifyAccessToken
    ) -> Result[UUID, AuthenticationError]:
        """Handle VerifyAccessToken query.

        Returns:
            Success(user_id) for a live, unrevoked access token.
            Failure(AuthenticationError(TOKEN_INVALID)) otherwise.
        """
        try:
            access_token = AccessToken(query.access_token)
        except ValueError:
            return Failure(error=_token_invalid())

        if await self._token_blacklist.is_access_token_blacklisted(access_token):
            return Failure(error=_token_invalid())

        return self._token_service.verify_access_token(access_token)


def _token_invalid() -> AuthenticationError:
    return AuthenticationError(
        code=ErrorCode.TOKEN_INVALID,
        message=UserError.INVALID_ACCESS_TOKEN,
    )
