"""Unit tests for token lifecycle handlers.

Tests cover:
- LogoutUserHandler: blacklists access and optional refresh token in one call
- RefreshAccessTokenHandler: blacklist check precedes verification,
  only an access token is issued, failures collapse to INVALID_REFRESH_TOKEN
- VerifyAccessTokenHandler: blacklist then verification, TOKEN_INVALID

Architecture:
- Unit tests for application handlers (mocked dependencies)
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.auth_commands import LogoutUser, RefreshAccessToken
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
from src.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from src.application.dtos import RefreshedAccessToken
from src.application.queries.auth_queries import VerifyAccessToken
from src.application.queries.handlers.verify_access_token_handler import (
    VerifyAccessTokenHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Success
from src.domain.errors import UserError
from src.domain.value_objects import AccessToken, RefreshToken


def mock_blacklist(blacklisted: bool = False) -> Mock:
    blacklist = Mock()
    blacklist.add_to_blacklist = AsyncMock(return_value=Success(value=None))
    blacklist.is_access_token_blacklisted = AsyncMock(return_value=blacklisted)
    blacklist.is_refresh_token_blacklisted = AsyncMock(return_value=blacklisted)
    return blacklist


@pytest.mark.unit
class TestLogoutUserHandler:
    """Test logout."""

    @pytest.mark.asyncio
    async def test_logout_blacklists_both_tokens_once(self):
        """Test both tokens are revoked in a single call."""
        # Arrange
        blacklist = mock_blacklist()
        handler = LogoutUserHandler(token_blacklist=blacklist, logger=Mock())

        # Act
        result = await handler.handle(
            LogoutUser(access_token="a.b.c", refresh_token="d.e.f")
        )

        # Assert
        assert isinstance(result, Success)
        blacklist.add_to_blacklist.assert_awaited_once_with(
            access_token=AccessToken("a.b.c"), refresh_token=RefreshToken("d.e.f")
        )

    @pytest.mark.asyncio
    async def test_logout_without_refresh_token(self):
        """Test refresh token is optional."""
        blacklist = mock_blacklist()
        handler = LogoutUserHandler(token_blacklist=blacklist, logger=Mock())

        result = await handler.handle(LogoutUser(access_token="a.b.c"))

        assert isinstance(result, Success)
        blacklist.add_to_blacklist.assert_awaited_once_with(
            access_token=AccessToken("a.b.c"), refresh_token=None
        )

    @pytest.mark.asyncio
    async def test_malformed_token_rejected(self):
        """Test structural validation happens before blacklisting."""
        blacklist = mock_blacklist()
        handler = LogoutUserHandler(token_blacklist=blacklist, logger=Mock())

        result = await handler.handle(LogoutUser(access_token="not-a-jwt"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        blacklist.add_to_blacklist.assert_not_awaited()


@pytest.mark.unit
class TestRefreshAccessTokenHandler:
    """Test refresh flow ordering."""

    @staticmethod
    def build(blacklisted: bool = False, verification=None):
        token_service = Mock()
        token_service.verify_refresh_token.return_value = verification
        token_service.generate_access_token.return_value = AccessToken("new.acc.tok")
        handler = RefreshAccessTokenHandler(
            token_service=token_service,
            token_blacklist=mock_blacklist(blacklisted),
            logger=Mock(),
        )
        return handler, token_service

    @pytest.mark.asyncio
    async def test_refresh_issues_access_token_only(self):
        """Test a valid refresh token yields a new access token."""
        # Arrange
        user_id = uuid7()
        handler, token_service = self.build(verification=Success(value=user_id))

        # Act
        result = await handler.handle(RefreshAccessToken(refresh_token="r.e.f"))

        # Assert
        assert isinstance(result, Success)
        assert isinstance(result.value, RefreshedAccessToken)
        assert result.value.access_token == "new.acc.tok"
        token_service.generate_access_token.assert_called_once_with(user_id)
        token_service.generate_refresh_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_blacklisted_token_fails_without_verification(self):
        """Test blacklist check short-circuits signature verification."""
        handler, token_service = self.build(blacklisted=True)

        result = await handler.handle(RefreshAccessToken(refresh_token="r.e.f"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_REFRESH_TOKEN
        token_service.verify_refresh_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_verification_failure_propagated(self):
        """Test signature/expiry/type failures surface unchanged."""
        error = AuthenticationError(
            code=ErrorCode.INVALID_REFRESH_TOKEN,
            message=UserError.INVALID_REFRESH_TOKEN,
        )
        handler, token_service = self.build(verification=Failure(error=error))

        result = await handler.handle(RefreshAccessToken(refresh_token="r.e.f"))

        assert isinstance(result, Failure)
        assert result.error == error
        token_service.generate_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_token_collapses_to_invalid_refresh_token(self):
        """Test a malformed token gets the same error as a forged one."""
        handler, _ = self.build()

        result = await handler.handle(RefreshAccessToken(refresh_token="garbage"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_REFRESH_TOKEN
        assert result.error.message == UserError.INVALID_REFRESH_TOKEN


@pytest.mark.unit
class TestVerifyAccessTokenHandler:
    """Test access token verification."""

    @pytest.mark.asyncio
    async def test_valid_token_returns_user_id(self):
        user_id = uuid7()
        token_service = Mock()
        token_service.verify_access_token.return_value = Success(value=user_id)
        handler = VerifyAccessTokenHandler(
            token_service=token_service, token_blacklist=mock_blacklist()
        )

        result = await handler.handle(VerifyAccessToken(access_token="a.b.c"))

        assert isinstance(result, Success)
        assert result.value == user_id

    @pytest.mark.asyncio
    async def test_blacklisted_token_rejected(self):
        """Test a revoked token is rejected before verification."""
        token_service = Mock()
        handler = VerifyAccessTokenHandler(
            token_service=token_service, token_blacklist=mock_blacklist(True)
        )

        result = await handler.handle(VerifyAccessToken(access_token="a.b.c"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID
        token_service.verify_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_malformed_token_rejected(self):
        handler = VerifyAccessTokenHandler(
            token_service=Mock(), token_blacklist=mock_blacklist()
        )

        result = await handler.handle(VerifyAccessToken(access_token=""))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID
