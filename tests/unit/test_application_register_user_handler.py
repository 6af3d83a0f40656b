"""Unit tests for RegisterUserHandler.

Tests cover:
- Successful registration (active user, zero failures, hashed password)
- Weak master password rejected before any lookup
- Invalid email / username rejected
- Duplicate email / username rejected with ConflictError

Architecture:
- Unit tests for application handler (mocked dependencies)
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.application.commands.auth_commands import RegisterUser
from src.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, ValidationError
from src.core.result import Failure, Success
from src.domain.entities.user import User
from src.infrastructure.security import BcryptPasswordService
from tests.conftest import STRONG_MASTER_PASSWORD


def build_handler(email_taken: bool = False, username_taken: bool = False):
    user_repo = AsyncMock()
    user_repo.exists_by_email.return_value = email_taken
    user_repo.exists_by_username.return_value = username_taken

    password_service = Mock()
    # Complexity rules come from the real service; hashing is mocked
    password_service.validate_complexity.side_effect = (
        BcryptPasswordService(cost_factor=10).validate_complexity
    )
    password_service.generate_salt.return_value = "generated_salt"
    password_service.hash_password = AsyncMock(return_value="hashed")

    handler = RegisterUserHandler(
        user_repo=user_repo, password_service=password_service, logger=Mock()
    )
    return handler, user_repo, password_service


def register_command(**overrides) -> RegisterUser:
    data = {
        "email": "New.User@Example.com",
        "username": "  newuser ",
        "master_password": STRONG_MASTER_PASSWORD,
    }
    data.update(overrides)
    return RegisterUser(**data)


@pytest.mark.unit
class TestRegisterUserHandler:
    """Test registration flow."""

    @pytest.mark.asyncio
    async def test_registration_saves_active_user(self):
        """Test successful registration persists a normalized user."""
        # Arrange
        handler, user_repo, password_service = build_handler()

        # Act
        result = await handler.handle(register_command())

        # Assert
        assert isinstance(result, Success)
        saved: User = user_repo.save.call_args.args[0]
        assert saved.id == result.value
        assert saved.email == "new.user@example.com"
        assert saved.username == "newuser"
        assert saved.password_hash == "hashed"
        assert saved.salt == "generated_salt"
        assert saved.is_active is True
        assert saved.failed_login_attempts == 0
        password_service.hash_password.assert_awaited_once_with(
            STRONG_MASTER_PASSWORD, "generated_salt"
        )

    @pytest.mark.asyncio
    async def test_weak_password_rejected(self):
        """Test complexity failure stops registration."""
        handler, user_repo, _ = build_handler()

        result = await handler.handle(register_command(master_password="short1!"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.PASSWORD_TOO_WEAK
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_email_rejected(self):
        handler, user_repo, _ = build_handler()

        result = await handler.handle(register_command(email="not-an-email"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_EMAIL
        assert result.error.field == "email"
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_username_rejected(self):
        handler, _, _ = build_handler()

        result = await handler.handle(register_command(username="ab"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_USERNAME

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self):
        """Test email uniqueness is enforced."""
        handler, user_repo, _ = build_handler(email_taken=True)

        result = await handler.handle(register_command())

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS
        assert result.error.conflicting_field == "email"
        user_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self):
        """Test username uniqueness is enforced."""
        handler, _, _ = build_handler(username_taken=True)

        result = await handler.handle(register_command())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.USERNAME_ALREADY_EXISTS
