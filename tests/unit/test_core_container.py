"""Unit tests for the dependency container.

Tests cover:
- Application-scoped singletons (logger, services, database, repositories)
- Repositories sharing one database
- Handler factories wiring configured collaborators
- Invalid configuration surfaced as RuntimeError

Architecture:
- Unit tests against real adapters built from a testing environment
- get_settings() patched where configuration must bypass Settings validation
"""

from unittest.mock import MagicMock, patch

import pytest

from src.application.commands.handlers.change_master_password_handler import (
    ChangeMasterPasswordHandler,
)
from src.application.commands.handlers.create_vault_entry_handler import (
    CreateVaultEntryHandler,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.queries.handlers.list_vault_entries_handler import (
    ListVaultEntriesHandler,
)
from src.core.container import (
    get_change_master_password_handler,
    get_create_vault_entry_handler,
    get_database,
    get_encryption_service,
    get_list_vault_entries_handler,
    get_logger,
    get_login_user_handler,
    get_password_service,
    get_token_blacklist,
    get_token_service,
    get_user_repository,
    get_vault_entry_repository,
)
from src.infrastructure.logging import ConsoleAdapter
from src.infrastructure.security import (
    BcryptPasswordService,
    EnvelopeEncryptionService,
    InMemoryTokenBlacklist,
    JWTService,
)

SETTINGS = "src.core.container.infrastructure.get_settings"


@pytest.mark.unit
@pytest.mark.usefixtures("test_settings_env")
class TestInfrastructureSingletons:
    """Test app-scoped infrastructure factories."""

    @pytest.mark.parametrize(
        ("factory", "expected_type"),
        [
            (get_logger, ConsoleAdapter),
            (get_password_service, BcryptPasswordService),
            (get_token_service, JWTService),
            (get_token_blacklist, InMemoryTokenBlacklist),
            (get_encryption_service, EnvelopeEncryptionService),
        ],
    )
    def test_factory_returns_singleton(self, factory, expected_type):
        first = factory()
        second = factory()

        assert isinstance(first, expected_type)
        assert first is second

    def test_repositories_share_database(self):
        """Test both repositories write to the same database."""
        database = get_database()

        assert get_user_repository().db is database
        assert get_vault_entry_repository().db is database


@pytest.mark.unit
@pytest.mark.usefixtures("test_settings_env")
class TestHandlerFactories:
    """Test handler wiring."""

    def test_login_handler_uses_configured_lifetime(self, monkeypatch):
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")
        from src.core.config import get_settings

        get_settings.cache_clear()

        handler = get_login_user_handler()

        assert isinstance(handler, LoginUserHandler)
        assert handler._access_token_expires_in == 300
        assert handler._token_service is get_token_service()

    def test_change_master_password_handler_uses_database_transactions(self):
        handler = get_change_master_password_handler()

        assert isinstance(handler, ChangeMasterPasswordHandler)
        assert handler._transaction_manager is get_database()
        assert handler._token_blacklist is get_token_blacklist()

    def test_create_vault_entry_handler_verifies_against_user_repository(self):
        handler = get_create_vault_entry_handler()

        assert isinstance(handler, CreateVaultEntryHandler)
        assert handler._user_repo is get_user_repository()
        assert handler._password_service is get_password_service()
        assert handler._encryption_service is get_encryption_service()

    def test_handlers_created_per_call(self):
        assert get_list_vault_entries_handler() is not get_list_vault_entries_handler()
        assert isinstance(get_list_vault_entries_handler(), ListVaultEntriesHandler)


@pytest.mark.unit
@pytest.mark.usefixtures("test_settings_env")
class TestInvalidConfiguration:
    """Test invalid configuration is fatal at startup."""

    def test_short_secret_raises_runtime_error(self):
        settings = MagicMock(
            secret_key="short",
            access_token_expire_minutes=15,
            refresh_token_expire_days=7,
        )
        with patch(SETTINGS, return_value=settings):
            with pytest.raises(RuntimeError, match="Invalid token configuration"):
                get_token_service()

    def test_weak_kdf_raises_runtime_error(self):
        settings = MagicMock(kdf_iterations=1_000)
        with patch(SETTINGS, return_value=settings):
            with pytest.raises(RuntimeError, match="Invalid encryption configuration"):
                get_encryption_service()

    def test_bcrypt_cost_out_of_range_raises_runtime_error(self):
        settings = MagicMock(bcrypt_rounds=4)
        with patch(SETTINGS, return_value=settings):
            with pytest.raises(RuntimeError, match="Invalid password hashing"):
                get_password_service()
