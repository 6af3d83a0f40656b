"""Pytest configuration and shared test helpers.

This configuration ensures:
1. Async tests are marked for pytest-asyncio
2. Custom markers are registered
3. Container singletons and cached settings never leak between tests
"""

import inspect
from datetime import UTC, datetime
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.domain.entities.user import User
from src.domain.entities.vault_entry import VaultEntry
from src.domain.enums import VaultCategory
from src.domain.value_objects import EncryptedPassword, Tags

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

TEST_SECRET_KEY = "test-secret-key-with-at-least-32-characters"
STRONG_MASTER_PASSWORD = "Secure123!longEnough"
OTHER_MASTER_PASSWORD = "Another456?evenLonger"

# Structurally valid envelope (16/12/16-byte fields, 5-byte ciphertext)
SAMPLE_ENVELOPE = (
    "AAAAAAAAAAAAAAAAAAAAAA==:AAAAAAAAAAAAAAAA:AAAAAAAAAAAAAAAAAAAAAA==:aGVsbG8="
)


# Test helper functions for domain entities


def create_user(
    user_id: UUID | None = None,
    email: str = "test@example.com",
    username: str = "tester",
    password_hash: str = "hashed_password",
    salt: str = "salt",
    is_active: bool = True,
    failed_login_attempts: int = 0,
    last_login_at: datetime | None = None,
) -> User:
    """Helper to create User entities for testing."""
    return User(
        id=user_id or uuid7(),
        email=email,
        username=username,
        password_hash=password_hash,
        salt=salt,
        is_active=is_active,
        failed_login_attempts=failed_login_attempts,
        last_login_at=last_login_at,
        created_at=datetime.now(UTC),
    )


def create_vault_entry(
    entry_id: UUID | None = None,
    user_id: UUID | None = None,
    site_name: str = "GitHub",
    username: str = "octocat",
    encrypted_password: EncryptedPassword | None = None,
    category: VaultCategory = VaultCategory.OTHER,
    tags: list[str] | None = None,
    created_at: datetime | None = None,
) -> VaultEntry:
    """Helper to create VaultEntry entities for testing.

    Usage:
        entry = create_vault_entry(user_id=user.id, category=VaultCategory.WORK)
    """
    now = created_at or datetime.now(UTC)
    return VaultEntry(
        id=entry_id or uuid7(),
        user_id=user_id or uuid7(),
        site_name=site_name,
        username=username,
        encrypted_password=encrypted_password or EncryptedPassword(SAMPLE_ENVELOPE),
        category=category,
        tags=Tags.from_strings(tags),
        created_at=now,
        updated_at=now,
    )


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real crypto and stores"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def test_settings_env(monkeypatch):
    """Point settings at a valid testing configuration.

    Clears cached settings and container singletons before and after the test.
    """
    from src.core.config import get_settings
    from src.core.container import infrastructure, repositories

    cached = [
        get_settings,
        infrastructure.get_logger,
        infrastructure.get_password_service,
        infrastructure.get_token_service,
        infrastructure.get_token_blacklist,
        infrastructure.get_encryption_service,
        infrastructure.get_database,
        repositories.get_user_repository,
        repositories.get_vault_entry_repository,
    ]

    monkeypatch.setenv("SECRET_KEY", TEST_SECRET_KEY)
    monkeypatch.setenv("ENVIRONMENT", "testing")
    monkeypatch.setenv("BCRYPT_ROUNDS", "10")
    for factory in cached:
        factory.cache_clear()

    yield

    for factory in cached:
        factory.cache_clear()
