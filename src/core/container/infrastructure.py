"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console)
- Password hashing (bcrypt)
- Token generation (JWT)
- Token blacklist (in-memory)
- Envelope encryption (PBKDF2 + AES-256-GCM)
- Database (in-memory, transactional)

Configuration is read once through get_settings() and passed to adapters as
constructor arguments. Invalid configuration (short signing secret, weak KDF
iteration count) is a fatal startup error surfaced as RuntimeError.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.encryption_protocol import EnvelopeEncryptionProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_blacklist_protocol import TokenBlacklistProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
    from src.infrastructure.persistence.database import InMemoryDatabase


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor
    (12 by default, ~250ms per hash).

    Returns:
        Password hashing service implementing PasswordHashingProtocol.

    Raises:
        RuntimeError: If the configured cost factor is rejected.
    """
    from src.infrastructure.security import BcryptPasswordService

    try:
        return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)
    except ValueError as e:
        raise RuntimeError(f"Invalid password hashing configuration: {e}") from e


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns JWTService with HMAC-SHA256, 15-minute access tokens and 7-day
    refresh tokens unless configured otherwise.

    Returns:
        Token generation service implementing TokenGenerationProtocol.

    Raises:
        RuntimeError: If the signing secret is missing or too short.
    """
    from src.infrastructure.security import JWTService

    settings = get_settings()
    try:
        return JWTService(
            secret_key=settings.secret_key,
            access_token_expire_minutes=settings.access_token_expire_minutes,
            refresh_token_expire_days=settings.refresh_token_expire_days,
        )
    except ValueError as e:
        raise RuntimeError(f"Invalid token configuration: {e}") from e


@lru_cache()
def get_token_blacklist() -> "TokenBlacklistProtocol":
    """Get token blacklist singleton (app-scoped).

    Entries are retained for one token lifetime from insertion.

    Returns:
        Token blacklist implementing TokenBlacklistProtocol.
    """
    from datetime import timedelta

    from src.infrastructure.security import InMemoryTokenBlacklist

    settings = get_settings()
    return InMemoryTokenBlacklist(
        access_token_lifetime=timedelta(minutes=settings.access_token_expire_minutes),
        refresh_token_lifetime=timedelta(days=settings.refresh_token_expire_days),
    )


@lru_cache()
def get_encryption_service() -> "EnvelopeEncryptionProtocol":
    """Get envelope encryption service singleton (app-scoped).

    Returns:
        EnvelopeEncryptionService (PBKDF2-SHA256 + AES-256-GCM).

    Raises:
        RuntimeError: If the configured KDF iteration count is too low.
    """
    from src.infrastructure.security import EnvelopeEncryptionService

    try:
        return EnvelopeEncryptionService(iterations=get_settings().kdf_iterations)
    except ValueError as e:
        raise RuntimeError(f"Invalid encryption configuration: {e}") from e


@lru_cache()
def get_database() -> "InMemoryDatabase":
    """Get database singleton (app-scoped).

    Shared by every repository so transaction() spans users and vault
    entries.

    Returns:
        InMemoryDatabase instance.
    """
    from src.infrastructure.persistence.database import InMemoryDatabase

    return InMemoryDatabase()
