"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.
Values are read once (``get_settings`` is cached) and handed to services
as constructor arguments, so the core never reads the environment itself.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Nothing is loaded at import time

Usage:
    from src.core.config import get_settings

    settings = get_settings()
    iterations = settings.kdf_iterations

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

MIN_SECRET_KEY_LENGTH = 32
MIN_KDF_ITERATIONS = 100_000


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Vaultkeeper",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Token signing
    secret_key: str = Field(
        description="Process-wide secret for JWT signing (at least 32 characters)",
    )
    access_token_expire_minutes: int = Field(
        default=15,
        description="Access token lifetime in minutes",
    )
    refresh_token_expire_days: int = Field(
        default=7,
        description="Refresh token lifetime in days",
    )

    # Credential verifier and vault key derivation
    bcrypt_rounds: int = Field(
        default=12,
        description="Number of bcrypt hashing rounds for the master password verifier",
    )
    kdf_iterations: int = Field(
        default=MIN_KDF_ITERATIONS,
        description="PBKDF2-SHA256 iterations used to derive vault encryption keys",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """
        Reject blank or short signing secrets.

        Args:
            v: Secret key.

        Returns:
            str: Validated secret key.

        Raises:
            ValueError: If the secret is blank or shorter than 32 characters.
        """
        if not v.strip():
            raise ValueError("secret_key cannot be empty or whitespace")
        if len(v) < MIN_SECRET_KEY_LENGTH:
            raise ValueError(
                f"secret_key must be at least {MIN_SECRET_KEY_LENGTH} characters long"
            )
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """
        Validate bcrypt rounds are within safe range.

        Args:
            v: Number of bcrypt rounds.

        Returns:
            int: Validated bcrypt rounds.

        Raises:
            ValueError: If rounds are not between 10 and 20.
        """
        if not 10 <= v <= 20:
            raise ValueError("bcrypt_rounds must be between 10 and 20")
        return v

    @field_validator("kdf_iterations")
    @classmethod
    def validate_kdf_iterations(cls, v: int) -> int:
        """
        Keep key derivation deliberately slow.

        Args:
            v: PBKDF2 iteration count.

        Returns:
            int: Validated iteration count.

        Raises:
            ValueError: If fewer than 100,000 iterations are configured.
        """
        if v < MIN_KDF_ITERATIONS:
            raise ValueError(f"kdf_iterations must be at least {MIN_KDF_ITERATIONS}")
        return v

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.

    Raises:
        pydantic.ValidationError: If SECRET_KEY is missing or too short.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
