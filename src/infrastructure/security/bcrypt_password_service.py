"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol for the master password verifier using
bcrypt with cost factor 12.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Bcrypt with cost factor 12 (~250ms per hash)
    - Salt generated separately and stored next to the hash
    - Only the first 72 bytes of a password are significant (bcrypt limit)

Performance:
    - Hash and verify run in a worker thread (asyncio.to_thread) so they
      block only the calling task
"""

import asyncio

import bcrypt

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.value_objects.master_password import MasterPassword

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordService:
    """Bcrypt master password hashing service.

    Usage:
        # Via dependency injection
        from src.core.container import get_password_service

        password_service = get_password_service()

        salt = password_service.generate_salt()
        password_hash = await password_service.hash_password("Secure123!longEnough", salt)
        is_valid = await password_service.verify_password("Secure123!longEnough", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).
                Cost factor is logarithmic: each +1 doubles computation time.

        Raises:
            ValueError: If cost_factor is outside 10..20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def generate_salt(self) -> str:
        """Generate a bcrypt salt carrying the configured cost factor.

        Returns:
            Salt string (format: $2b$<cost>$<22 chars>).
        """
        return bcrypt.gensalt(rounds=self._cost_factor).decode("utf-8")

    async def hash_password(self, password: str, salt: str) -> str:
        """Hash a plaintext password with the given salt.

        Args:
            password: Plaintext password to hash.
            salt: Salt produced by generate_salt().

        Returns:
            Hashed password string (60 characters, $2b$12$...).

        Example:
            >>> service = BcryptPasswordService()
            >>> salt = service.generate_salt()
            >>> password_hash = await service.hash_password("Secure123!longEnough", salt)
            >>> password_hash.startswith(salt)
            True
        """
        password_hash = await asyncio.to_thread(
            bcrypt.hashpw, _encode(password), salt.encode("utf-8")
        )
        return password_hash.decode("utf-8")

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash, False otherwise (including for a
            malformed hash).
        """
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, _encode(password), password_hash.encode("utf-8")
            )
        except ValueError:
            # Invalid hash format
            return False

    def validate_complexity(self, password: str) -> Result[None, ValidationError]:
        """Check master password complexity.

        Requirements: at least 12 characters with an uppercase letter, a
        lowercase letter, a digit and a special character.

        Example:
            >>> service.validate_complexity("short1!")
            Failure(error=ValidationError(code=<ErrorCode.PASSWORD_TOO_WEAK: ...>, ...))
            >>> service.validate_complexity("Secure123!longEnough")
            Success(value=None)
        """
        try:
            MasterPassword(password)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.PASSWORD_TOO_WEAK,
                    message=str(e),
                    field="password",
                )
            )
        return Success(value=None)
