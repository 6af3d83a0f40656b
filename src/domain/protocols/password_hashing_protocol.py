"""Password hashing protocol for domain layer.

Defines the interface for producing and checking the master password
verifier. Infrastructure layer provides the bcrypt implementation.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (BcryptPasswordService)
    - Hashing is CPU-bound; implementations must not block the event loop
"""

from typing import Protocol

from src.core.errors import ValidationError
from src.core.result import Result


class PasswordHashingProtocol(Protocol):
    """Master password hashing, verification and complexity interface.

    Usage:
        match password_service.validate_complexity(new_password):
            case Failure(error=error):
                return Failure(error=error)

        salt = password_service.generate_salt()
        password_hash = await password_service.hash_password(new_password, salt)
        is_valid = await password_service.verify_password(candidate, password_hash)
    """

    def generate_salt(self) -> str:
        """Generate a fresh salt for a new verifier.

        Returns:
            Salt string in the hashing algorithm's native format.
        """
        ...

    async def hash_password(self, password: str, salt: str) -> str:
        """Hash a plaintext password with the given salt.

        Args:
            password: Plaintext password to hash.
            salt: Salt from generate_salt().

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).
        """
        ...

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash, False otherwise.

        Note:
            - Constant-time comparison
            - Returns False for invalid hash format (no exceptions)
        """
        ...

    def validate_complexity(self, password: str) -> Result[None, ValidationError]:
        """Check master password complexity rules.

        Args:
            password: Candidate master password.

        Returns:
            Success(None) if the password is acceptable.
            Failure(ValidationError) naming the first rule that failed.
        """
        ...
