"""Envelope encryption protocol for vault passwords.

Defines the port for protecting each vault password under a key derived
from the owner's master password. The key derivation is independent of the
master password verifier (different algorithm, different salt).

Architecture:
    - Domain layer protocol (port)
    - Infrastructure adapter: src/infrastructure/security/envelope_encryption_service.py
    - Used by vault handlers and master password rotation
"""

from dataclasses import dataclass
from typing import Protocol

from src.core.errors import DomainError
from src.core.result import Result
from src.domain.value_objects.encrypted_password import EncryptedPassword


# =============================================================================
# Encryption Error Types (Domain Layer)
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionError(DomainError):
    """Base encryption error.

    Used when encryption fails (key derivation or cipher fault).
    Does NOT inherit from Exception - used in Result types.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DecryptionError(EncryptionError):
    """Decryption failure.

    Covers, without distinguishing between them:
    - Wrong master password
    - Tampered data (authentication tag mismatch)
    - Malformed envelope (bad base64, wrong field lengths)
    """

    pass


# =============================================================================
# Encryption Protocol (Port)
# =============================================================================


class EnvelopeEncryptionProtocol(Protocol):
    """Protocol for envelope encryption of vault passwords.

    Every call derives its key with a slow KDF, so implementations must keep
    that work off the event loop.
    """

    async def encrypt(
        self, plain_password: str, master_password: str
    ) -> Result[EncryptedPassword, EncryptionError]:
        """Encrypt a password under a key derived from the master password.

        Args:
            plain_password: Secret to protect.
            master_password: Owner's master password.

        Returns:
            Success(EncryptedPassword) with fresh salt and nonce.
            Failure(EncryptionError) if encryption fails.
        """
        ...

    async def decrypt(
        self, encrypted: EncryptedPassword, master_password: str
    ) -> Result[str, DecryptionError]:
        """Decrypt an envelope.

        Returns:
            Success(plain_password) or Failure(DecryptionError).
        """
        ...

    async def re_encrypt(
        self,
        encrypted: EncryptedPassword,
        old_master_password: str,
        new_master_password: str,
    ) -> Result[EncryptedPassword, EncryptionError]:
        """Decrypt under the old master password and encrypt under the new one.

        Returns:
            Success(EncryptedPassword) under the new master password.
            Failure(DecryptionError | EncryptionError), propagated unchanged.
        """
        ...
