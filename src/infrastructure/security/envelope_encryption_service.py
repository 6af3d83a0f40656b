"""Envelope encryption service for vault passwords.

Provides AES-256-GCM encryption under a key derived from the owner's master
password with PBKDF2-HMAC-SHA256. Every encryption draws a fresh salt and
nonce, so no key material is reused across entries or across rotations.

Security Properties:
    - Confidentiality: Only holder of the master password can decrypt
    - Integrity: Tampering is detected via GCM authentication tag
    - Uniqueness: Random salt and nonce per encryption
    - No oracle: wrong password, tampering and malformed envelopes all
      produce the same DecryptionError

Format:
    base64(salt[16]):base64(nonce[12]):base64(tag[16]):base64(ciphertext)

Architecture:
    - Infrastructure adapter (catches cryptography exceptions)
    - Returns Result types (railway-oriented programming)
    - KDF and cipher work run in a worker thread (asyncio.to_thread)
"""

import asyncio
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import VaultError
from src.domain.protocols.encryption_protocol import DecryptionError, EncryptionError
from src.domain.value_objects.encrypted_password import (
    AUTH_TAG_LENGTH,
    NONCE_LENGTH,
    SALT_LENGTH,
    EncryptedPassword,
)

KEY_LENGTH = 32  # 256 bits
MIN_KDF_ITERATIONS = 100_000


class EnvelopeEncryptionService:
    """AES-256-GCM envelope encryption keyed by a master password.

    Usage:
        >>> service = EnvelopeEncryptionService(iterations=100_000)
        >>> match await service.encrypt("hunter2", master_password):
        ...     case Success(value=encrypted):
        ...         entry.encrypted_password = encrypted
        ...     case Failure(error=error):
        ...         ...

    Thread Safety:
        Stateless apart from the iteration count; safe to share.
    """

    def __init__(self, iterations: int = MIN_KDF_ITERATIONS) -> None:
        """Initialize with a key derivation cost.

        Args:
            iterations: PBKDF2 iteration count (at least 100,000).

        Raises:
            ValueError: If iterations is below 100,000.
        """
        if iterations < MIN_KDF_ITERATIONS:
            msg = f"KDF iterations must be at least {MIN_KDF_ITERATIONS}"
            raise ValueError(msg)

        self._iterations = iterations

    async def encrypt(
        self, plain_password: str, master_password: str
    ) -> Result[EncryptedPassword, EncryptionError]:
        """Encrypt a password under a key derived from the master password.

        Steps: random salt, PBKDF2 key, random nonce, AES-GCM seal, encode.

        Args:
            plain_password: Secret to protect (UTF-8 encoded before sealing).
            master_password: Owner's master password.

        Returns:
            Success(EncryptedPassword) or Failure(EncryptionError).
        """
        try:
            encrypted = await asyncio.to_thread(
                self._seal, plain_password, master_password
            )
        except (ValueError, TypeError) as e:
            return Failure(
                error=EncryptionError(
                    code=ErrorCode.ENCRYPTION_FAILED,
                    message=VaultError.ENCRYPTION_FAILED,
                    details={"reason": type(e).__name__},
                )
            )
        return Success(value=encrypted)

    async def decrypt(
        self, encrypted: EncryptedPassword, master_password: str
    ) -> Result[str, DecryptionError]:
        """Decrypt an envelope with the master password.

        Args:
            encrypted: Envelope produced by encrypt().
            master_password: Owner's master password.

        Returns:
            Success(plain_password) or Failure(DecryptionError).
        """
        try:
            plain_password = await asyncio.to_thread(
                self._open, encrypted, master_password
            )
        except (InvalidTag, ValueError, TypeError):
            # InvalidTag: wrong key or tampered data
            # ValueError: malformed base64, bad lengths, non UTF-8 plaintext
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message=VaultError.DECRYPTION_FAILED,
                )
            )
        return Success(value=plain_password)

    async def re_encrypt(
        self,
        encrypted: EncryptedPassword,
        old_master_password: str,
        new_master_password: str,
    ) -> Result[EncryptedPassword, EncryptionError]:
        """Move an envelope from the old master password to the new one.

        Args:
            encrypted: Envelope sealed under old_master_password.
            old_master_password: Current master password.
            new_master_password: Replacement master password.

        Returns:
            Success(EncryptedPassword) with fresh salt and nonce, or the
            decrypt/encrypt Failure unchanged.
        """
        decrypted = await self.decrypt(encrypted, old_master_password)
        if isinstance(decrypted, Failure):
            return decrypted
        return await self.encrypt(decrypted.value, new_master_password)

    # -------------------------------------------------------------------------
    # Synchronous primitives (run in worker threads)
    # -------------------------------------------------------------------------

    def _derive_key(self, master_password: str, salt: bytes) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH,
            salt=salt,
            iterations=self._iterations,
        )
        return kdf.derive(master_password.encode("utf-8"))

    def _seal(self, plain_password: str, master_password: str) -> EncryptedPassword:
        salt = os.urandom(SALT_LENGTH)
        key = self._derive_key(master_password, salt)
        nonce = os.urandom(NONCE_LENGTH)

        # AESGCM appends the 16-byte tag to the ciphertext
        sealed = AESGCM(key).encrypt(
            nonce, plain_password.encode("utf-8"), associated_data=None
        )
        ciphertext, auth_tag = sealed[:-AUTH_TAG_LENGTH], sealed[-AUTH_TAG_LENGTH:]
        return EncryptedPassword.from_parts(salt, nonce, auth_tag, ciphertext)

    def _open(self, encrypted: EncryptedPassword, master_password: str) -> str:
        parts = encrypted.decode()
        key = self._derive_key(master_password, parts.salt)
        plaintext = AESGCM(key).decrypt(
            parts.nonce, parts.ciphertext + parts.auth_tag, associated_data=None
        )
        return plaintext.decode("utf-8")
