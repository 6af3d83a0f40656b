"""Encrypted password value object (envelope wire format).

Format:
    base64(salt):base64(nonce):base64(auth_tag):base64(ciphertext)

Decoded lengths are fixed for the first three fields: salt 16 bytes,
nonce 12 bytes, tag 16 bytes. The ciphertext length follows the plaintext.

Construction only checks the outer shape (non-empty, four fields). Decoding
and length checks happen in ``decode()``, which the encryption adapter calls
so that malformed data surfaces as a decryption failure rather than a
construction error deep inside a repository.
"""

import base64
import binascii
from dataclasses import dataclass
from typing import ClassVar, NamedTuple

SALT_LENGTH = 16
NONCE_LENGTH = 12
AUTH_TAG_LENGTH = 16
SEPARATOR = ":"


class EnvelopeParts(NamedTuple):
    """Decoded components of an EncryptedPassword."""

    salt: bytes
    nonce: bytes
    auth_tag: bytes
    ciphertext: bytes


def _b64decode(field: str) -> bytes:
    try:
        return base64.b64decode(field, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Encrypted password contains malformed base64") from e


@dataclass(frozen=True)
class EncryptedPassword:
    """Opaque, immutable envelope around a vault secret.

    Equality is by encoded string.

    Attributes:
        value: Colon-joined, base64-encoded envelope.

    Raises:
        ValueError: If the value is empty or does not have four fields.

    Example:
        >>> encrypted = EncryptedPassword.from_parts(salt, nonce, tag, ciphertext)
        >>> encrypted.decode().nonce == nonce
        True
    """

    FIELD_COUNT: ClassVar[int] = 4

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Encrypted password cannot be empty")
        if len(self.value.split(SEPARATOR)) != self.FIELD_COUNT:
            raise ValueError(
                f"Encrypted password must have exactly {self.FIELD_COUNT} "
                "colon-separated fields"
            )

    @classmethod
    def from_parts(
        cls, salt: bytes, nonce: bytes, auth_tag: bytes, ciphertext: bytes
    ) -> "EncryptedPassword":
        """Encode raw components into the wire format.

        Args:
            salt: 16-byte KDF salt.
            nonce: 12-byte AEAD nonce.
            auth_tag: 16-byte AEAD authentication tag.
            ciphertext: Encrypted UTF-8 plaintext.

        Returns:
            EncryptedPassword wrapping the encoded envelope.
        """
        encoded = SEPARATOR.join(
            base64.b64encode(part).decode("ascii")
            for part in (salt, nonce, auth_tag, ciphertext)
        )
        return cls(encoded)

    def decode(self) -> EnvelopeParts:
        """Decode and length-check the envelope.

        Returns:
            EnvelopeParts with raw bytes for each field.

        Raises:
            ValueError: On malformed base64 or unexpected field lengths.
        """
        salt_b64, nonce_b64, tag_b64, ciphertext_b64 = self.value.split(SEPARATOR)
        parts = EnvelopeParts(
            salt=_b64decode(salt_b64),
            nonce=_b64decode(nonce_b64),
            auth_tag=_b64decode(tag_b64),
            ciphertext=_b64decode(ciphertext_b64),
        )

        if len(parts.salt) != SALT_LENGTH:
            raise ValueError(f"Invalid salt length: expected {SALT_LENGTH} bytes")
        if len(parts.nonce) != NONCE_LENGTH:
            raise ValueError(f"Invalid nonce length: expected {NONCE_LENGTH} bytes")
        if len(parts.auth_tag) != AUTH_TAG_LENGTH:
            raise ValueError(
                f"Invalid auth tag length: expected {AUTH_TAG_LENGTH} bytes"
            )
        return parts

    def __str__(self) -> str:
        return self.value
