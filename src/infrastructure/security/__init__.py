"""Security infrastructure adapters.

This package contains security-related infrastructure implementations:
- Master password hashing (bcrypt)
- JWT access/refresh token generation and verification
- Token blacklist (in-memory)
- Vault envelope encryption (PBKDF2-SHA256 + AES-256-GCM)
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.envelope_encryption_service import (
    EnvelopeEncryptionService,
)
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.token_blacklist import InMemoryTokenBlacklist

__all__ = [
    "BcryptPasswordService",
    "EnvelopeEncryptionService",
    "InMemoryTokenBlacklist",
    "JWTService",
]
