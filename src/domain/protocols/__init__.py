"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from src.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EnvelopeEncryptionProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_blacklist_protocol import (
    BlacklistSize,
    TokenBlacklistProtocol,
)
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from src.domain.protocols.transaction_protocol import TransactionManagerProtocol

# Repository protocols
from src.domain.protocols.user_repository import UserRepository
from src.domain.protocols.vault_entry_repository import VaultEntryRepository

__all__ = [
    # Service protocols
    "BlacklistSize",
    "DecryptionError",
    "EncryptionError",
    "EnvelopeEncryptionProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenBlacklistProtocol",
    "TokenGenerationProtocol",
    "TransactionManagerProtocol",
    # Repository protocols
    "UserRepository",
    "VaultEntryRepository",
]
