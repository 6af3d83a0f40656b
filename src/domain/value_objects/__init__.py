"""Domain value objects with validation.

Immutable value objects that enforce business constraints. Construction
errors raise ValueError; handlers translate them into ValidationError.
"""

from src.domain.value_objects.auth_tokens import AccessToken, RefreshToken
from src.domain.value_objects.credential_verifier import PasswordHash, Salt
from src.domain.value_objects.email import Email
from src.domain.value_objects.encrypted_password import (
    EncryptedPassword,
    EnvelopeParts,
)
from src.domain.value_objects.master_password import MasterPassword
from src.domain.value_objects.tag import Tag, Tags
from src.domain.value_objects.username import Username

__all__ = [
    "AccessToken",
    "Email",
    "EncryptedPassword",
    "EnvelopeParts",
    "MasterPassword",
    "PasswordHash",
    "RefreshToken",
    "Salt",
    "Tag",
    "Tags",
    "Username",
]
