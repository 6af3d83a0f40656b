"""Credential verifier value objects.

PasswordHash and Salt together form the stored verifier of a user's master
password. The salt belongs to the hash only; it is never used to derive the
vault encryption key.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PasswordHash:
    """One-way hash of the master password (bcrypt format).

    Raises:
        ValueError: If the hash is empty.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Master password hash cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Salt:
    """Salt used to produce a PasswordHash.

    Raises:
        ValueError: If the salt is empty.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Salt cannot be empty")

    def __str__(self) -> str:
        return self.value
