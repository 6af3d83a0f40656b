"""Master password value object with complexity validation.

The master password both authenticates the user (through the bcrypt
verifier) and seeds vault key derivation, so its rules are stricter than a
regular login password.
"""

import re
from dataclasses import dataclass

MIN_MASTER_PASSWORD_LENGTH = 12
SPECIAL_CHARACTERS = r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]"


@dataclass(frozen=True)
class MasterPassword:
    """Master password value object with complexity validation.

    Password Requirements:
        - At least 12 characters
        - At least one uppercase letter
        - At least one lowercase letter
        - At least one digit
        - At least one special character

    Attributes:
        value: The plaintext password (validated)

    Raises:
        ValueError: If password does not meet complexity requirements

    Example:
        >>> str(MasterPassword("Secure123!longEnough"))
        '********************'
        >>> MasterPassword("short1!")
        Traceback (most recent call last):
        ...
        ValueError: Master password must be at least 12 characters long
    """

    value: str

    def __post_init__(self) -> None:
        """Validate password complexity after initialization.

        Raises:
            ValueError: If password does not meet requirements.
        """
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Master password cannot be empty")

        if len(self.value) < MIN_MASTER_PASSWORD_LENGTH:
            raise ValueError(
                f"Master password must be at least {MIN_MASTER_PASSWORD_LENGTH} "
                "characters long"
            )

        if not re.search(r"[A-Z]", self.value):
            raise ValueError("Master password must contain an uppercase letter")

        if not re.search(r"[a-z]", self.value):
            raise ValueError("Master password must contain a lowercase letter")

        if not re.search(r"\d", self.value):
            raise ValueError("Master password must contain a digit")

        if not re.search(SPECIAL_CHARACTERS, self.value):
            raise ValueError("Master password must contain a special character")

    def __str__(self) -> str:
        """Return masked password.

        Note:
            Never return plaintext password in logs or output.
        """
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"MasterPassword('{'*' * len(self.value)}')"
