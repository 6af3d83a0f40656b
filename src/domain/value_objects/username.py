"""Username value object.

Account handle chosen at registration. Unique per system (enforced by the
repository), trimmed, 3 to 50 characters.
"""

from dataclasses import dataclass

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50


@dataclass(frozen=True)
class Username:
    """Trimmed account username.

    Attributes:
        value: The username (whitespace-trimmed).

    Raises:
        ValueError: If the trimmed username is outside 3..50 characters.

    Example:
        >>> Username("  alice ").value
        'alice'
    """

    value: str

    def __post_init__(self) -> None:
        trimmed = self.value.strip() if isinstance(self.value, str) else ""
        if not trimmed:
            raise ValueError("Username cannot be empty")
        if len(trimmed) < MIN_USERNAME_LENGTH:
            raise ValueError(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
            )
        if len(trimmed) > MAX_USERNAME_LENGTH:
            raise ValueError(
                f"Username cannot exceed {MAX_USERNAME_LENGTH} characters"
            )
        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
