"""Email value object with validation.

Immutable value object that validates and normalizes email addresses.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True)
class Email:
    """Email value object with format validation.

    Uses the email-validator library for RFC-compliant validation. The stored
    value is trimmed and lowercased so lookups are case-insensitive.

    Attributes:
        value: The email address string (validated, lowercase)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> str(Email("  User@Example.COM "))
        'user@example.com'
        >>> Email("invalid")
        Traceback (most recent call last):
        ...
        ValueError: Invalid email: ...
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the address.

        Raises:
            ValueError: If email is empty or malformed.
        """
        candidate = self.value.strip() if isinstance(self.value, str) else ""
        if not candidate:
            raise ValueError("Invalid email: email cannot be empty")
        try:
            validated = validate_email(candidate, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "value", validated.normalized.lower())

    def __str__(self) -> str:
        """Return email address as string."""
        return self.value

    def __repr__(self) -> str:
        """Return repr for debugging."""
        return f"Email('{self.value}')"
