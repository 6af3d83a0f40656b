"""Vault entry category classification.

Closed set of categories a stored credential can be filed under.
"""

from enum import Enum


class VaultCategory(str, Enum):
    """Category of a vault entry.

    Examples:
        >>> VaultCategory.parse("Finance")
        <VaultCategory.FINANCE: 'finance'>
    """

    PERSONAL = "personal"
    WORK = "work"
    FINANCE = "finance"
    SOCIAL = "social"
    EMAIL = "email"
    SHOPPING = "shopping"
    OTHER = "other"

    @classmethod
    def values(cls) -> list[str]:
        """Get all category values as strings.

        Returns:
            List of category string values.
        """
        return [category.value for category in cls]

    @classmethod
    def parse(cls, value: str) -> "VaultCategory":
        """Parse a category name case-insensitively.

        Args:
            value: Raw category name (e.g. "WORK", " work ").

        Returns:
            Matching VaultCategory.

        Raises:
            ValueError: If value is not a known category.
        """
        normalized = value.strip().lower() if isinstance(value, str) else ""
        if normalized not in cls.values():
            raise ValueError(
                f"Invalid category: {value!r}. Valid categories: {', '.join(cls.values())}"
            )
        return cls(normalized)
