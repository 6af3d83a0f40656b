"""Vault entry tag value objects.

Tag:  one label, lowercased and trimmed, at most 30 characters of
      ``[a-z0-9_-]`` (no whitespace).
Tags: ordered, de-duplicated collection of Tag. Immutable; ``add`` and
      ``remove`` return new collections.
"""

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

MAX_TAG_LENGTH = 30
TAG_PATTERN = re.compile(r"^[a-z0-9_-]+$")


@dataclass(frozen=True)
class Tag:
    """Single normalized tag.

    Raises:
        ValueError: If the tag is empty, too long, contains whitespace or
            characters outside ``[a-z0-9_-]``.

    Example:
        >>> Tag("  Banking ").value
        'banking'
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower() if isinstance(self.value, str) else ""
        if not normalized:
            raise ValueError("Tag cannot be empty")
        if len(normalized) > MAX_TAG_LENGTH:
            raise ValueError(f"Tag cannot exceed {MAX_TAG_LENGTH} characters")
        if any(ch.isspace() for ch in normalized):
            raise ValueError("Tag cannot contain spaces")
        if not TAG_PATTERN.match(normalized):
            raise ValueError(
                "Tag can only contain lowercase letters, numbers, hyphens and underscores"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tags:
    """De-duplicated tag set preserving first-seen order.

    Attributes:
        items: Unique tags.

    Example:
        >>> Tags.from_strings(["Work", "work", "vpn"]).to_list()
        ['work', 'vpn']
    """

    items: tuple[Tag, ...] = ()

    def __post_init__(self) -> None:
        unique: dict[str, Tag] = {}
        for tag in self.items:
            unique.setdefault(tag.value, tag)
        object.__setattr__(self, "items", tuple(unique.values()))

    @classmethod
    def from_strings(cls, values: Iterable[str] | None) -> "Tags":
        """Build tags from raw strings.

        Raises:
            ValueError: If any value is not a valid tag.
        """
        return cls(tuple(Tag(value) for value in values or ()))

    def add(self, tag: Tag) -> "Tags":
        return Tags((*self.items, tag))

    def remove(self, tag: Tag) -> "Tags":
        return Tags(tuple(item for item in self.items if item != tag))

    def contains(self, tag: Tag) -> bool:
        return tag in self.items

    def to_list(self) -> list[str]:
        return [tag.value for tag in self.items]

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
