"""Vault DTOs.

Listing results never carry the encrypted password.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.vault_entry import VaultEntry


@dataclass(frozen=True, kw_only=True)
class VaultEntrySummary:
    """Vault entry as shown in listings."""

    id: UUID
    site_name: str
    site_url: str | None
    username: str
    category: str
    notes: str | None
    tags: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, entry: VaultEntry) -> "VaultEntrySummary":
        return cls(
            id=entry.id,
            site_name=entry.site_name,
            site_url=entry.site_url,
            username=entry.username,
            category=entry.category.value,
            notes=entry.notes,
            tags=entry.tags.to_list(),
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class VaultEntryPage:
    """One page of vault entries.

    Attributes:
        items: Entries on this page.
        total: Entries matching the filter across all pages.
        page: 1-based page number.
        limit: Page size.
        total_pages: Number of pages (0 when nothing matches).
    """

    items: list[VaultEntrySummary]
    total: int
    page: int
    limit: int
    total_pages: int
