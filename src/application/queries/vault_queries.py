"""Vault entry queries for CQRS read operations.

Queries represent requests for vault data. They are immutable dataclasses
with question-like names that describe what information is being requested.

Architecture:
- Queries are immutable (frozen dataclasses)
- NO business logic in queries (just data transfer)
- Handlers perform validation, filtering and pagination
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListVaultEntries:
    """Query to list a user's vault entries, one page at a time.

    Attributes:
        user_id: Owner whose entries are listed.
        page: 1-based page number.
        limit: Page size (1..100).
        category: Optional category filter (case-insensitive).
        sort_by: "site_name", "created_at" or "category".
        sort_order: "asc" or "desc".

    Example:
        >>> query = ListVaultEntries(
        ...     user_id=current_user_id,
        ...     category="work",
        ...     sort_by="created_at",
        ...     sort_order="desc",
        ... )
        >>> result = await handler.handle(query)
    """

    user_id: UUID
    page: int = 1
    limit: int = 20
    category: str | None = None
    sort_by: str = "site_name"
    sort_order: str = "asc"
