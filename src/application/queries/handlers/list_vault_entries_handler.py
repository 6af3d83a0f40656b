"""ListVaultEntries query handler.

Returns DTOs (not domain entities) so ciphertext never leaves the
application layer through a listing.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[VaultEntryPage, ValidationError] (explicit error handling)
- Side-effect free
- Scoped to the requesting user's entries
"""

import math
from collections.abc import Callable
from typing import Any

from src.application.dtos.vault_dtos import VaultEntryPage, VaultEntrySummary
from src.application.queries.vault_queries import ListVaultEntries
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.vault_entry import VaultEntry
from src.domain.enums import VaultCategory
from src.domain.protocols import VaultEntryRepository

MAX_PAGE_SIZE = 100
SORT_FIELDS = ("site_name", "created_at", "category")
SORT_ORDERS = ("asc", "desc")


class ListVaultEntriesError:
    """ListVaultEntries-specific validation messages."""

    INVALID_PAGE = "Page must be at least 1"
    INVALID_LIMIT = f"Limit must be between 1 and {MAX_PAGE_SIZE}"
    INVALID_SORT_BY = f"Sort field must be one of: {', '.join(SORT_FIELDS)}"
    INVALID_SORT_ORDER = "Sort order must be 'asc' or 'desc'"


def _sort_key(sort_by: str) -> Callable[[VaultEntry], Any]:
    if sort_by == "created_at":
        return lambda entry: entry.created_at
    if sort_by == "category":
        return lambda entry: (entry.category.value, entry.site_name.lower())
    return lambda entry: entry.site_name.lower()


class ListVaultEntriesHandler:
    """Handler for ListVaultEntries query.

    Dependencies (injected via constructor):
        - VaultEntryRepository: For entry retrieval

    Returns:
        Result[VaultEntryPage, ValidationError]: Success(DTO) or Failure(error)
    """

    def __init__(self, vault_entry_repo: VaultEntryRepository) -> None:
        self._vault_entry_repo = vault_entry_repo

    async def handle(
        self, query: ListVaultEntries
    ) -> Result[VaultEntryPage, ValidationError]:
        """Handle ListVaultEntries query.

        Args:
            query: ListVaultEntries query.

        Returns:
            Success(VaultEntryPage) or Failure(ValidationError) for bad
            paging, sorting or category arguments.
        """
        # Step 1: Validate paging and sorting
        if query.page < 1:
            return _invalid(ListVaultEntriesError.INVALID_PAGE, "page")
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            return _invalid(ListVaultEntriesError.INVALID_LIMIT, "limit")
        if query.sort_by not in SORT_FIELDS:
            return _invalid(ListVaultEntriesError.INVALID_SORT_BY, "sort_by")
        if query.sort_order not in SORT_ORDERS:
            return _invalid(ListVaultEntriesError.INVALID_SORT_ORDER, "sort_order")

        category: VaultCategory | None = None
        if query.category is not None:
            try:
                category = VaultCategory.parse(query.category)
            except ValueError as e:
                return _invalid(str(e), "category")

        # Step 2: Fetch, filter, sort
        entries: list[VaultEntry] = await self._vault_entry_repo.find_by_user_id(
            query.user_id
        )
        if category is not None:
            entries = [entry for entry in entries if entry.category == category]
        entries.sort(key=_sort_key(query.sort_by), reverse=query.sort_order == "desc")

        # Step 3: Paginate
        total = len(entries)
        start = (query.page - 1) * query.limit
        page_items = entries[start : start + query.limit]

        return Success(
            value=VaultEntryPage(
                items=[VaultEntrySummary.from_entity(entry) for entry in page_items],
                total=total,
                page=query.page,
                limit=query.limit,
                total_pages=math.ceil(total / query.limit),
            )
        )


def _invalid(message: str, field: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED, message=message, field=field
        )
    )
