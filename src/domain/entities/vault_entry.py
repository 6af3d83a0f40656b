"""Vault entry domain entity.

A stored credential owned by exactly one user. The password is only ever
held as an EncryptedPassword envelope.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Construction errors raise ValueError
    - Update methods return Result types and check ownership first
    - Every successful field change bumps updated_at

Usage:
    entry = VaultEntry(
        id=uuid7(),
        user_id=user.id,
        site_name="GitHub",
        username="octocat",
        encrypted_password=encrypted,
        category=VaultCategory.WORK,
    )

    match entry.update_notes(user.id, "2FA enabled"):
        case Success():
            await vault_entry_repo.save(entry)
        case Failure(error=error):
            ...
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlparse
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.enums.vault_category import VaultCategory
from src.domain.errors import VaultError
from src.domain.value_objects.encrypted_password import EncryptedPassword
from src.domain.value_objects.tag import Tag, Tags

MAX_SITE_NAME_LENGTH = 100
MAX_NOTES_LENGTH = 1000


# -----------------------------------------------------------------------------
# Field normalizers (raise ValueError)
# -----------------------------------------------------------------------------


def normalize_site_name(value: str) -> str:
    trimmed = value.strip() if isinstance(value, str) else ""
    if not trimmed:
        raise ValueError(VaultError.SITE_NAME_REQUIRED)
    if len(trimmed) > MAX_SITE_NAME_LENGTH:
        raise ValueError(VaultError.SITE_NAME_TOO_LONG)
    return trimmed


def normalize_site_url(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    if not trimmed:
        return None
    parsed = urlparse(trimmed)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(VaultError.SITE_URL_INVALID)
    return trimmed


def normalize_username(value: str) -> str:
    trimmed = value.strip() if isinstance(value, str) else ""
    if not trimmed:
        raise ValueError(VaultError.USERNAME_REQUIRED)
    return trimmed


def normalize_notes(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    if len(trimmed) > MAX_NOTES_LENGTH:
        raise ValueError(VaultError.NOTES_TOO_LONG)
    return trimmed or None


@dataclass
class VaultEntry:
    """Stored credential owned by a single user.

    Attributes:
        id: Unique entry identifier.
        user_id: Owning user's ID.
        site_name: Display name of the site (trimmed, at most 100 chars).
        username: Login name on the site.
        encrypted_password: Envelope-encrypted site password.
        category: Closed category enumeration.
        site_url: Optional http(s) URL.
        notes: Optional free text (at most 1000 chars, blank becomes None).
        tags: De-duplicated tag set.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    user_id: UUID
    site_name: str
    username: str
    encrypted_password: EncryptedPassword
    category: VaultCategory = VaultCategory.OTHER
    site_url: str | None = None
    notes: str | None = None
    tags: Tags = field(default_factory=Tags)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Normalize and validate fields.

        Raises:
            ValueError: If any field violates its constraint.
        """
        self.site_name = normalize_site_name(self.site_name)
        self.site_url = normalize_site_url(self.site_url)
        self.username = normalize_username(self.username)
        self.notes = normalize_notes(self.notes)

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    # -------------------------------------------------------------------------
    # Update Methods (Return Result Types)
    # -------------------------------------------------------------------------

    def update_site_name(
        self, user_id: UUID, site_name: str
    ) -> Result[None, DomainError]:
        return self._apply(user_id, "site_name", normalize_site_name, site_name)

    def update_site_url(
        self, user_id: UUID, site_url: str | None
    ) -> Result[None, DomainError]:
        return self._apply(user_id, "site_url", normalize_site_url, site_url)

    def update_username(
        self, user_id: UUID, username: str
    ) -> Result[None, DomainError]:
        return self._apply(user_id, "username", normalize_username, username)

    def update_notes(
        self, user_id: UUID, notes: str | None
    ) -> Result[None, DomainError]:
        return self._apply(user_id, "notes", normalize_notes, notes)

    def update_category(
        self, user_id: UUID, category: VaultCategory
    ) -> Result[None, DomainError]:
        return self._apply(user_id, "category", VaultCategory, category)

    def update_encrypted_password(
        self, user_id: UUID, encrypted_password: EncryptedPassword
    ) -> Result[None, DomainError]:
        """Replace the envelope (used by creation and master password rotation).

        Args:
            user_id: Acting user.
            encrypted_password: New envelope.

        Returns:
            Success(None) or Failure(AuthorizationError) for a foreign user.
        """
        return self._apply(
            user_id, "encrypted_password", lambda value: value, encrypted_password
        )

    def add_tag(self, user_id: UUID, tag: Tag) -> Result[None, DomainError]:
        return self._apply(user_id, "tags", self.tags.add, tag)

    def remove_tag(self, user_id: UUID, tag: Tag) -> Result[None, DomainError]:
        return self._apply(user_id, "tags", self.tags.remove, tag)

    def _apply(
        self,
        user_id: UUID,
        attribute: str,
        normalize: Callable[[Any], Any],
        raw_value: Any,
    ) -> Result[None, DomainError]:
        """Check ownership, normalize, assign and bump updated_at.

        Returns:
            Success(None): Value applied (or unchanged).
            Failure(AuthorizationError): Entry owned by another user.
            Failure(ValidationError): Value rejected by the normalizer.
        """
        if not self.is_owned_by(user_id):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.RESOURCE_NOT_OWNED,
                    message=VaultError.NOT_OWNED_BY_USER,
                    resource_type="VaultEntry",
                )
            )

        try:
            value = normalize(raw_value)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=str(e),
                    field=attribute,
                )
            )

        if getattr(self, attribute) != value:
            setattr(self, attribute, value)
            self.updated_at = datetime.now(UTC)

        return Success(value=None)
