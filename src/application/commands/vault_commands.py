"""Vault entry commands (CQRS write operations)."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateVaultEntry:
    """Store a new credential for a user.

    The site password is encrypted under a key derived from the master
    password before it is persisted; the plaintext is never stored.

    Attributes:
        user_id: Owner of the new entry.
        master_password: Owner's master password (encryption key source).
        site_name: Display name of the site.
        username: Login name on the site.
        password: Plaintext site password.
        category: Category name (case-insensitive, defaults to "other").
        site_url: Optional http(s) URL.
        notes: Optional notes.
        tags: Optional tag names.
    """

    user_id: UUID
    master_password: str
    site_name: str
    username: str
    password: str
    category: str = "other"
    site_url: str | None = None
    notes: str | None = None
    tags: list[str] = field(default_factory=list)
