"""Unit tests for VaultEntry domain entity.

Tests cover:
- Field normalization and validation on construction
- Ownership checks on every update method
- updated_at bumps only when a value changes
- Tag add/remove with de-duplication

Architecture:
- Unit tests for domain entity (no dependencies)
- Tests pure business logic
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, ValidationError
from src.core.result import Failure, Success
from src.domain.enums import VaultCategory
from src.domain.value_objects import EncryptedPassword, Tag
from tests.conftest import SAMPLE_ENVELOPE, create_vault_entry

PAST = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.mark.unit
class TestVaultEntryCreation:
    """Test VaultEntry construction rules."""

    def test_fields_are_trimmed(self):
        """Test site name and username are trimmed."""
        entry = create_vault_entry(site_name="  GitHub  ", username="  octocat ")

        assert entry.site_name == "GitHub"
        assert entry.username == "octocat"

    def test_defaults(self):
        """Test category defaults to OTHER, no notes, no tags."""
        entry = create_vault_entry()

        assert entry.category == VaultCategory.OTHER
        assert entry.notes is None
        assert entry.site_url is None
        assert len(entry.tags) == 0

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"site_name": "   "}, "Site name cannot be empty"),
            ({"site_name": "x" * 101}, "Site name cannot exceed 100 characters"),
            ({"username": ""}, "Username cannot be empty"),
        ],
    )
    def test_invalid_fields_rejected(self, kwargs, message):
        """Test construction raises ValueError for invalid fields."""
        with pytest.raises(ValueError, match=message):
            create_vault_entry(**kwargs)

    def test_tags_deduplicated(self):
        """Test duplicate tags collapse, first-seen order kept."""
        entry = create_vault_entry(tags=["Work", "vpn", "work"])

        assert entry.tags.to_list() == ["work", "vpn"]


@pytest.mark.unit
class TestVaultEntryOwnership:
    """Test owner checks on update methods."""

    @pytest.mark.parametrize(
        ("method", "argument"),
        [
            ("update_site_name", "GitLab"),
            ("update_site_url", "https://gitlab.com"),
            ("update_username", "someone"),
            ("update_notes", "note"),
            ("update_category", VaultCategory.WORK),
            ("update_encrypted_password", EncryptedPassword(SAMPLE_ENVELOPE)),
            ("add_tag", Tag("new")),
            ("remove_tag", Tag("new")),
        ],
    )
    def test_foreign_user_rejected(self, method, argument):
        """Test every update method rejects a non-owner."""
        # Arrange
        entry = create_vault_entry(created_at=PAST)
        stranger = uuid7()

        # Act
        result = getattr(entry, method)(stranger, argument)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED
        assert entry.updated_at == PAST

    def test_is_owned_by(self):
        """Test ownership predicate."""
        owner = uuid7()
        entry = create_vault_entry(user_id=owner)

        assert entry.is_owned_by(owner) is True
        assert entry.is_owned_by(uuid7()) is False


@pytest.mark.unit
class TestVaultEntryUpdates:
    """Test owner updates."""

    def test_update_bumps_updated_at(self):
        """Test a changed value bumps updated_at."""
        # Arrange
        entry = create_vault_entry(created_at=PAST)

        # Act
        result = entry.update_site_name(entry.user_id, "  GitLab ")

        # Assert
        assert isinstance(result, Success)
        assert entry.site_name == "GitLab"
        assert entry.updated_at > PAST

    def test_unchanged_value_keeps_updated_at(self):
        """Test setting the same value leaves updated_at alone."""
        entry = create_vault_entry(site_name="GitHub", created_at=PAST)

        result = entry.update_site_name(entry.user_id, "GitHub")

        assert isinstance(result, Success)
        assert entry.updated_at == PAST

    def test_notes_too_long_rejected(self):
        """Test notes over 1000 characters fail validation."""
        entry = create_vault_entry(created_at=PAST)

        result = entry.update_notes(entry.user_id, "x" * 1001)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "notes"
        assert entry.notes is None
        assert entry.updated_at == PAST

    def test_blank_notes_become_none(self):
        """Test whitespace-only notes are stored as None."""
        entry = create_vault_entry()
        entry.update_notes(entry.user_id, "keep")

        entry.update_notes(entry.user_id, "   ")

        assert entry.notes is None

    @pytest.mark.parametrize("url", ["ftp://example.com", "not a url", "https://"])
    def test_invalid_site_url_rejected(self, url):
        """Test only http(s) URLs with a host are accepted."""
        entry = create_vault_entry()

        result = entry.update_site_url(entry.user_id, url)

        assert isinstance(result, Failure)
        assert result.error.field == "site_url"

    def test_add_and_remove_tag(self):
        """Test tags can be added once and removed."""
        entry = create_vault_entry(tags=["work"])

        entry.add_tag(entry.user_id, Tag("VPN"))
        entry.add_tag(entry.user_id, Tag("vpn"))
        assert entry.tags.to_list() == ["work", "vpn"]

        entry.remove_tag(entry.user_id, Tag("work"))
        assert entry.tags.to_list() == ["vpn"]

    def test_update_encrypted_password(self):
        """Test envelope replacement by the owner."""
        entry = create_vault_entry(created_at=PAST)
        new_envelope = EncryptedPassword(
            SAMPLE_ENVELOPE.replace("aGVsbG8=", "d29ybGQ=")
        )

        result = entry.update_encrypted_password(entry.user_id, new_envelope)

        assert isinstance(result, Success)
        assert entry.encrypted_password == new_envelope
        assert entry.updated_at > PAST
