"""Integration tests for the in-memory token blacklist.

Tests cover:
- Blacklisting access and refresh tokens independently
- Retention of one token lifetime from insertion
- Lazy eviction on lookup and explicit cleanup
- Size reporting and clear()
- Rejecting a call with no tokens

Architecture:
- Real adapter, real clock frozen with freezegun
"""

from datetime import timedelta

import pytest
from freezegun import freeze_time

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.protocols.token_blacklist_protocol import BlacklistSize
from src.domain.value_objects import AccessToken, RefreshToken
from src.infrastructure.security.token_blacklist import InMemoryTokenBlacklist

ACCESS = AccessToken("header.access.signature")
REFRESH = RefreshToken("header.refresh.signature")


@pytest.mark.integration
class TestInMemoryTokenBlacklist:
    """Integration tests for InMemoryTokenBlacklist."""

    @pytest.mark.asyncio
    async def test_add_both_tokens(self):
        blacklist = InMemoryTokenBlacklist()

        result = await blacklist.add_to_blacklist(
            access_token=ACCESS, refresh_token=REFRESH
        )

        assert result == Success(value=None)
        assert await blacklist.is_access_token_blacklisted(ACCESS)
        assert await blacklist.is_refresh_token_blacklisted(REFRESH)
        assert blacklist.get_blacklist_size() == BlacklistSize(1, 1)

    @pytest.mark.asyncio
    async def test_token_types_are_independent(self):
        """Test an access entry never matches a refresh lookup."""
        blacklist = InMemoryTokenBlacklist()
        await blacklist.add_to_blacklist(access_token=ACCESS)

        same_string_as_refresh = RefreshToken(ACCESS.value)

        assert await blacklist.is_access_token_blacklisted(ACCESS)
        assert not await blacklist.is_refresh_token_blacklisted(same_string_as_refresh)

    @pytest.mark.asyncio
    async def test_add_without_tokens_fails(self):
        blacklist = InMemoryTokenBlacklist()

        result = await blacklist.add_to_blacklist()

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED
        assert blacklist.get_blacklist_size() == BlacklistSize(0, 0)

    @pytest.mark.asyncio
    async def test_adding_twice_is_idempotent(self):
        blacklist = InMemoryTokenBlacklist()

        await blacklist.add_to_blacklist(refresh_token=REFRESH)
        await blacklist.add_to_blacklist(refresh_token=REFRESH)

        assert blacklist.get_blacklist_size() == BlacklistSize(0, 1)

    @pytest.mark.asyncio
    async def test_access_entry_expires_after_access_lifetime(self):
        blacklist = InMemoryTokenBlacklist()

        with freeze_time("2025-01-01 12:00:00"):
            await blacklist.add_to_blacklist(access_token=ACCESS)

        with freeze_time("2025-01-01 12:14:59"):
            assert await blacklist.is_access_token_blacklisted(ACCESS)

        with freeze_time("2025-01-01 12:15:00"):
            assert not await blacklist.is_access_token_blacklisted(ACCESS)

        # Lookup evicted the expired entry
        assert blacklist.get_blacklist_size() == BlacklistSize(0, 0)

    @pytest.mark.asyncio
    async def test_refresh_entry_outlives_access_entry(self):
        blacklist = InMemoryTokenBlacklist()

        with freeze_time("2025-01-01 12:00:00"):
            await blacklist.add_to_blacklist(access_token=ACCESS, refresh_token=REFRESH)

        with freeze_time("2025-01-05 12:00:00"):
            assert not await blacklist.is_access_token_blacklisted(ACCESS)
            assert await blacklist.is_refresh_token_blacklisted(REFRESH)

        with freeze_time("2025-01-08 12:00:00"):
            assert not await blacklist.is_refresh_token_blacklisted(REFRESH)

    @pytest.mark.asyncio
    async def test_custom_lifetimes(self):
        blacklist = InMemoryTokenBlacklist(
            access_token_lifetime=timedelta(minutes=1),
            refresh_token_lifetime=timedelta(hours=1),
        )

        with freeze_time("2025-01-01 12:00:00"):
            await blacklist.add_to_blacklist(access_token=ACCESS, refresh_token=REFRESH)

        with freeze_time("2025-01-01 12:01:00"):
            assert not await blacklist.is_access_token_blacklisted(ACCESS)
            assert await blacklist.is_refresh_token_blacklisted(REFRESH)

    @pytest.mark.asyncio
    async def test_cleanup_expired_tokens(self):
        blacklist = InMemoryTokenBlacklist()
        other_access = AccessToken("header.other.signature")

        with freeze_time("2025-01-01 12:00:00"):
            await blacklist.add_to_blacklist(access_token=ACCESS, refresh_token=REFRESH)
        with freeze_time("2025-01-01 12:10:00"):
            await blacklist.add_to_blacklist(access_token=other_access)

        with freeze_time("2025-01-01 12:20:00"):
            removed = await blacklist.cleanup_expired_tokens()

        assert removed == 1
        assert blacklist.get_blacklist_size() == BlacklistSize(1, 1)

    @pytest.mark.asyncio
    async def test_clear(self):
        blacklist = InMemoryTokenBlacklist()
        await blacklist.add_to_blacklist(access_token=ACCESS, refresh_token=REFRESH)

        blacklist.clear()

        assert blacklist.get_blacklist_size() == BlacklistSize(0, 0)
        assert not await blacklist.is_refresh_token_blacklisted(REFRESH)
