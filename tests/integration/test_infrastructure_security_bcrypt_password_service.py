"""Integration tests for Bcrypt password hashing service.

Tests the BcryptPasswordService implementation with real bcrypt operations.
Following testing architecture: NO unit tests for infrastructure adapters,
only integration tests.

Architecture:
- Tests against real bcrypt library (no mocking)
- Tests cryptographic operations (hashing, verification)
- Tests security properties (salt uniqueness, 72-byte limit)
- Tests edge cases (invalid hashes, complexity rules)
"""

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from tests.conftest import OTHER_MASTER_PASSWORD, STRONG_MASTER_PASSWORD


@pytest.fixture
def service():
    """Lowest allowed cost factor keeps the suite fast."""
    return BcryptPasswordService(cost_factor=10)


@pytest.mark.integration
class TestBcryptPasswordServiceIntegration:
    """Integration tests for Bcrypt password service."""

    # =========================================================================
    # Password Hashing Tests
    # =========================================================================

    def test_generate_salt_carries_cost_factor(self, service):
        salt = service.generate_salt()

        assert salt.startswith("$2b$10$")
        assert len(salt) == 29

    def test_generate_salt_is_unique(self, service):
        assert service.generate_salt() != service.generate_salt()

    @pytest.mark.asyncio
    async def test_hash_password_creates_bcrypt_hash(self, service):
        """Test that hashed password has valid bcrypt format."""
        salt = service.generate_salt()

        password_hash = await service.hash_password(STRONG_MASTER_PASSWORD, salt)

        assert password_hash.startswith(salt)
        assert len(password_hash) == 60

    @pytest.mark.asyncio
    async def test_verify_password(self, service):
        password_hash = await service.hash_password(
            STRONG_MASTER_PASSWORD, service.generate_salt()
        )

        assert await service.verify_password(STRONG_MASTER_PASSWORD, password_hash)
        assert not await service.verify_password(OTHER_MASTER_PASSWORD, password_hash)

    @pytest.mark.asyncio
    async def test_only_first_72_bytes_are_significant(self, service):
        prefix = "A1!" + "a" * 69
        password_hash = await service.hash_password(
            prefix + "tail-one", service.generate_salt()
        )

        assert await service.verify_password(prefix + "tail-two", password_hash)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("malformed", ["", "not-a-bcrypt-hash", "$2b$10$short"])
    async def test_verify_malformed_hash_returns_false(self, service, malformed):
        assert await service.verify_password(STRONG_MASTER_PASSWORD, malformed) is False

    # =========================================================================
    # Complexity Tests
    # =========================================================================

    def test_strong_password_passes_complexity(self, service):
        result = service.validate_complexity(STRONG_MASTER_PASSWORD)

        assert result == Success(value=None)

    @pytest.mark.parametrize(
        "weak",
        [
            "short1!",
            "alllowercase123!",
            "ALLUPPERCASE123!",
            "NoDigitsHere!!",
            "NoSpecials12345",
        ],
    )
    def test_weak_password_fails_complexity(self, service, weak):
        result = service.validate_complexity(weak)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PASSWORD_TOO_WEAK
        assert result.error.field == "password"

    # =========================================================================
    # Configuration Tests
    # =========================================================================

    @pytest.mark.parametrize("cost_factor", [9, 21])
    def test_cost_factor_out_of_range_rejected(self, cost_factor):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost_factor)
