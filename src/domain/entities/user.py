"""User domain entity for authentication.

Pure business logic, no framework dependencies.

Account State Machine:
    Active·Unlocked ──5 failed logins──▶ Active·Locked
    Inactive (orthogonal to lock state; reported first)

    - Lockout is derived from the counter (>= 5). There is no timestamp and
      no expiry. A successful login resets the counter, but login is gated
      by ``ensure_can_login`` which fails while locked, so a locked account
      stays locked until an operator intervenes.
    - Changing the master password never touches the counter, the active
      flag or the last-login timestamp.
"""

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.errors import UserError
from src.domain.value_objects.credential_verifier import PasswordHash, Salt

MAX_FAILED_LOGIN_ATTEMPTS = 5


@dataclass
class User:
    """User domain entity with account-lockout business rules.

    Business Rules:
        - Inactive accounts can never log in or rotate their master password
        - Account locks after 5 failed login attempts (no expiry)
        - Failed login counter saturates at 5
        - Failed login counter resets on successful login
        - The lockout check always runs before password verification

    Attributes:
        id: Unique user identifier
        email: Normalized email address (validated by Email value object)
        username: Trimmed username (validated by Username value object)
        password_hash: Bcrypt hash of the master password (never plaintext)
        salt: Salt used for password_hash only (NOT the vault key salt)
        is_active: Account active status
        failed_login_attempts: Consecutive failed logins, in [0, 5]
        last_login_at: Timestamp of the last successful login
        created_at: Timestamp when user was created

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="user@example.com",
        ...     username="alice",
        ...     password_hash="$2b$12$...",
        ...     salt="$2b$12$...",
        ... )
        >>> user.is_account_locked()
        False
        >>> for _ in range(5):
        ...     user.record_failed_login_attempt()
        >>> user.is_account_locked()
        True
    """

    id: UUID
    email: str
    username: str
    password_hash: str  # Never store plaintext passwords
    salt: str
    is_active: bool = True
    failed_login_attempts: int = 0
    last_login_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate counter bounds.

        Raises:
            ValueError: If failed_login_attempts is outside [0, 5].
        """
        if not 0 <= self.failed_login_attempts <= MAX_FAILED_LOGIN_ATTEMPTS:
            raise ValueError(
                f"failed_login_attempts must be between 0 and {MAX_FAILED_LOGIN_ATTEMPTS}"
            )

    def is_account_locked(self) -> bool:
        """Check if the account is locked by failed logins.

        Returns:
            bool: True once 5 failed attempts have been recorded.
        """
        return self.failed_login_attempts >= MAX_FAILED_LOGIN_ATTEMPTS

    def ensure_can_login(self) -> Result[None, AuthenticationError]:
        """Gate login and rotation on account state.

        Inactive is checked first so a deactivated account reports as
        inactive even when it is also locked. Side-effect free.

        Returns:
            Success(None): Account may proceed to password verification.
            Failure(AuthenticationError): ACCOUNT_INACTIVE or ACCOUNT_LOCKED.
        """
        if not self.is_active:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message=UserError.ACCOUNT_INACTIVE,
                )
            )

        if self.is_account_locked():
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_LOCKED,
                    message=UserError.ACCOUNT_LOCKED,
                )
            )

        return Success(value=None)

    def record_failed_login_attempt(self) -> None:
        """Increment the failed login counter, saturating at 5.

        No active or lock check: the login flow records the failure and the
        next attempt is the one that gets rejected.

        Example:
            >>> user = User(..., failed_login_attempts=5)
            >>> user.record_failed_login_attempt()
            >>> user.failed_login_attempts
            5
        """
        self.failed_login_attempts = min(
            self.failed_login_attempts + 1, MAX_FAILED_LOGIN_ATTEMPTS
        )

    def record_successful_login(self) -> Result[None, AuthenticationError]:
        """Reset the failed login counter and stamp last login.

        Does not check the lock state; callers gate with ``ensure_can_login``
        before verifying the password.

        Returns:
            Success(None): Counter reset, last_login_at set to now.
            Failure(AuthenticationError): ACCOUNT_INACTIVE.
        """
        if not self.is_active:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.ACCOUNT_INACTIVE,
                    message=UserError.ACCOUNT_INACTIVE,
                )
            )

        self.failed_login_attempts = 0
        self.last_login_at = datetime.now(UTC)
        return Success(value=None)

    def change_master_password(self, new_hash: PasswordHash, new_salt: Salt) -> "User":
        """Return a copy carrying a new credential verifier.

        Pure transition: every other field (lock counter, active flag,
        last login) is carried over unchanged and ``self`` is not modified.
        Gating (active account, current password verified) is the caller's
        job.

        Args:
            new_hash: Hash of the new master password.
            new_salt: Salt used to produce new_hash.

        Returns:
            User: New instance with the replaced hash and salt.
        """
        return replace(self, password_hash=new_hash.value, salt=new_salt.value)
