"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
- Raw strings are validated by handlers via domain value objects
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """Register new user account.

    Attributes:
        email: User's email address (validated, normalized by handler).
        username: Display/login name (trimmed, 3..50 chars).
        master_password: Plaintext master password (complexity checked, hashed).

    Example:
        >>> command = RegisterUser(
        ...     email="user@example.com",
        ...     username="alice",
        ...     master_password="Secure123!longEnough",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    username: str
    master_password: str


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Authenticate with email and master password and issue tokens.

    Attributes:
        email: User's email address.
        master_password: Plaintext master password.
    """

    email: str
    master_password: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """End a session by blacklisting its tokens.

    Attributes:
        access_token: Raw access token (required).
        refresh_token: Raw refresh token (optional).
    """

    access_token: str
    refresh_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new access token.

    The refresh token itself is NOT rotated; it stays valid until its own
    expiry or until it is blacklisted.

    Attributes:
        refresh_token: Raw refresh token.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class ChangeMasterPassword:
    """Rotate a user's master password and re-key every vault entry.

    Attributes:
        user_id: User whose master password changes.
        current_master_password: Plaintext current master password.
        new_master_password: Plaintext new master password.
        access_token: Caller's access token, blacklisted after commit.
        refresh_token: Caller's refresh token, blacklisted after commit.

    Example:
        >>> command = ChangeMasterPassword(
        ...     user_id=user_id,
        ...     current_master_password="Secure123!longEnough",
        ...     new_master_password="Another456?evenLonger",
        ... )
        >>> result = await handler.handle(command)
        >>> # Returns Success(MasterPasswordChanged) or Failure(error)
    """

    user_id: UUID
    current_master_password: str
    new_master_password: str
    access_token: str | None = None
    refresh_token: str | None = None
