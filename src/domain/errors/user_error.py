"""User account domain errors.

Defines the user-facing messages for authentication, lockout, token and
registration failures.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Wrapped in core error dataclasses and returned in Result types
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.core.errors import AuthenticationError
    from src.core.enums import ErrorCode
    from src.domain.errors import UserError

    return Failure(
        error=AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=UserError.INVALID_CREDENTIALS,
        )
    )
"""


class UserError:
    """User error message constants.

    Error Categories:
        - Credential errors: INVALID_CREDENTIALS
        - Account state errors: ACCOUNT_LOCKED, ACCOUNT_INACTIVE
        - Token errors: INVALID_REFRESH_TOKEN, INVALID_ACCESS_TOKEN
        - Registration errors: EMAIL_TAKEN, USERNAME_TAKEN
    """

    # -------------------------------------------------------------------------
    # Credential Errors
    # -------------------------------------------------------------------------

    INVALID_CREDENTIALS = "The provided email or password is incorrect"
    """Same message whether or not the account exists (no enumeration)."""

    # -------------------------------------------------------------------------
    # Account State Errors
    # -------------------------------------------------------------------------

    ACCOUNT_LOCKED = (
        "Account has been locked due to too many failed login attempts. "
        "Please contact support."
    )
    """Five consecutive failed logins."""

    ACCOUNT_INACTIVE = "User account is not active. Please contact support."
    """Deactivated accounts cannot log in or rotate their master password."""

    USER_NOT_FOUND = "User with identifier '{user_id}' was not found"
    """Format with user_id."""

    # -------------------------------------------------------------------------
    # Token Errors
    # -------------------------------------------------------------------------

    INVALID_REFRESH_TOKEN = (
        "The provided refresh token is invalid, expired, or has been revoked"
    )
    """Umbrella for every refresh failure (no distinction surfaced)."""

    INVALID_ACCESS_TOKEN = (
        "The provided access token is invalid, expired, or has been revoked"
    )
    """Umbrella for every access token failure."""

    NO_TOKENS_TO_BLACKLIST = (
        "At least one token (access token or refresh token) must be provided to blacklist"
    )

    # -------------------------------------------------------------------------
    # Registration Errors
    # -------------------------------------------------------------------------

    EMAIL_TAKEN = "A user with this email already exists"
    USERNAME_TAKEN = "A user with this username already exists"
