"""Authentication handler dependency factories.

Handler instances are created per call and wired to the application-scoped
services and repositories:
- User registration, login, logout
- Access token refresh and verification
- Master password rotation
"""

from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import (
    get_database,
    get_encryption_service,
    get_logger,
    get_password_service,
    get_token_blacklist,
    get_token_service,
)
from src.core.container.repositories import (
    get_user_repository,
    get_vault_entry_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.change_master_password_handler import (
        ChangeMasterPasswordHandler,
    )
    from src.application.commands.handlers.login_user_handler import LoginUserHandler
    from src.application.commands.handlers.logout_user_handler import LogoutUserHandler
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from src.application.queries.handlers.verify_access_token_handler import (
        VerifyAccessTokenHandler,
    )


def _access_token_expires_in() -> int:
    return get_settings().access_token_expire_minutes * 60


def get_register_user_handler() -> "RegisterUserHandler":
    """Get RegisterUserHandler.

    Usage:
        handler = get_register_user_handler()
        result = await handler.handle(RegisterUser(...))
    """
    from src.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        logger=get_logger(),
    )


def get_login_user_handler() -> "LoginUserHandler":
    """Get LoginUserHandler."""
    from src.application.commands.handlers.login_user_handler import LoginUserHandler

    return LoginUserHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
        access_token_expires_in=_access_token_expires_in(),
    )


def get_logout_user_handler() -> "LogoutUserHandler":
    """Get LogoutUserHandler."""
    from src.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )

    return LogoutUserHandler(
        token_blacklist=get_token_blacklist(),
        logger=get_logger(),
    )


def get_refresh_token_handler() -> "RefreshAccessTokenHandler":
    """Get RefreshAccessTokenHandler."""
    from src.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )

    return RefreshAccessTokenHandler(
        token_service=get_token_service(),
        token_blacklist=get_token_blacklist(),
        logger=get_logger(),
        access_token_expires_in=_access_token_expires_in(),
    )


def get_verify_access_token_handler() -> "VerifyAccessTokenHandler":
    """Get VerifyAccessTokenHandler."""
    from src.application.queries.handlers.verify_access_token_handler import (
        VerifyAccessTokenHandler,
    )

    return VerifyAccessTokenHandler(
        token_service=get_token_service(),
        token_blacklist=get_token_blacklist(),
    )


def get_change_master_password_handler() -> "ChangeMasterPasswordHandler":
    """Get ChangeMasterPasswordHandler.

    The user and vault entry repositories share the database whose
    transaction() scopes the rotation commit.
    """
    from src.application.commands.handlers.change_master_password_handler import (
        ChangeMasterPasswordHandler,
    )

    return ChangeMasterPasswordHandler(
        user_repo=get_user_repository(),
        vault_entry_repo=get_vault_entry_repository(),
        password_service=get_password_service(),
        encryption_service=get_encryption_service(),
        transaction_manager=get_database(),
        token_blacklist=get_token_blacklist(),
        logger=get_logger(),
    )
