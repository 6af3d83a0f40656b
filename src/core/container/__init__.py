"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_login_user_handler, ...

The container is organized into modules by concern:
- infrastructure: Core services (logging, hashing, tokens, encryption, db)
- repositories: Repository factories
- auth_handlers: Authentication handler factories
- vault_handlers: Vault handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_encryption_service,
    get_logger,
    get_password_service,
    get_token_blacklist,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_user_repository,
    get_vault_entry_repository,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_change_master_password_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_verify_access_token_handler,
)

# Vault handlers
from src.core.container.vault_handlers import (
    get_create_vault_entry_handler,
    get_list_vault_entries_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_encryption_service",
    "get_logger",
    "get_password_service",
    "get_token_blacklist",
    "get_token_service",
    # Repositories
    "get_user_repository",
    "get_vault_entry_repository",
    # Auth handlers
    "get_change_master_password_handler",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_refresh_token_handler",
    "get_register_user_handler",
    "get_verify_access_token_handler",
    # Vault handlers
    "get_create_vault_entry_handler",
    "get_list_vault_entries_handler",
]
