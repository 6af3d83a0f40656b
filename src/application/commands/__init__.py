"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (RegisterUser, ChangeMasterPassword).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import (
    ChangeMasterPassword,
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
)
from src.application.commands.vault_commands import CreateVaultEntry

__all__ = [
    # Auth commands
    "ChangeMasterPassword",
    "LoginUser",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    # Vault commands
    "CreateVaultEntry",
]
