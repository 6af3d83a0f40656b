"""Create Vault Entry handler.

Flow:
1. Validate fields (category, tags, site name, URL, username, notes)
2. Load user (UserNotFound if absent)
3. Check account state (inactive, locked)
4. Verify the master password against the stored verifier
5. Encrypt the site password under the master password
6. Save and return Success(entry_id)

Steps 1-4 run before any key derivation, so rejected input never pays
for PBKDF2, and every stored envelope opens under the user's current
master password.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.vault_commands import CreateVaultEntry
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.vault_entry import (
    VaultEntry,
    normalize_notes,
    normalize_site_name,
    normalize_site_url,
    normalize_username,
)
from src.domain.enums import VaultCategory
from src.domain.errors import UserError
from src.domain.protocols import (
    EnvelopeEncryptionProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
    VaultEntryRepository,
)
from src.domain.value_objects import Tags


def _validation_failure(message: str, field: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.VALIDATION_FAILED, message=message, field=field
        )
    )


class CreateVaultEntryHandler:
    """Handler for CreateVaultEntry command.

    The plaintext password is only held long enough to encrypt it.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        vault_entry_repo: VaultEntryRepository,
        password_service: PasswordHashingProtocol,
        encryption_service: EnvelopeEncryptionProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._vault_entry_repo = vault_entry_repo
        self._password_service = password_service
        self._encryption_service = encryption_service
        self._logger = logger

    async def handle(self, cmd: CreateVaultEntry) -> Result[UUID, DomainError]:
        """Handle CreateVaultEntry command.

        Returns:
            Success(entry_id) once stored.
            Failure(ValidationError) for invalid fields.
            Failure(NotFoundError) if the user does not exist.
            Failure(AuthenticationError) if the account is inactive or
                locked, or the master password does not match.
            Failure(EncryptionError) if encryption fails.
        """
        # Step 1: Validate fields
        try:
            category = VaultCategory.parse(cmd.category)
        except ValueError as e:
            return _validation_failure(str(e), "category")
        try:
            tags = Tags.from_strings(cmd.tags)
        except ValueError as e:
            return _validation_failure(str(e), "tags")
        try:
            site_name = normalize_site_name(cmd.site_name)
            site_url = normalize_site_url(cmd.site_url)
            username = normalize_username(cmd.username)
            notes = normalize_notes(cmd.notes)
        except ValueError as e:
            return _validation_failure(str(e), "vault_entry")

        # Step 2: Load user
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message=UserError.USER_NOT_FOUND.format(user_id=cmd.user_id),
                    resource_type="User",
                    resource_id=str(cmd.user_id),
                )
            )

        # Step 3: Check account state
        match user.ensure_can_login():
            case Failure(error=error):
                return Failure(error=error)

        # Step 4: Verify master password
        if not await self._password_service.verify_password(
            cmd.master_password, user.password_hash
        ):
            self._logger.warning(
                "Vault entry rejected",
                user_id=str(cmd.user_id),
                error_code="invalid_credentials",
            )
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=UserError.INVALID_CREDENTIALS,
                )
            )

        # Step 5: Encrypt
        encrypted = await self._encryption_service.encrypt(
            cmd.password, cmd.master_password
        )
        if isinstance(encrypted, Failure):
            return encrypted

        # Step 6: Save
        entry = VaultEntry(
            id=uuid7(),
            user_id=user.id,
            site_name=site_name,
            username=username,
            encrypted_password=encrypted.value,
            category=category,
            site_url=site_url,
            notes=notes,
            tags=tags,
        )
        await self._vault_entry_repo.save(entry)

        self._logger.info(
            "Vault entry created",
            user_id=str(user.id),
            entry_id=str(entry.id),
            category=category.value,
        )
        return Success(value=entry.id)
