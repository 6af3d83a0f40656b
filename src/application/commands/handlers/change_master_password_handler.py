"""Change Master Password handler (rotation orchestrator).

Flow (strictly ordered):
1. Shape-check the caller's tokens, if any
2. Load user (UserNotFound if absent)
3. Check account state (inactive, locked)
4. Verify current master password (no state mutation on mismatch)
5. Validate new master password complexity
6. Hash the new master password with a fresh salt
7. Load every vault entry owned by the user
8. Re-encrypt every entry in memory under the new master password
9. Persist entries and new credential verifier in one transaction
10. Blacklist the caller's tokens
11. Return Success(MasterPasswordChanged)

All-or-nothing: nothing is written until step 9, and step 9 runs inside a
transaction that rolls back if either write raises. A failure of any single
re-encryption aborts before the transaction opens, leaving the old hash and
the old envelopes in place.

Concurrent rotations for the same user must be serialized by the caller.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime

from src.application.commands.auth_commands import ChangeMasterPassword
from src.application.dtos.auth_dtos import MasterPasswordChanged
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthenticationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Result, Success
from src.domain.entities.vault_entry import VaultEntry
from src.domain.errors import UserError
from src.domain.protocols import (
    EnvelopeEncryptionProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenBlacklistProtocol,
    TransactionManagerProtocol,
    UserRepository,
    VaultEntryRepository,
)
from src.domain.value_objects import AccessToken, PasswordHash, RefreshToken, Salt


class ChangeMasterPasswordHandler:
    """Handler for master password rotation.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (User and VaultEntry entities, protocols)
    - Infrastructure layer (repositories, crypto services via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        vault_entry_repo: VaultEntryRepository,
        password_service: PasswordHashingProtocol,
        encryption_service: EnvelopeEncryptionProtocol,
        transaction_manager: TransactionManagerProtocol,
        token_blacklist: TokenBlacklistProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize rotation handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            vault_entry_repo: Vault entry repository (bulk update).
            password_service: Password hashing/verification service.
            encryption_service: Envelope encryption service.
            transaction_manager: Transaction boundary spanning both repositories.
            token_blacklist: Revoked-token store.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._vault_entry_repo = vault_entry_repo
        self._password_service = password_service
        self._encryption_service = encryption_service
        self._transaction_manager = transaction_manager
        self._token_blacklist = token_blacklist
        self._logger = logger

    async def handle(
        self, cmd: ChangeMasterPassword
    ) -> Result[MasterPasswordChanged, DomainError]:
        """Handle master password rotation.

        Args:
            cmd: ChangeMasterPassword command.

        Returns:
            Success(MasterPasswordChanged) with the re-encrypted entry count.
            Failure(NotFoundError) if the user does not exist.
            Failure(AuthenticationError) if the account is inactive or locked,
            or the current master password is wrong.
            Failure(ValidationError) if the new master password is too weak
            or a supplied token is malformed.
            Failure(EncryptionError | DecryptionError) if any entry fails to
            re-encrypt. Nothing is persisted in that case.
        """
        log = self._logger.bind(user_id=str(cmd.user_id))

        # Step 1: Shape-check tokens before doing any work
        try:
            access_token = (
                AccessToken(cmd.access_token) if cmd.access_token is not None else None
            )
            refresh_token = (
                RefreshToken(cmd.refresh_token)
                if cmd.refresh_token is not None
                else None
            )
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED, message=str(e), field="token"
                )
            )

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
                log.warning("Rotation rejected", error_code=error.code.value)
                return Failure(error=error)

        # Step 4: Verify current master password
        if not await self._password_service.verify_password(
            cmd.current_master_password, user.password_hash
        ):
            log.warning("Rotation rejected", error_code="invalid_credentials")
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_CREDENTIALS,
                    message=UserError.INVALID_CREDENTIALS,
                )
            )

        # Step 5: Validate new master password
        match self._password_service.validate_complexity(cmd.new_master_password):
            case Failure(error=error):
                return Failure(error=error)

        # Step 6: Hash new master password
        new_salt = self._password_service.generate_salt()
        new_hash = await self._password_service.hash_password(
            cmd.new_master_password, new_salt
        )
        rotated_user = user.change_master_password(
            PasswordHash(new_hash), Salt(new_salt)
        )

        # Step 7: Load vault entries
        entries = await self._vault_entry_repo.find_by_user_id(user.id)

        # Step 8: Re-encrypt in memory
        re_encrypted: list[VaultEntry] = []
        for entry in entries:
            result = await self._encryption_service.re_encrypt(
                entry.encrypted_password,
                cmd.current_master_password,
                cmd.new_master_password,
            )
            if isinstance(result, Failure):
                log.error(
                    "Rotation aborted, nothing persisted",
                    entry_id=str(entry.id),
                    error_code=result.error.code.value,
                )
                return result
            update = entry.update_encrypted_password(user.id, result.value)
            if isinstance(update, Failure):
                return update
            re_encrypted.append(entry)

        # Step 9: Persist atomically
        async with self._transaction_manager.transaction():
            bulk = await self._vault_entry_repo.bulk_update_encrypted_passwords(
                re_encrypted
            )
            if isinstance(bulk, Failure):
                return bulk
            await self._user_repo.save(rotated_user)
        changed_at = datetime.now(UTC)

        # Step 10: End existing sessions
        if access_token is not None or refresh_token is not None:
            await self._token_blacklist.add_to_blacklist(
                access_token=access_token, refresh_token=refresh_token
            )

        log.info("Master password changed", entries_re_encrypted=len(re_encrypted))

        # Step 11: Return summary
        return Success(
            value=MasterPasswordChanged(
                user_id=user.id,
                entries_re_encrypted=len(re_encrypted),
                changed_at=changed_at,
            )
        )
