"""Login handler for User Authentication.

Flow:
1. Find user by email
2. Check account can log in (inactive first, then locked)
3. Verify master password
4. On mismatch: record failed attempt, save, return InvalidCredentials
5. On match: record successful login, save
6. Issue access and refresh tokens
7. Return Success(AuthTokens)

The account-state gate runs before the password hasher is touched, so a
locked account never reaches bcrypt.

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
"""

from src.application.commands.auth_commands import LoginUser
from src.application.dtos.auth_dtos import ACCESS_TOKEN_EXPIRES_IN, AuthTokens
from src.core.enums import ErrorCode
from src.core.errors import AuthenticationError
from src.core.result import Failure, Result, Success
from src.domain.errors import UserError
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    UserRepository,
)


class LoginUserHandler:
    """Handler for login command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (User entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
        access_token_expires_in: int = ACCESS_TOKEN_EXPIRES_IN,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing/verification service.
            token_service: JWT issuance.
            logger: Structured logger.
            access_token_expires_in: Seconds reported as ``expires_in``.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger
        self._access_token_expires_in = access_token_expires_in

    async def handle(self, cmd: LoginUser) -> Result[AuthTokens, AuthenticationError]:
        """Handle login command.

        Args:
            cmd: LoginUser command (email and master password).

        Returns:
            Success(AuthTokens) on successful login.
            Failure(AuthenticationError) with INVALID_CREDENTIALS,
            ACCOUNT_INACTIVE or ACCOUNT_LOCKED.

        Side Effects:
            - Updates failed_login_attempts on wrong password.
            - Resets the counter and stamps last_login_at on success.
        """
        # Step 1: Find user by email
        user = await self._user_repo.find_by_email(cmd.email)

        if user is None:
            self._logger.info("Login failed", reason="unknown_email")
            # Same message as a wrong password to prevent user enumeration
            return Failure(error=self._invalid_credentials())

        # Step 2: Check account state before touching the hasher
        match user.ensure_can_login():
            case Failure(error=error):
                self._logger.warning(
                    "Login rejected", user_id=str(user.id), error_code=error.code.value
                )
                return Failure(error=error)

        # Step 3: Verify master password
        is_valid = await self._password_service.verify_password(
            cmd.master_password, user.password_hash
        )

        # Step 4: Record failure
        if not is_valid:
            user.record_failed_login_attempt()
            await self._user_repo.save(user)
            self._logger.warning(
                "Login failed",
                user_id=str(user.id),
                failed_login_attempts=user.failed_login_attempts,
                locked=user.is_account_locked(),
            )
            return Failure(error=self._invalid_credentials())

        # Step 5: Record success
        match user.record_successful_login():
            case Failure(error=error):
                return Failure(error=error)
        await self._user_repo.save(user)

        # Step 6: Issue tokens
        access_token = self._token_service.generate_access_token(user.id)
        refresh_token = self._token_service.generate_refresh_token(user.id)

        self._logger.info("Login succeeded", user_id=str(user.id))

        # Step 7: Return tokens
        return Success(
            value=AuthTokens(
                access_token=access_token.value,
                refresh_token=refresh_token.value,
                expires_in=self._access_token_expires_in,
            )
        )

    @staticmethod
    def _invalid_credentials() -> AuthenticationError:
        return AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=UserError.INVALID_CREDENTIALS,
        )
