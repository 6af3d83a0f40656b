"""Registration handler for User Authentication.

Flow:
1. Validate master password complexity
2. Validate email and username (value objects)
3. Check email and username uniqueness
4. Generate salt and hash master password
5. Create and save User entity (active, zero failed attempts)
6. Return Success(user_id)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols)
- NO infrastructure imports (repositories are injected via protocols)
- Handler orchestrates business logic without knowing persistence details
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.auth_commands import RegisterUser
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.user import User
from src.domain.errors import UserError
from src.domain.protocols import (
    LoggerProtocol,
    PasswordHashingProtocol,
    UserRepository,
)
from src.domain.value_objects import Email, Username


class RegisterUserHandler:
    """Handler for user registration command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (User entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing and complexity service.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[UUID, DomainError]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command.

        Returns:
            Success(user_id) on successful registration.
            Failure(ValidationError) for malformed input or weak password.
            Failure(ConflictError) if email or username is taken.
        """
        # Step 1: Validate master password complexity
        match self._password_service.validate_complexity(cmd.master_password):
            case Failure(error=error):
                return Failure(error=error)

        # Step 2: Validate email and username
        try:
            email = Email(cmd.email)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL, message=str(e), field="email"
                )
            )
        try:
            username = Username(cmd.username)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_USERNAME, message=str(e), field="username"
                )
            )

        # Step 3: Check uniqueness
        if await self._user_repo.exists_by_email(email.value):
            self._logger.info("Registration rejected", reason="email_taken")
            return Failure(
                error=ConflictError(
                    code=ErrorCode.EMAIL_ALREADY_EXISTS,
                    message=UserError.EMAIL_TAKEN,
                    resource_type="User",
                    conflicting_field="email",
                )
            )
        if await self._user_repo.exists_by_username(username.value):
            self._logger.info("Registration rejected", reason="username_taken")
            return Failure(
                error=ConflictError(
                    code=ErrorCode.USERNAME_ALREADY_EXISTS,
                    message=UserError.USERNAME_TAKEN,
                    resource_type="User",
                    conflicting_field="username",
                )
            )

        # Step 4: Hash master password
        salt = self._password_service.generate_salt()
        password_hash = await self._password_service.hash_password(
            cmd.master_password, salt
        )

        # Step 5: Create and save user
        user = User(
            id=uuid7(),
            email=email.value,
            username=username.value,
            password_hash=password_hash,
            salt=salt,
        )
        await self._user_repo.save(user)

        self._logger.info("User registered", user_id=str(user.id))

        # Step 6: Return user ID
        return Success(value=user.id)
