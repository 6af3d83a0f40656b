"""Result types for railway-oriented programming.

Operations that can fail for a business reason (wrong master password,
locked account, tampered ciphertext) return a Result instead of raising.
Callers branch on the variant explicitly.

Usage:
    result = await handler.handle(LoginUser(email=email, master_password=password))
    match result:
        case Success(value=tokens):
            ...
        case Failure(error=error):
            logger.warning("Login rejected", error_code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Why the operation failed.
    """

    error: E


Result = Success[T] | Failure[E]
