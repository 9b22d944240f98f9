"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    EMPTY_REQUEST = "EMPTY_REQUEST"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    MISSING_ADULT = "MISSING_ADULT"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a business rule."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is missing or not positive."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID.",
        )
        self.account_id = account_id


class EmptyRequestError(InvalidPurchaseError):
    """Raised when no tickets are requested."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_REQUEST,
            message="At least one ticket must be requested.",
        )


class TooManyTicketsError(InvalidPurchaseError):
    """Raised when a purchase exceeds the per-purchase ticket limit."""

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Cannot purchase more than {limit} tickets at a time.",
        )
        self.requested = requested
        self.limit = limit


class MissingAdultError(InvalidPurchaseError):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT,
            message="Child or Infant tickets cannot be purchased without an Adult ticket.",
        )
