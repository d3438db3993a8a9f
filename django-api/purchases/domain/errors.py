"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    NO_TICKETS_REQUESTED = "NO_TICKETS_REQUESTED"
    ADULT_TICKET_REQUIRED = "ADULT_TICKET_REQUIRED"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase breaks the purchase policy.

    No payment is taken and no seat is reserved when this is raised.
    """

    @property
    def reason(self) -> str:
        return self.message

    @classmethod
    def invalid_account_id(cls) -> "InvalidPurchaseError":
        return cls(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="accountId must be an integer greater than 0",
        )

    @classmethod
    def no_tickets_requested(cls) -> "InvalidPurchaseError":
        return cls(
            code=ErrorCode.NO_TICKETS_REQUESTED,
            message="Number of tickets purchased must be greater than 0",
        )

    @classmethod
    def adult_ticket_required(cls) -> "InvalidPurchaseError":
        return cls(
            code=ErrorCode.ADULT_TICKET_REQUIRED,
            message="Number of adult tickets must be greater than 0",
        )

    @classmethod
    def too_many_tickets(cls, max_tickets: int) -> "InvalidPurchaseError":
        return cls(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Number of tickets purchased must be less than or equal to {max_tickets}",
        )
