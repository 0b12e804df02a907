"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_LINES = "MISSING_LINES"
    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    NO_ADULT_TICKET = "NO_ADULT_TICKET"
    DISCOUNT_DATA_MISSING = "DISCOUNT_DATA_MISSING"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingLinesError(DomainError):
    """Raised when a purchase request carries no ticket lines at all."""

    def __init__(self, account_id: int | None) -> None:
        super().__init__(
            code=ErrorCode.MISSING_LINES,
            message=f"Ticket lines are missing for account id [{account_id}]",
        )
        self.account_id = account_id


class InvalidAccountError(DomainError):
    """Raised when the account id is absent or not positive."""

    def __init__(self, account_id: int | None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message=f"Account id [{account_id}] is not valid",
        )
        self.account_id = account_id


class TooManyTicketsError(DomainError):
    """Raised when the total ticket count exceeds the purchase limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Ticket count exceeds the limit of [{limit}]",
        )
        self.limit = limit


class NoAdultTicketError(DomainError):
    """Raised when a purchase has no adult ticket."""

    def __init__(self, account_id: int) -> None:
        super().__init__(
            code=ErrorCode.NO_ADULT_TICKET,
            message=f"No adult ticket requested for account id [{account_id}]",
        )
        self.account_id = account_id


class DiscountDataMissingError(DomainError):
    """Raised when the discount lookup returns nothing for a supplied code."""

    def __init__(self, discount_code: str) -> None:
        super().__init__(
            code=ErrorCode.DISCOUNT_DATA_MISSING,
            message=f"No discount data for discount code [{discount_code}]",
        )
        self.discount_code = discount_code
