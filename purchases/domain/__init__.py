from purchases.domain.errors import (
    DiscountDataMissingError,
    DomainError,
    ErrorCode,
    InvalidAccountError,
    MissingLinesError,
    NoAdultTicketError,
    TooManyTicketsError,
)
from purchases.domain.models import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_PRICES,
    Discount,
    PurchaseReceipt,
    PurchaseRequest,
    TicketLineRequest,
    TicketType,
)
from purchases.domain.value_objects import Money

__all__ = [
    "MAX_TICKETS_PER_PURCHASE",
    "TICKET_PRICES",
    "Discount",
    "PurchaseReceipt",
    "PurchaseRequest",
    "TicketLineRequest",
    "TicketType",
    "Money",
    "DomainError",
    "ErrorCode",
    "MissingLinesError",
    "InvalidAccountError",
    "TooManyTicketsError",
    "NoAdultTicketError",
    "DiscountDataMissingError",
]
