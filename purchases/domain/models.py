"""Domain models for a ticket purchase.

These are pure domain objects with no API input rules.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable

from purchases.domain.value_objects import Money

MAX_TICKETS_PER_PURCHASE = 20


class TicketType(Enum):
    """Kinds of ticket that can be bought."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


TICKET_PRICES: dict[TicketType, Money] = {
    TicketType.ADULT: Money(Decimal(20)),
    TicketType.CHILD: Money(Decimal(10)),
    TicketType.INFANT: Money(Decimal(0)),
}

# Infants sit on an adult's lap.
SEATLESS_TICKET_TYPES = frozenset({TicketType.INFANT})


@dataclass(frozen=True)
class TicketLineRequest:
    """A number of tickets of one type."""

    type: TicketType
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.type!r}")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError("Ticket count must be an integer")
        if self.count < 1:
            raise ValueError("Ticket count must be at least 1")

    @property
    def unit_price(self) -> Money:
        return TICKET_PRICES[self.type]

    @property
    def price(self) -> Money:
        return self.unit_price * self.count

    @property
    def seats(self) -> int:
        return 0 if self.type in SEATLESS_TICKET_TYPES else self.count


@dataclass(frozen=True)
class PurchaseRequest:
    """A request to buy tickets for an account.

    ``lines`` is copied into a tuple, so the caller's sequence can change
    afterwards without touching the request. ``None`` means no lines were
    sent at all, which is not the same as an empty order.
    """

    account_id: int | None
    lines: tuple[TicketLineRequest, ...] | None
    discount_code: str | None = None

    def __init__(
        self,
        account_id: int | None,
        lines: Iterable[TicketLineRequest] | None,
        discount_code: str | None = None,
    ) -> None:
        object.__setattr__(self, "account_id", account_id)
        object.__setattr__(self, "lines", None if lines is None else tuple(lines))
        object.__setattr__(self, "discount_code", discount_code)

    @property
    def ticket_count(self) -> int:
        return sum(line.count for line in self.lines or ())

    @property
    def has_adult_ticket(self) -> bool:
        return any(
            line.type is TicketType.ADULT and line.count >= 1
            for line in self.lines or ()
        )


@dataclass(frozen=True)
class Discount:
    """A percentage off the order total, as returned by a DiscountService.

    The percentage is expected in [0, 100] but is taken as given.
    """

    percentage: Decimal | int | float


@dataclass(frozen=True)
class PurchaseReceipt:
    """What was charged and reserved for a completed purchase."""

    account_id: int
    amount: int
    seats: int
