"""Ticket purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants before any side effect
- Charge first, then reserve seats
- Return domain models or raise domain errors
"""

import logging
from decimal import Decimal

from purchases.domain import (
    MAX_TICKETS_PER_PURCHASE,
    DiscountDataMissingError,
    DomainError,
    InvalidAccountError,
    MissingLinesError,
    Money,
    NoAdultTicketError,
    PurchaseReceipt,
    PurchaseRequest,
    TicketLineRequest,
    TooManyTicketsError,
)
from purchases.gateways import DiscountService, SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class TicketService:
    """Service for buying tickets."""

    def __init__(
        self,
        seat_reservation_service: SeatReservationService,
        payment_service: TicketPaymentService,
        discount_service: DiscountService,
        max_tickets: int = MAX_TICKETS_PER_PURCHASE,
    ) -> None:
        for name, collaborator in (
            ("seat_reservation_service", seat_reservation_service),
            ("payment_service", payment_service),
            ("discount_service", discount_service),
        ):
            if collaborator is None:
                raise TypeError(f"{name} is required")
        self._seat_reservation_service = seat_reservation_service
        self._payment_service = payment_service
        self._discount_service = discount_service
        self._max_tickets = max_tickets

    def purchase_tickets(self, request: PurchaseRequest) -> PurchaseReceipt:
        """Validate, price, charge and reserve seats for a purchase.

        Errors raised by the collaborators are not caught. A payment that
        succeeded stays committed if the reservation then fails.

        Raises:
            MissingLinesError: If the request has no ticket lines.
            InvalidAccountError: If the account id is absent or not positive.
            TooManyTicketsError: If more tickets are requested than allowed.
            NoAdultTicketError: If no adult ticket is requested.
            DiscountDataMissingError: If the discount code has no data.
        """
        try:
            self._validate(request)
        except DomainError as exc:
            logger.warning(
                "purchases.rejected code=%s account_id=%s",
                exc.code.value,
                request.account_id,
            )
            raise

        lines = request.lines
        amount = self.total_price(lines).amount
        seats = self.total_seats(lines)

        if request.discount_code is not None:
            amount = self._apply_discount(request.account_id, request.discount_code, amount)

        # int() on a Decimal truncates toward zero.
        charge = int(amount)
        self._payment_service.make_payment(request.account_id, charge)
        self._seat_reservation_service.reserve_seats(request.account_id, seats)

        logger.info(
            "purchases.completed account_id=%s amount=%s seats=%s",
            request.account_id,
            charge,
            seats,
        )
        return PurchaseReceipt(account_id=request.account_id, amount=charge, seats=seats)

    @staticmethod
    def total_price(lines: tuple[TicketLineRequest, ...]) -> Money:
        """Undiscounted price of all lines."""
        total = Money(Decimal(0))
        for line in lines:
            total = total + line.price
        return total

    @staticmethod
    def total_seats(lines: tuple[TicketLineRequest, ...]) -> int:
        """Seats needed for all lines. Infants take none."""
        return sum(line.seats for line in lines)

    def _validate(self, request: PurchaseRequest) -> None:
        if request.lines is None:
            raise MissingLinesError(request.account_id)
        if request.account_id is None or request.account_id <= 0:
            raise InvalidAccountError(request.account_id)
        if request.ticket_count > self._max_tickets:
            raise TooManyTicketsError(self._max_tickets)
        if not request.has_adult_ticket:
            raise NoAdultTicketError(request.account_id)

    def _apply_discount(self, account_id: int, code: str, amount: Decimal) -> Decimal:
        discount = self._discount_service.get_discount(account_id, code)
        if discount is None:
            error = DiscountDataMissingError(code)
            logger.warning(
                "purchases.rejected code=%s account_id=%s discount_code=%s",
                error.code.value,
                account_id,
                code,
            )
            raise error
        percentage = Decimal(str(discount.percentage))
        return amount * (1 - percentage / 100)
