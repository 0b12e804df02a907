from purchases.gateways.errors import (
    GatewayError,
    InvalidDiscountCodeError,
    PaymentFailedError,
    SeatReservationFailedError,
)
from purchases.gateways.interfaces import (
    DiscountService,
    SeatReservationService,
    TicketPaymentService,
)

__all__ = [
    "SeatReservationService",
    "TicketPaymentService",
    "DiscountService",
    "GatewayError",
    "InvalidDiscountCodeError",
    "PaymentFailedError",
    "SeatReservationFailedError",
]
