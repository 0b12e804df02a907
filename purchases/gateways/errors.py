"""Errors raised by collaborator implementations.

These are not domain errors: the service lets them through untouched.
"""


class GatewayError(Exception):
    """Base class for failures reported by an external collaborator."""


class InvalidDiscountCodeError(GatewayError):
    """Raised by a DiscountService for an unknown or unusable code."""


class PaymentFailedError(GatewayError):
    """Raised by a TicketPaymentService when a charge fails."""


class SeatReservationFailedError(GatewayError):
    """Raised by a SeatReservationService when seats cannot be held."""
