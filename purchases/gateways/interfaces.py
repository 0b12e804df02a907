"""Collaborator interfaces.

The payment gateway, seat booking and discount lookup live outside this
application. Implementations must be swappable and are injected into the
service at construction.
"""

from abc import ABC, abstractmethod

from purchases.domain import Discount


class SeatReservationService(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seats(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats.

        Raises:
            SeatReservationFailedError: If the seats could not be reserved.
        """
        ...


class TicketPaymentService(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` whole currency units to the account.

        Raises:
            PaymentFailedError: If the payment was declined.
        """
        ...


class DiscountService(ABC):
    """Interface for looking up discount codes."""

    @abstractmethod
    def get_discount(self, account_id: int, code: str) -> Discount | None:
        """Return the discount for a code, or None if it has no data.

        Raises:
            InvalidDiscountCodeError: If the code is not recognised.
        """
        ...
