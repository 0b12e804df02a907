"""Settings for the purchases app.

Configured through a ``PURCHASES`` dict in the Django settings module::

    PURCHASES = {
        "MAX_TICKETS_PER_PURCHASE": 20,
        "SEAT_RESERVATION_SERVICE": "thirdparty.seatbooking.SeatReservationClient",
        "PAYMENT_SERVICE": "thirdparty.paymentgateway.PaymentClient",
        "DISCOUNT_SERVICE": "thirdparty.discount.DiscountClient",
    }
"""

from typing import Any

from django.conf import settings

from purchases.domain import MAX_TICKETS_PER_PURCHASE

DEFAULTS: dict[str, Any] = {
    "MAX_TICKETS_PER_PURCHASE": MAX_TICKETS_PER_PURCHASE,
    "SEAT_RESERVATION_SERVICE": None,
    "PAYMENT_SERVICE": None,
    "DISCOUNT_SERVICE": None,
}


def get_setting(name: str) -> Any:
    """Return a purchases setting, falling back to its default."""
    if name not in DEFAULTS:
        raise KeyError(f"Unknown purchases setting: {name}")
    user_settings = getattr(settings, "PURCHASES", None) or {}
    return user_settings.get(name, DEFAULTS[name])
