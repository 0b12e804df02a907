"""Builds a TicketService from the configured collaborators."""

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from purchases.conf import get_setting
from purchases.services.purchase_service import TicketService


def _load_collaborator(setting_name: str):
    path = get_setting(setting_name)
    if not path:
        raise ImproperlyConfigured(f"PURCHASES['{setting_name}'] is not set")
    try:
        cls = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"PURCHASES['{setting_name}'] could not be imported: {path}"
        ) from exc
    return cls()


def get_ticket_service() -> TicketService:
    return TicketService(
        seat_reservation_service=_load_collaborator("SEAT_RESERVATION_SERVICE"),
        payment_service=_load_collaborator("PAYMENT_SERVICE"),
        discount_service=_load_collaborator("DISCOUNT_SERVICE"),
        max_tickets=get_setting("MAX_TICKETS_PER_PURCHASE"),
    )
