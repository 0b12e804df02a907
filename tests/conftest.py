"""Pytest configuration and shared fixtures."""

from unittest.mock import create_autospec

import pytest
from django.conf import settings

from purchases.gateways import DiscountService, SeatReservationService, TicketPaymentService
from purchases.services.purchase_service import TicketService


def pytest_configure():
    settings.configure(
        SECRET_KEY="test-secret-key",
        ALLOWED_HOSTS=["testserver"],
        INSTALLED_APPS=[
            "django.contrib.contenttypes",
            "django.contrib.auth",
            "rest_framework",
            "purchases",
        ],
        ROOT_URLCONF="tests.urls",
        USE_TZ=True,
        REST_FRAMEWORK={
            "DEFAULT_AUTHENTICATION_CLASSES": [],
            "DEFAULT_PERMISSION_CLASSES": [],
            "UNAUTHENTICATED_USER": None,
        },
        PURCHASES={
            "SEAT_RESERVATION_SERVICE": "tests.fakes.FakeSeatReservationService",
            "PAYMENT_SERVICE": "tests.fakes.FakePaymentService",
            "DISCOUNT_SERVICE": "tests.fakes.FakeDiscountService",
        },
    )


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def seat_reservation_service():
    return create_autospec(SeatReservationService, instance=True)


@pytest.fixture
def payment_service():
    return create_autospec(TicketPaymentService, instance=True)


@pytest.fixture
def discount_service():
    return create_autospec(DiscountService, instance=True)


@pytest.fixture
def ticket_service(seat_reservation_service, payment_service, discount_service) -> TicketService:
    return TicketService(
        seat_reservation_service=seat_reservation_service,
        payment_service=payment_service,
        discount_service=discount_service,
    )
