"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain and gateway errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from purchases.domain import DomainError
from purchases.gateways import (
    GatewayError,
    InvalidDiscountCodeError,
    PaymentFailedError,
    SeatReservationFailedError,
)
from purchases.handlers.serializers import (
    ErrorSerializer,
    PurchaseReceiptSerializer,
    PurchaseRequestSerializer,
)
from purchases.providers import get_ticket_service

logger = logging.getLogger(__name__)

# Most specific first.
GATEWAY_ERROR_RESPONSES = (
    (
        InvalidDiscountCodeError,
        "INVALID_DISCOUNT_CODE",
        "Invalid discount code",
        status.HTTP_400_BAD_REQUEST,
    ),
    (PaymentFailedError, "PAYMENT_FAILED", "Payment failed", status.HTTP_402_PAYMENT_REQUIRED),
    (
        SeatReservationFailedError,
        "SEAT_RESERVATION_FAILED",
        "Seats could not be reserved",
        status.HTTP_409_CONFLICT,
    ),
)


def error_response(code: str, message: str, status_code: int) -> Response:
    return Response(ErrorSerializer({"code": code, "message": message}).data, status=status_code)


def gateway_error_response(exc: GatewayError) -> Response:
    for error_class, code, message, status_code in GATEWAY_ERROR_RESPONSES:
        if isinstance(exc, error_class):
            return error_response(code, message, status_code)
    return error_response("GATEWAY_ERROR", "Upstream service error", status.HTTP_502_BAD_GATEWAY)


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        service = get_ticket_service()
        try:
            receipt = service.purchase_tickets(serializer.to_domain())
        except DomainError as exc:
            return error_response(exc.code.value, exc.message, status.HTTP_400_BAD_REQUEST)
        except GatewayError as exc:
            logger.warning(
                "purchases.gateway_failed error=%s account_id=%s",
                type(exc).__name__,
                serializer.validated_data["account_id"],
            )
            return gateway_error_response(exc)
        return Response(PurchaseReceiptSerializer(receipt).data, status=status.HTTP_201_CREATED)
