"""Serializers for purchase requests and receipts."""

from rest_framework import serializers

from purchases.domain import PurchaseRequest, TicketLineRequest, TicketType


class TicketLineSerializer(serializers.Serializer):
    """Input format for one ticket line."""

    type = serializers.ChoiceField(choices=[ticket_type.value for ticket_type in TicketType])
    count = serializers.IntegerField(min_value=1)


class PurchaseRequestSerializer(serializers.Serializer):
    """Input format for a purchase.

    Only checks shape. Business rules are enforced by TicketService, so a
    missing ``tickets`` key or account id still reaches the service.
    """

    account_id = serializers.IntegerField(default=None, allow_null=True)
    tickets = serializers.ListField(
        child=TicketLineSerializer(),
        required=False,
        allow_null=True,
        allow_empty=True,
    )
    discount_code = serializers.CharField(
        default=None,
        allow_null=True,
        allow_blank=True,
        trim_whitespace=False,
        max_length=64,
    )

    def to_domain(self) -> PurchaseRequest:
        data = self.validated_data
        tickets = data.get("tickets")
        lines = None
        if tickets is not None:
            lines = [
                TicketLineRequest(type=TicketType(line["type"]), count=line["count"])
                for line in tickets
            ]
        return PurchaseRequest(
            account_id=data["account_id"],
            lines=lines,
            discount_code=data["discount_code"],
        )


class PurchaseReceiptSerializer(serializers.Serializer):
    """Serializer for PurchaseReceipt domain model."""

    account_id = serializers.IntegerField()
    amount = serializers.IntegerField()
    seats = serializers.IntegerField()


class ErrorSerializer(serializers.Serializer):
    """Serializer for error responses."""

    code = serializers.CharField()
    message = serializers.CharField()
