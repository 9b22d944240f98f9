"""Serializers for turning API input into domain requests."""

from rest_framework import serializers

from tickets.domain import TicketType, TicketTypeRequest


class TicketLineSerializer(serializers.Serializer):
    """One line item: ticket type name (any case) and quantity."""

    type = serializers.CharField()
    quantity = serializers.IntegerField(min_value=0)

    def validate_type(self, value: str) -> TicketType:
        try:
            return TicketType.from_string(value)
        except ValueError:
            choices = ", ".join(t.value for t in TicketType)
            raise serializers.ValidationError(f"Must be one of: {choices}.")


class PurchaseSerializer(serializers.Serializer):
    """Request body for a purchase.

    An empty ticket list is accepted here so the service reports it.
    """

    tickets = TicketLineSerializer(many=True, allow_empty=True)

    def to_domain(self) -> list[TicketTypeRequest]:
        return [
            TicketTypeRequest(ticket_type=line["type"], quantity=line["quantity"])
            for line in self.validated_data["tickets"]
        ]
