"""Service wiring.

Gateway classes are chosen by dotted path in settings so deployments can
swap in real providers without code changes.
"""

from django.conf import settings
from django.utils.module_loading import import_string

from tickets.services.ticket_service import TicketService

__all__ = ["TicketService", "get_ticket_service"]


def get_ticket_service() -> TicketService:
    """Build a TicketService from the configured gateway classes."""
    payment_cls = import_string(settings.TICKETS_PAYMENT_SERVICE)
    reservation_cls = import_string(settings.TICKETS_SEAT_RESERVATION_SERVICE)
    return TicketService(payment_service=payment_cls(), reservation_service=reservation_cls())
