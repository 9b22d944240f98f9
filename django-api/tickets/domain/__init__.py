from tickets.domain.errors import (
    DomainError,
    EmptyRequestError,
    ErrorCode,
    InvalidAccountError,
    InvalidPurchaseError,
    MissingAdultError,
    TooManyTicketsError,
)
from tickets.domain.models import MAX_TICKETS_PER_PURCHASE, PurchaseSummary, TicketCounts
from tickets.domain.value_objects import TICKET_PRICES, TicketType, TicketTypeRequest

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "TICKET_PRICES",
    "TicketCounts",
    "PurchaseSummary",
    "MAX_TICKETS_PER_PURCHASE",
    "ErrorCode",
    "DomainError",
    "InvalidPurchaseError",
    "InvalidAccountError",
    "EmptyRequestError",
    "TooManyTicketsError",
    "MissingAdultError",
]
