"""Domain models derived from a single purchase request.

Nothing here is persisted. Both objects live for one purchase call.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from tickets.domain.value_objects import TicketType, TicketTypeRequest

MAX_TICKETS_PER_PURCHASE = 25


@dataclass(frozen=True)
class TicketCounts:
    """Requested quantity per ticket type, summed across line items."""

    by_type: Mapping[TicketType, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        counts = {ticket_type: self.by_type.get(ticket_type, 0) for ticket_type in TicketType}
        if any(quantity < 0 for quantity in counts.values()):
            raise ValueError("Ticket counts cannot be negative")
        object.__setattr__(self, "by_type", MappingProxyType(counts))

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        counts = dict.fromkeys(TicketType, 0)
        for request in requests:
            counts[request.ticket_type] += request.quantity
        return cls(by_type=counts)

    def count(self, ticket_type: TicketType) -> int:
        return self.by_type[ticket_type]

    @property
    def adults(self) -> int:
        return self.count(TicketType.ADULT)

    @property
    def children(self) -> int:
        return self.count(TicketType.CHILD)

    @property
    def infants(self) -> int:
        return self.count(TicketType.INFANT)

    @property
    def total(self) -> int:
        return sum(self.by_type.values())


@dataclass(frozen=True)
class PurchaseSummary:
    """What an accepted purchase costs and how many seats it takes."""

    account_id: int
    total_amount: int
    total_seats: int

    @classmethod
    def from_counts(cls, account_id: int, counts: TicketCounts) -> Self:
        return cls(
            account_id=account_id,
            total_amount=sum(t.price * counts.count(t) for t in TicketType),
            total_seats=sum(counts.count(t) for t in TicketType if t.occupies_seat),
        )
