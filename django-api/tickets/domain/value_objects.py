"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketType(Enum):
    """The closed set of ticket types that can be purchased."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def price(self) -> int:
        return TICKET_PRICES[self]

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value.upper())


TICKET_PRICES: dict[TicketType, int] = {
    TicketType.ADULT: 25,
    TicketType.CHILD: 15,
    TicketType.INFANT: 0,
}


@dataclass(frozen=True)
class TicketTypeRequest:
    """A single line item: how many tickets of one type are wanted."""

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise TypeError("ticket_type must be a TicketType")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise TypeError("quantity must be an integer")
        if self.quantity < 0:
            raise ValueError("quantity cannot be negative")
