"""Gateway interfaces for the external payment and seat-booking services.

Gateways must be swappable. Implementations either complete the call or raise.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface to the payment provider."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the account the given amount."""
        ...


class SeatReservationService(ABC):
    """Interface to the seat booking provider."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the given number of seats for the account."""
        ...
