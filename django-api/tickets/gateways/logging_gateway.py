"""Default gateway implementations that only record the call.

Used until a real payment provider and seat booking provider are configured.
"""

import logging

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingPaymentService(TicketPaymentService):
    """Payment gateway that logs the charge instead of taking it."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Payment of %s taken for account %s", total_amount_to_pay, account_id)


class LoggingSeatReservationService(SeatReservationService):
    """Seat booking gateway that logs the reservation instead of making it."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("%s seat(s) reserved for account %s", total_seats_to_allocate, account_id)
