"""Ticket service - all purchase rules live here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Raise domain errors, never HTTP errors

Rules are checked in a fixed order and the first broken rule wins. Gateways
are only called once every rule has passed: payment first, then seats.
"""

import logging
from collections.abc import Sequence

from tickets.domain import (
    MAX_TICKETS_PER_PURCHASE,
    EmptyRequestError,
    InvalidAccountError,
    InvalidPurchaseError,
    MissingAdultError,
    PurchaseSummary,
    TicketCounts,
    TicketTypeRequest,
    TooManyTicketsError,
)
from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)

RequestsArg = TicketTypeRequest | Sequence[TicketTypeRequest] | None


class TicketService:
    """Service for buying cinema tickets."""

    def __init__(
        self,
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
    ) -> None:
        self._payment_service = payment_service
        self._reservation_service = reservation_service

    def purchase_tickets(self, account_id: int | None, *ticket_type_requests: RequestsArg) -> None:
        """Validate a purchase, take payment and reserve seats.

        Requests may be passed as separate arguments or as one list.

        Raises:
            InvalidAccountError: If account_id is missing or not positive.
            EmptyRequestError: If no tickets are requested.
            TooManyTicketsError: If more than 25 tickets are requested.
            MissingAdultError: If child or infant tickets have no adult.

        Gateway errors are not caught. A failed reservation does not refund
        the payment taken before it.
        """
        try:
            summary = self.calculate(account_id, *ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.info("Purchase rejected for account %s: %s", account_id, exc.code.value)
            raise

        self._payment_service.make_payment(summary.account_id, summary.total_amount)
        self._reservation_service.reserve_seat(summary.account_id, summary.total_seats)
        logger.info(
            "Purchase completed for account %s: amount=%s seats=%s",
            summary.account_id,
            summary.total_amount,
            summary.total_seats,
        )

    def calculate(self, account_id: int | None, *ticket_type_requests: RequestsArg) -> PurchaseSummary:
        """Run every purchase rule and return the totals, without side effects."""
        _validate_account(account_id)
        requests = _flatten(ticket_type_requests)
        if not requests:
            raise EmptyRequestError()

        counts = TicketCounts.from_requests(requests)
        _validate_business_rules(counts)
        return PurchaseSummary.from_counts(account_id, counts)


def _flatten(args: tuple[RequestsArg, ...]) -> list[TicketTypeRequest]:
    if len(args) == 1 and (args[0] is None or isinstance(args[0], (list, tuple))):
        return list(args[0] or ())
    return list(args)


def _validate_account(account_id: int | None) -> None:
    if not isinstance(account_id, int) or isinstance(account_id, bool) or account_id <= 0:
        raise InvalidAccountError(account_id)


def _validate_business_rules(counts: TicketCounts) -> None:
    if counts.total > MAX_TICKETS_PER_PURCHASE:
        raise TooManyTicketsError(requested=counts.total, limit=MAX_TICKETS_PER_PURCHASE)

    if counts.adults == 0 and (counts.children > 0 or counts.infants > 0):
        raise MissingAdultError()
