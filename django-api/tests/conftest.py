"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.gateways.interfaces import SeatReservationService, TicketPaymentService
from tickets.services.ticket_service import TicketService

# Shared across fake instances so tests can check call order across gateways.
CALLS: list[tuple[str, int, int]] = []


class RecordingPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        CALLS.append(("payment", account_id, total_amount_to_pay))


class RecordingSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        CALLS.append(("reservation", account_id, total_seats_to_allocate))


class FailingPaymentService(TicketPaymentService):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        raise ConnectionError("payment provider unavailable")


class FailingSeatReservationService(SeatReservationService):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        raise ConnectionError("seat booking unavailable")


@pytest.fixture(autouse=True)
def gateway_calls() -> list[tuple[str, int, int]]:
    CALLS.clear()
    yield CALLS
    CALLS.clear()


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def ticket_service() -> TicketService:
    return TicketService(
        payment_service=RecordingPaymentService(),
        reservation_service=RecordingSeatReservationService(),
    )


@pytest.fixture
def recording_gateways(settings):
    """Point the configured gateways at the recording fakes."""
    settings.TICKETS_PAYMENT_SERVICE = "tests.conftest.RecordingPaymentService"
    settings.TICKETS_SEAT_RESERVATION_SERVICE = "tests.conftest.RecordingSeatReservationService"
