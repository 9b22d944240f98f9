"""Integration tests for the purchase endpoint.

Run with: pytest tests/test_purchase_api.py -v
"""

import pytest
from rest_framework.test import APIClient


def purchase_url(account_id: int) -> str:
    return f"/api/accounts/{account_id}/purchases"


@pytest.mark.usefixtures("recording_gateways")
class TestPurchaseEndpoint:
    """Tests for POST /api/accounts/{account_id}/purchases"""

    def test_valid_purchase_returns_no_content(self, api_client: APIClient, gateway_calls):
        response = api_client.post(
            purchase_url(1),
            {
                "tickets": [
                    {"type": "ADULT", "quantity": 2},
                    {"type": "CHILD", "quantity": 1},
                    {"type": "INFANT", "quantity": 1},
                ]
            },
            format="json",
        )
        assert response.status_code == 204
        assert gateway_calls == [("payment", 1, 65), ("reservation", 1, 3)]

    def test_business_rule_maps_to_400(self, api_client: APIClient, gateway_calls):
        response = api_client.post(
            purchase_url(1),
            {"tickets": [{"type": "CHILD", "quantity": 2}]},
            format="json",
        )
        assert response.status_code == 400
        assert response.json() == {
            "code": "MISSING_ADULT",
            "message": "Child or Infant tickets cannot be purchased without an Adult ticket.",
        }
        assert gateway_calls == []

    def test_invalid_account(self, api_client: APIClient):
        response = api_client.post(
            purchase_url(0),
            {"tickets": [{"type": "ADULT", "quantity": 1}]},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ACCOUNT"

    def test_empty_ticket_list(self, api_client: APIClient):
        response = api_client.post(purchase_url(1), {"tickets": []}, format="json")
        assert response.status_code == 400
        assert response.json()["code"] == "EMPTY_REQUEST"

    def test_too_many_tickets(self, api_client: APIClient):
        response = api_client.post(
            purchase_url(1),
            {"tickets": [{"type": "ADULT", "quantity": 26}]},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "TOO_MANY_TICKETS"

    def test_unknown_ticket_type_is_rejected(self, api_client: APIClient, gateway_calls):
        response = api_client.post(
            purchase_url(1),
            {"tickets": [{"type": "SENIOR", "quantity": 1}]},
            format="json",
        )
        assert response.status_code == 400
        assert "tickets" in response.json()
        assert gateway_calls == []

    def test_negative_quantity_is_rejected(self, api_client: APIClient):
        response = api_client.post(
            purchase_url(1),
            {"tickets": [{"type": "ADULT", "quantity": -1}]},
            format="json",
        )
        assert response.status_code == 400
        assert "tickets" in response.json()

    @pytest.mark.parametrize("account_id", ["-3", "abc"])
    def test_non_positive_or_non_numeric_account(self, api_client: APIClient, account_id):
        response = api_client.post(
            f"/api/accounts/{account_id}/purchases",
            {"tickets": [{"type": "ADULT", "quantity": 1}]},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ACCOUNT"

    def test_ticket_type_is_case_insensitive(self, api_client: APIClient, gateway_calls):
        response = api_client.post(
            purchase_url(5),
            {"tickets": [{"type": "adult", "quantity": 1}, {"type": "Child", "quantity": 1}]},
            format="json",
        )
        assert response.status_code == 204
        assert gateway_calls == [("payment", 5, 40), ("reservation", 5, 2)]


class TestPurchaseEndpointGatewayFailure:
    """Gateway errors are not turned into domain errors."""

    @pytest.fixture(autouse=True)
    def failing_payment(self, settings):
        settings.TICKETS_PAYMENT_SERVICE = "tests.conftest.FailingPaymentService"
        settings.TICKETS_SEAT_RESERVATION_SERVICE = "tests.conftest.RecordingSeatReservationService"

    def test_payment_failure_propagates(self, gateway_calls):
        client = APIClient(raise_request_exception=True)
        with pytest.raises(ConnectionError, match="payment provider unavailable"):
            client.post(purchase_url(1), {"tickets": [{"type": "ADULT", "quantity": 1}]}, format="json")
        assert gateway_calls == []

    def test_payment_failure_is_a_server_error(self):
        client = APIClient(raise_request_exception=False)
        response = client.post(
            purchase_url(1), {"tickets": [{"type": "ADULT", "quantity": 1}]}, format="json"
        )
        assert response.status_code == 500
