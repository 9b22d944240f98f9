"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain import DomainError
from tickets.handlers.serializers import PurchaseSerializer
from tickets.services import get_ticket_service


def parse_account_id(value: str) -> int | None:
    """Return the path account ID as an int, or None when it is not numeric."""
    try:
        return int(value)
    except ValueError:
        return None


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class PurchaseView(APIView):
    """Handler for POST /api/accounts/{account_id}/purchases"""

    def post(self, request: Request, account_id: str) -> Response:
        serializer = PurchaseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        service = get_ticket_service()
        try:
            service.purchase_tickets(parse_account_id(account_id), serializer.to_domain())
        except DomainError as exc:
            return domain_error_response(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)
