"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from pricing.conf import pricing_settings
from pricing.domain.errors import DomainError, ErrorCode, PromoCodeError
from pricing.handlers.serializers import (
    DefaultTiersRequestSerializer,
    NextChangeSerializer,
    PriceBreakdownSerializer,
    PriceTierSerializer,
    QuoteRequestSerializer,
    QuoteSerializer,
)
from pricing.services.pricing_service import PricingService
from pricing.stores.django_store import DjangoPricingStore

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.TICKET_TYPE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_TICKET_TYPE_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PROMO_CODE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def error_response(error: DomainError) -> Response:
    if isinstance(error, PromoCodeError) and error.code not in ERROR_STATUS:
        http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        http_status = ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST)
    return Response({"code": error.code.value, "message": error.message}, status=http_status)


def get_service() -> PricingService:
    return PricingService(DjangoPricingStore())


class TicketTypePricingView(APIView):
    """Handler for GET /api/ticket-types/{ticket_type_id}/pricing"""

    def get(self, request: Request, ticket_type_id: str) -> Response:
        service = get_service()
        try:
            ticket_type, current, next_change = service.get_pricing(ticket_type_id)
        except DomainError as exc:
            return error_response(exc)

        breakdown = service.price_breakdown(ticket_type, current)
        return Response(
            {
                "ticket_type_id": str(ticket_type.id),
                "name": ticket_type.name,
                "currency": ticket_type.currency,
                "base_price": str(ticket_type.price.amount),
                "price": str(current.price),
                "tier_name": current.tier_name,
                "is_early_bird": current.is_early_bird,
                "is_premium": current.is_premium,
                "next_change": (
                    NextChangeSerializer(next_change).data
                    if next_change.next_tier is not None
                    else None
                ),
                "breakdown": PriceBreakdownSerializer(breakdown).data,
            }
        )


class QuoteView(APIView):
    """Handler for POST /api/ticket-types/{ticket_type_id}/quote"""

    def post(self, request: Request, ticket_type_id: str) -> Response:
        serializer = QuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            quote = get_service().quote_order(
                ticket_type_id,
                serializer.validated_data["quantity"],
                serializer.validated_data.get("promo_code") or None,
            )
        except DomainError as exc:
            logger.info("Quote rejected for ticket type %s: %s", ticket_type_id, exc)
            return error_response(exc)

        return Response(QuoteSerializer(quote).data)


class DefaultPriceTiersView(APIView):
    """Handler for POST /api/price-tiers/defaults"""

    def post(self, request: Request) -> Response:
        serializer = DefaultTiersRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        tiers = get_service().default_tiers(
            data["base_price"],
            data.get("currency") or pricing_settings().default_currency,
            data["event_start"],
        )
        return Response({"tiers": PriceTierSerializer(tiers, many=True).data})
