"""Integration tests for the pricing HTTP API.

Run with: pytest tests/test_pricing_api.py -v
"""

from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from pricing.models import PriceTier, PromoCode, TicketType


@pytest.fixture
def ticket_type() -> TicketType:
    return TicketType.objects.create(name="General", price=Decimal("10000"), currency="CLP")


def add_tier(ticket_type: TicketType, price, start: timedelta, end: timedelta | None = None, **kwargs):
    now = timezone.now()
    return PriceTier.objects.create(
        ticket_type=ticket_type,
        name=kwargs.pop("name", "Tier"),
        price=Decimal(price),
        currency=ticket_type.currency,
        start_date=now + start,
        end_date=None if end is None else now + end,
        **kwargs,
    )


@pytest.mark.django_db
class TestTicketTypePricing:
    """Tests for GET /api/ticket-types/{id}/pricing"""

    def test_base_price_without_tiers(self, api_client: APIClient, ticket_type: TicketType):
        response = api_client.get(f"/api/ticket-types/{ticket_type.id}/pricing")

        assert response.status_code == 200
        body = response.json()
        assert Decimal(body["price"]) == Decimal(10000)
        assert body["tier_name"] is None
        assert body["is_early_bird"] is False
        assert body["is_premium"] is False
        assert body["next_change"] is None
        assert Decimal(body["breakdown"]["commission"]) == Decimal(600)
        assert body["breakdown"]["display_total"] == "$10.600"

    def test_active_early_bird_with_upcoming_change(self, api_client: APIClient, ticket_type: TicketType):
        add_tier(ticket_type, 8000, timedelta(days=-5), timedelta(days=2), name="Early Bird")
        add_tier(ticket_type, 12000, timedelta(days=2, minutes=5), name="Last Minute")

        body = api_client.get(f"/api/ticket-types/{ticket_type.id}/pricing").json()

        assert Decimal(body["price"]) == Decimal(8000)
        assert body["tier_name"] == "Early Bird"
        assert body["is_early_bird"] is True
        assert body["next_change"]["tier"]["name"] == "Last Minute"
        assert body["next_change"]["display"] == "2 días"
        assert body["next_change"]["seconds_until_change"] > 0

    def test_inactive_tier_is_ignored(self, api_client: APIClient, ticket_type: TicketType):
        add_tier(ticket_type, 8000, timedelta(days=-1), is_active=False)

        body = api_client.get(f"/api/ticket-types/{ticket_type.id}/pricing").json()

        assert Decimal(body["price"]) == Decimal(10000)

    def test_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/ticket-types/{uuid4()}/pricing")

        assert response.status_code == 404
        assert response.json() == {"code": "TICKET_TYPE_NOT_FOUND", "message": "Ticket type not found"}

    def test_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/ticket-types/not-a-uuid/pricing")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TICKET_TYPE_ID"


@pytest.mark.django_db
class TestQuote:
    """Tests for POST /api/ticket-types/{id}/quote"""

    def test_quote_without_promo(self, api_client: APIClient, ticket_type: TicketType):
        response = api_client.post(
            f"/api/ticket-types/{ticket_type.id}/quote", {"quantity": 3}, format="json"
        )

        assert response.status_code == 200
        order = response.json()["order"]
        assert Decimal(order["base_amount"]) == Decimal(30000)
        assert Decimal(order["commission_amount"]) == Decimal(1800)
        assert Decimal(order["total_amount"]) == Decimal(31800)

    def test_quote_with_promo(self, api_client: APIClient, ticket_type: TicketType):
        PromoCode.objects.create(
            code="verano20",
            name="Verano",
            kind=PromoCode.Kind.PERCENTAGE,
            value=Decimal(20),
            valid_from=timezone.now() - timedelta(days=1),
        )

        response = api_client.post(
            f"/api/ticket-types/{ticket_type.id}/quote",
            {"quantity": 1, "promo_code": "Verano20"},
            format="json",
        )

        assert response.status_code == 200
        body = response.json()
        assert body["promo_code"] == "VERANO20"
        assert Decimal(body["discount_amount"]) == Decimal(2000)
        assert Decimal(body["order"]["total_amount"]) == Decimal(8480)

    def test_expired_promo_is_unprocessable(self, api_client: APIClient, ticket_type: TicketType):
        PromoCode.objects.create(
            code="VIEJO",
            name="Viejo",
            kind=PromoCode.Kind.FIXED_AMOUNT,
            value=Decimal(1000),
            valid_from=timezone.now() - timedelta(days=10),
            valid_until=timezone.now() - timedelta(days=1),
        )

        response = api_client.post(
            f"/api/ticket-types/{ticket_type.id}/quote",
            {"quantity": 1, "promo_code": "VIEJO"},
            format="json",
        )

        assert response.status_code == 422
        assert response.json()["code"] == "PROMO_CODE_EXPIRED"

    def test_unknown_promo_is_not_found(self, api_client: APIClient, ticket_type: TicketType):
        response = api_client.post(
            f"/api/ticket-types/{ticket_type.id}/quote",
            {"quantity": 1, "promo_code": "NOEXISTE"},
            format="json",
        )

        assert response.status_code == 404
        assert response.json()["code"] == "PROMO_CODE_NOT_FOUND"

    def test_zero_quantity_is_bad_request(self, api_client: APIClient, ticket_type: TicketType):
        response = api_client.post(
            f"/api/ticket-types/{ticket_type.id}/quote", {"quantity": 0}, format="json"
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_QUANTITY"

    def test_missing_quantity_is_bad_request(self, api_client: APIClient, ticket_type: TicketType):
        response = api_client.post(f"/api/ticket-types/{ticket_type.id}/quote", {}, format="json")

        assert response.status_code == 400


@pytest.mark.django_db
class TestDefaultPriceTiers:
    """Tests for POST /api/price-tiers/defaults"""

    def test_generates_three_tiers(self, api_client: APIClient):
        event_start = timezone.now() + timedelta(days=60)

        response = api_client.post(
            "/api/price-tiers/defaults",
            {"base_price": "10000", "currency": "clp", "event_start": event_start.isoformat()},
            format="json",
        )

        assert response.status_code == 200
        tiers = response.json()["tiers"]
        assert [tier["name"] for tier in tiers] == ["Early Bird", "Precio Regular", "Last Minute"]
        assert [Decimal(tier["price"]) for tier in tiers] == [Decimal(8000), Decimal(10000), Decimal(12500)]
        assert all(tier["id"] is None for tier in tiers)
        assert all(tier["currency"] == "CLP" for tier in tiers)

    def test_currency_defaults_from_settings(self, api_client: APIClient):
        event_start = timezone.now() + timedelta(days=60)

        response = api_client.post(
            "/api/price-tiers/defaults",
            {"base_price": "5000", "event_start": event_start.isoformat()},
            format="json",
        )

        assert response.status_code == 200
        assert response.json()["tiers"][0]["currency"] == "CLP"

    def test_rejects_unparseable_date(self, api_client: APIClient):
        response = api_client.post(
            "/api/price-tiers/defaults",
            {"base_price": "10000", "event_start": "mañana"},
            format="json",
        )

        assert response.status_code == 400
        assert "event_start" in response.json()

    def test_rejects_negative_price(self, api_client: APIClient):
        response = api_client.post(
            "/api/price-tiers/defaults",
            {"base_price": "-1", "event_start": timezone.now().isoformat()},
            format="json",
        )

        assert response.status_code == 400
