"""Serializers for request validation and pricing responses."""

from decimal import Decimal

from rest_framework import serializers

from pricing.domain.formatting import format_price, format_time_until_change


class PriceTierSerializer(serializers.Serializer):
    """Serializer for PriceTier domain model."""

    id = serializers.SerializerMethodField()
    name = serializers.CharField()
    price = serializers.SerializerMethodField()
    currency = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField(allow_null=True)
    is_active = serializers.BooleanField()

    def get_id(self, tier) -> str | None:
        return None if tier.id is None else str(tier.id)

    def get_price(self, tier) -> str:
        return str(tier.price.amount)


class NextChangeSerializer(serializers.Serializer):
    """Serializer for NextChangeResult; only used when a change is scheduled."""

    tier = PriceTierSerializer(source="next_tier")
    seconds_until_change = serializers.SerializerMethodField()
    display = serializers.SerializerMethodField()

    def get_seconds_until_change(self, result) -> int:
        return int(result.time_until_change.total_seconds())

    def get_display(self, result) -> str:
        return format_time_until_change(result.time_until_change)


class PriceBreakdownSerializer(serializers.Serializer):
    base_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    commission = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    display_total = serializers.SerializerMethodField()

    def get_display_total(self, breakdown) -> str:
        return format_price(breakdown.total_price, breakdown.currency)


class OrderTotalSerializer(serializers.Serializer):
    base_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    commission_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    currency = serializers.CharField()


class QuoteSerializer(serializers.Serializer):
    ticket_type_id = serializers.CharField()
    quantity = serializers.IntegerField()
    unit_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    tier_name = serializers.CharField(allow_null=True)
    promo_code = serializers.CharField(allow_null=True)
    discount_amount = serializers.DecimalField(max_digits=14, decimal_places=2)
    order = OrderTotalSerializer()


class QuoteRequestSerializer(serializers.Serializer):
    quantity = serializers.IntegerField()
    promo_code = serializers.CharField(required=False, allow_blank=True, max_length=50)


class DefaultTiersRequestSerializer(serializers.Serializer):
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal(0))
    currency = serializers.CharField(min_length=3, max_length=3, required=False)
    event_start = serializers.DateTimeField()
