"""Unit tests for Spanish display formatting.

Run with: pytest tests/test_formatting.py -v
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from pricing.domain import FixedAmount, Percentage
from pricing.domain.formatting import describe_discount, format_price, format_time_until_change


class TestFormatTimeUntilChange:
    """Tests for format_time_until_change."""

    def test_one_day_is_singular(self):
        assert "1 día" in format_time_until_change(timedelta(hours=24))
        assert "días" not in format_time_until_change(timedelta(hours=24))

    def test_two_days_is_plural(self):
        assert "2 días" in format_time_until_change(timedelta(hours=48))

    def test_just_under_a_day_is_hours(self):
        assert format_time_until_change(timedelta(hours=23, minutes=59)) == "23 horas"

    def test_one_hour_is_singular(self):
        assert format_time_until_change(timedelta(hours=1, minutes=30)) == "1 hora"

    def test_just_under_an_hour_is_minutes(self):
        assert format_time_until_change(timedelta(minutes=59, seconds=59)) == "59 minutos"

    def test_one_minute_is_singular(self):
        assert format_time_until_change(timedelta(minutes=1)) == "1 minuto"

    def test_zero_and_negative_durations(self):
        assert format_time_until_change(timedelta(0)) == "0 minutos"
        assert format_time_until_change(timedelta(minutes=-5)) == "0 minutos"

    def test_largest_unit_only(self):
        assert format_time_until_change(timedelta(days=3, hours=5)) == "3 días"


class TestFormatPrice:
    """Tests for format_price."""

    def test_zero_is_free(self):
        assert format_price(0) == "Gratis"

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (500, "$500"),
            (10000, "$10.000"),
            (Decimal("1234567"), "$1.234.567"),
            (Decimal("10600.4"), "$10.600"),
        ],
    )
    def test_clp_uses_dot_thousands(self, amount, expected):
        assert format_price(amount, "CLP") == expected

    def test_two_decimal_currency(self):
        assert format_price(Decimal("1234.5"), "USD") == "$1.234,50"

    def test_negative_sign_precedes_symbol(self):
        assert format_price(-1234) == "-$1.234"
        assert format_price(Decimal("-1234.5"), "USD") == "-$1.234,50"


class TestDescribeDiscount:
    """Tests for describe_discount."""

    def test_percentage(self):
        assert describe_discount(Percentage(Decimal("20.00"))) == "20% de descuento"

    def test_fixed_amount(self):
        assert describe_discount(FixedAmount(Decimal(1000))) == "$1.000 de descuento"

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            describe_discount("20%")
