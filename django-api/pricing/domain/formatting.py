"""Spanish (es-CL) display strings for prices, discounts and countdowns."""

from datetime import timedelta
from decimal import Decimal

from pricing.domain.value_objects import (
    Discount,
    FixedAmount,
    Percentage,
    minor_units,
    round_amount,
    to_decimal,
)

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

FREE_LABEL = "Gratis"


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_time_until_change(duration: timedelta) -> str:
    """Render a countdown in its largest whole unit, e.g. ``"2 días"``."""
    seconds = max(0, int(duration.total_seconds()))
    days = seconds // SECONDS_PER_DAY
    if days > 0:
        return _plural(days, "día", "días")
    hours = seconds // SECONDS_PER_HOUR
    if hours > 0:
        return _plural(hours, "hora", "horas")
    return _plural(seconds // SECONDS_PER_MINUTE, "minuto", "minutos")


def _group_thousands(amount: Decimal, places: int) -> str:
    text = f"{amount:,.{places}f}"
    # Python groups with "," and uses "." for decimals; es-CL is the reverse.
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_price(amount: Decimal | int, currency: str = "CLP") -> str:
    value = to_decimal(amount)
    if value == 0:
        return FREE_LABEL
    places = minor_units(currency)
    rounded = round_amount(value, currency)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${_group_thousands(abs(rounded), places)}"


def describe_discount(discount: Discount) -> str:
    match discount:
        case Percentage(value=value):
            return f"{to_decimal(value).normalize():f}% de descuento"
        case FixedAmount(value=value):
            return f"{format_price(value)} de descuento"
    raise TypeError(f"Unsupported discount type: {type(discount).__name__}")
