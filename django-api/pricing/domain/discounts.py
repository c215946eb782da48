"""Discount application and order totals.

Out-of-range numbers never raise here: negative inputs pass through and
results are clamped. The only failure is a discount descriptor that is not
one of the known variants.
"""

from decimal import Decimal

from pricing.domain.models import OrderTotal, PriceBreakdown
from pricing.domain.value_objects import (
    Discount,
    FixedAmount,
    Percentage,
    round_amount,
    to_decimal,
)

ZERO = Decimal(0)
HUNDRED = Decimal(100)
DEFAULT_CURRENCY = "CLP"


def apply_discount(original_amount: Decimal | int, discount: Discount) -> Decimal:
    """Return ``original_amount`` reduced by ``discount``, never below zero.

    Negative amounts or discount values are returned untouched.
    """
    amount = to_decimal(original_amount)
    match discount:
        case Percentage(value=value) | FixedAmount(value=value):
            value = to_decimal(value)
        case _:
            raise TypeError(f"Unsupported discount type: {type(discount).__name__}")

    if amount < 0 or value < 0:
        return amount

    if isinstance(discount, Percentage):
        discounted = amount - amount * min(value, HUNDRED) / HUNDRED
    else:
        discounted = amount - value
    return max(ZERO, discounted)


def calculate_discount(
    base_amount: Decimal | int,
    discount: Discount,
    max_discount_amount: Decimal | int | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> tuple[Decimal, Decimal]:
    """Return ``(discount_amount, final_amount)`` for a promo applied to ``base_amount``.

    The discount is capped by ``max_discount_amount`` when given and never
    exceeds the base amount. Both figures are rounded to the currency's
    minor unit.
    """
    base = to_decimal(base_amount)
    discount_amount = base - apply_discount(base, discount)
    if max_discount_amount is not None:
        discount_amount = min(discount_amount, to_decimal(max_discount_amount))
    discount_amount = max(ZERO, min(discount_amount, base))
    final_amount = max(ZERO, base - discount_amount)
    return round_amount(discount_amount, currency), round_amount(final_amount, currency)


def calculate_order_total(
    base_price: Decimal | int,
    quantity: int,
    commission_rate: Decimal | float,
    currency: str = DEFAULT_CURRENCY,
) -> OrderTotal:
    """Return base, commission and total amounts for an order.

    Commission is rounded half-up to the currency's minor unit. Free tickets
    never carry commission.
    """
    price = to_decimal(base_price)
    if price == 0:
        return OrderTotal(ZERO, ZERO, ZERO, currency)

    base_amount = price * quantity
    commission_amount = round_amount(base_amount * to_decimal(commission_rate), currency)
    return OrderTotal(
        base_amount=base_amount,
        commission_amount=commission_amount,
        total_amount=base_amount + commission_amount,
        currency=currency,
    )


def calculate_price_breakdown(
    base_price: Decimal | int,
    commission_rate: Decimal | float,
    currency: str = DEFAULT_CURRENCY,
    discount_amount: Decimal | int = 0,
) -> PriceBreakdown:
    original = to_decimal(base_price)
    discount = to_decimal(discount_amount)
    discounted = max(ZERO, original - discount)
    if discounted == 0:
        return PriceBreakdown(original, discount, ZERO, ZERO, ZERO, currency)

    commission = round_amount(discounted * to_decimal(commission_rate), currency)
    return PriceBreakdown(
        original_amount=original,
        discount_amount=discount,
        base_price=discounted,
        commission=commission,
        total_price=discounted + commission,
        currency=currency,
    )


def base_price_from_total(
    total_price: Decimal | int,
    commission_rate: Decimal | float,
    currency: str = DEFAULT_CURRENCY,
) -> Decimal:
    """Invert the commission markup on a total that already includes it."""
    total = to_decimal(total_price)
    if total == 0:
        return ZERO
    return round_amount(total / (1 + to_decimal(commission_rate)), currency)
