"""Rules deciding whether a promo code can be applied to an order."""

from datetime import datetime
from decimal import Decimal

from pricing.domain.errors import (
    MinimumOrderNotMetError,
    PromoCodeExpiredError,
    PromoCodeInactiveError,
    PromoCodeNotApplicableError,
    PromoCodeNotYetValidError,
    PromoCodeUsageLimitError,
)
from pricing.domain.models import PromoCode, PromoCodeStatus
from pricing.domain.value_objects import TicketTypeId


def normalize_code(code: str) -> str:
    return code.strip().upper()


def check_promo_code(
    promo: PromoCode,
    ticket_type_id: TicketTypeId,
    unit_price: Decimal,
    quantity: int,
    now: datetime,
) -> None:
    """Raise a PromoCodeError if ``promo`` cannot be used for this order."""
    if promo.status is not PromoCodeStatus.ACTIVE:
        raise PromoCodeInactiveError()
    if promo.valid_from > now:
        raise PromoCodeNotYetValidError()
    if promo.valid_until is not None and promo.valid_until < now:
        raise PromoCodeExpiredError()
    if promo.usage_limit is not None and promo.used_count >= promo.usage_limit:
        raise PromoCodeUsageLimitError()
    if promo.ticket_type_id is not None and promo.ticket_type_id != ticket_type_id:
        raise PromoCodeNotApplicableError()
    if promo.min_order_amount is not None and unit_price * quantity < promo.min_order_amount:
        raise MinimumOrderNotMetError(promo.min_order_amount)
