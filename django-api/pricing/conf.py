"""Access to the TICKET_PRICING settings block with defaults applied."""

from dataclasses import dataclass
from decimal import Decimal

from django.conf import settings

from pricing.domain import CommissionRate

DEFAULTS = {
    "COMMISSION_RATE": "0.06",
    "DEFAULT_CURRENCY": "CLP",
    "CACHE_TIMEOUT": 300,
}


@dataclass(frozen=True)
class PricingSettings:
    commission_rate: Decimal
    default_currency: str
    cache_timeout: int


def pricing_settings() -> PricingSettings:
    values = {**DEFAULTS, **getattr(settings, "TICKET_PRICING", {})}
    return PricingSettings(
        commission_rate=CommissionRate(Decimal(str(values["COMMISSION_RATE"]))).value,
        default_currency=str(values["DEFAULT_CURRENCY"]).upper(),
        cache_timeout=int(values["CACHE_TIMEOUT"]),
    )
