from pricing.domain.models import (
    NextChangeResult,
    OrderTotal,
    PriceBreakdown,
    PriceTier,
    PricingResult,
    PromoCode,
    PromoCodeKind,
    PromoCodeStatus,
    Quote,
    TicketType,
)
from pricing.domain.value_objects import (
    CommissionRate,
    Discount,
    FixedAmount,
    Money,
    Percentage,
    PriceTierId,
    Quantity,
    TicketTypeId,
)

__all__ = [
    "PriceTier",
    "TicketType",
    "PricingResult",
    "NextChangeResult",
    "OrderTotal",
    "PriceBreakdown",
    "PromoCode",
    "PromoCodeKind",
    "PromoCodeStatus",
    "Quote",
    "TicketTypeId",
    "PriceTierId",
    "Money",
    "CommissionRate",
    "Quantity",
    "Discount",
    "Percentage",
    "FixedAmount",
]
