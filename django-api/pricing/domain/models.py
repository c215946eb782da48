"""Domain models representing pricing state.

These are immutable snapshots handed to the pricing core.
Django ORM models are in pricing/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum

from pricing.domain.value_objects import (
    Discount,
    FixedAmount,
    Money,
    Percentage,
    PriceTierId,
    TicketTypeId,
)


@dataclass(frozen=True)
class PriceTier:
    """Time-bounded override of a ticket type's price.

    ``id`` and ``ticket_type_id`` are None for drafts that have not been saved.
    """

    name: str
    price: Money
    currency: str
    start_date: datetime
    end_date: datetime | None = None
    is_active: bool = True
    id: PriceTierId | None = None
    ticket_type_id: TicketTypeId | None = None

    def is_live_at(self, now: datetime) -> bool:
        if not self.is_active or self.start_date > now:
            return False
        return self.end_date is None or self.end_date >= now


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType with its price tiers."""

    id: TicketTypeId
    name: str
    price: Money
    currency: str
    price_tiers: tuple[PriceTier, ...] = ()
    commission_rate: Decimal | None = None


@dataclass(frozen=True)
class PricingResult:
    price: Decimal
    tier_name: str | None = None
    is_early_bird: bool = False
    is_premium: bool = False


@dataclass(frozen=True)
class NextChangeResult:
    next_tier: PriceTier | None = None
    time_until_change: timedelta | None = None


@dataclass(frozen=True)
class OrderTotal:
    base_amount: Decimal
    commission_amount: Decimal
    total_amount: Decimal
    currency: str


@dataclass(frozen=True)
class PriceBreakdown:
    """Amounts shown at checkout, before and after a discount."""

    original_amount: Decimal
    discount_amount: Decimal
    base_price: Decimal
    commission: Decimal
    total_price: Decimal
    currency: str


class PromoCodeKind(Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"
    FREE = "FREE"


class PromoCodeStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    EXPIRED = "EXPIRED"


@dataclass(frozen=True)
class PromoCode:
    """Domain representation of a promotional code."""

    code: str
    name: str
    kind: PromoCodeKind
    value: Decimal
    valid_from: datetime
    status: PromoCodeStatus = PromoCodeStatus.ACTIVE
    valid_until: datetime | None = None
    usage_limit: int | None = None
    used_count: int = 0
    max_discount_amount: Decimal | None = None
    min_order_amount: Decimal | None = None
    ticket_type_id: TicketTypeId | None = None

    @property
    def discount(self) -> Discount:
        match self.kind:
            case PromoCodeKind.PERCENTAGE:
                return Percentage(self.value)
            case PromoCodeKind.FIXED_AMOUNT:
                return FixedAmount(self.value)
            case PromoCodeKind.FREE:
                return Percentage(Decimal(100))
        raise TypeError(f"Unknown promo code kind: {self.kind!r}")

    @property
    def discount_cap(self) -> Decimal | None:
        """Per-ticket cap on the discount. Only percentage codes are capped."""
        if self.kind is PromoCodeKind.PERCENTAGE:
            return self.max_discount_amount
        return None


@dataclass(frozen=True)
class Quote:
    """Priced order for a single ticket type."""

    ticket_type_id: TicketTypeId
    quantity: int
    unit_price: Decimal
    tier_name: str | None
    promo_code: str | None
    discount_amount: Decimal
    order: OrderTotal
