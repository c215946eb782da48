"""Pricing service - orchestration around the pure pricing core.

Services:
- Depend only on interfaces (stores)
- Supply the wall-clock instant the domain functions require
- Validate inputs and map failures to domain errors
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal

from django.utils import timezone

from pricing.conf import pricing_settings
from pricing.domain import (
    NextChangeResult,
    PriceBreakdown,
    PriceTier,
    PricingResult,
    Quantity,
    Quote,
    TicketType,
    TicketTypeId,
)
from pricing.domain.discounts import (
    calculate_discount,
    calculate_order_total,
    calculate_price_breakdown,
)
from pricing.domain.errors import (
    InvalidQuantityError,
    InvalidTicketTypeIdError,
    PromoCodeNotFoundError,
    TicketTypeNotFoundError,
)
from pricing.domain.promo_codes import check_promo_code, normalize_code
from pricing.domain.tiers import (
    create_default_price_tiers,
    next_price_change,
    resolve_current_price,
)
from pricing.stores.interfaces import PricingStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class PricingService:
    """Service for ticket pricing and order quotes."""

    def __init__(
        self,
        store: PricingStore,
        clock: Clock = timezone.now,
        default_commission_rate: Decimal | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._default_commission_rate = default_commission_rate

    @property
    def default_commission_rate(self) -> Decimal:
        if self._default_commission_rate is None:
            return pricing_settings().commission_rate
        return self._default_commission_rate

    def commission_rate_for(self, ticket_type: TicketType) -> Decimal:
        """Ticket level rate when set, platform default otherwise."""
        if ticket_type.commission_rate is not None:
            return ticket_type.commission_rate
        return self.default_commission_rate

    def get_ticket_type(self, ticket_type_id: str) -> TicketType:
        """Return a ticket type by ID.

        Raises:
            InvalidTicketTypeIdError: If the ID is not a valid UUID.
            TicketTypeNotFoundError: If the ticket type does not exist.
        """
        try:
            parsed = TicketTypeId.from_string(ticket_type_id)
        except ValueError as exc:
            raise InvalidTicketTypeIdError() from exc

        ticket_type = self._store.get_ticket_type(parsed)
        if ticket_type is None:
            raise TicketTypeNotFoundError(ticket_type_id)
        return ticket_type

    def get_pricing(
        self, ticket_type_id: str
    ) -> tuple[TicketType, PricingResult, NextChangeResult]:
        """Return the ticket type with its current price and next scheduled change."""
        ticket_type = self.get_ticket_type(ticket_type_id)
        now = self._clock()
        return (
            ticket_type,
            resolve_current_price(ticket_type, now),
            next_price_change(ticket_type, now),
        )

    def price_breakdown(
        self, ticket_type: TicketType, pricing: PricingResult
    ) -> PriceBreakdown:
        """Return what a single ticket costs at checkout at the resolved price."""
        return calculate_price_breakdown(
            pricing.price, self.commission_rate_for(ticket_type), ticket_type.currency
        )

    def quote_order(
        self,
        ticket_type_id: str,
        quantity: int,
        promo_code: str | None = None,
    ) -> Quote:
        """Price an order at the current tier, optionally with a promo code.

        Raises:
            InvalidQuantityError: If quantity is below one.
            PromoCodeNotFoundError: If the promo code does not exist.
            PromoCodeError: If the promo code cannot be applied.
        """
        try:
            Quantity(quantity)
        except ValueError as exc:
            raise InvalidQuantityError(quantity) from exc

        ticket_type = self.get_ticket_type(ticket_type_id)
        now = self._clock()
        unit_price = resolve_current_price(ticket_type, now)

        applied_code = None
        discount_per_ticket = Decimal(0)
        discounted_unit_price = unit_price.price
        if promo_code:
            promo = self._store.get_promo_code(promo_code)
            if promo is None:
                raise PromoCodeNotFoundError(normalize_code(promo_code))
            check_promo_code(promo, ticket_type.id, unit_price.price, quantity, now)
            discount_per_ticket, discounted_unit_price = calculate_discount(
                unit_price.price,
                promo.discount,
                promo.discount_cap,
                ticket_type.currency,
            )
            applied_code = promo.code
            logger.info(
                "Applied promo %s to ticket type %s: %s off per ticket",
                promo.code,
                ticket_type.id,
                discount_per_ticket,
            )

        order = calculate_order_total(
            discounted_unit_price,
            quantity,
            self.commission_rate_for(ticket_type),
            ticket_type.currency,
        )
        return Quote(
            ticket_type_id=ticket_type.id,
            quantity=quantity,
            unit_price=unit_price.price,
            tier_name=unit_price.tier_name,
            promo_code=applied_code,
            discount_amount=discount_per_ticket * quantity,
            order=order,
        )

    def default_tiers(
        self, base_price: Decimal, currency: str, event_start: datetime
    ) -> list[PriceTier]:
        """Return draft early bird / regular / last minute tiers for an event."""
        return create_default_price_tiers(
            base_price, currency.upper(), event_start, now=self._clock()
        )
