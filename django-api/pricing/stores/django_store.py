"""Django ORM implementation of the PricingStore."""

import logging

from django.core.cache import cache

from pricing import models
from pricing.conf import pricing_settings
from pricing.domain import (
    Money,
    PriceTier,
    PriceTierId,
    PromoCode,
    PromoCodeKind,
    PromoCodeStatus,
    TicketType,
    TicketTypeId,
)
from pricing.domain.promo_codes import normalize_code
from pricing.stores.interfaces import PricingStore

logger = logging.getLogger(__name__)


def ticket_type_cache_key(ticket_type_id: object) -> str:
    return f"ticket_types:{ticket_type_id}"


def to_domain_tier(row: models.PriceTier) -> PriceTier:
    return PriceTier(
        id=PriceTierId(row.id),
        ticket_type_id=TicketTypeId(row.ticket_type_id),
        name=row.name,
        price=Money(row.price),
        currency=row.currency,
        start_date=row.start_date,
        end_date=row.end_date,
        is_active=row.is_active,
    )


def to_domain_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        name=row.name,
        price=Money(row.price),
        currency=row.currency,
        price_tiers=tuple(to_domain_tier(tier) for tier in row.price_tiers.all()),
        commission_rate=row.commission_rate,
    )


def to_domain_promo_code(row: models.PromoCode) -> PromoCode:
    return PromoCode(
        code=row.code,
        name=row.name,
        kind=PromoCodeKind(row.kind),
        value=row.value,
        status=PromoCodeStatus(row.status),
        valid_from=row.valid_from,
        valid_until=row.valid_until,
        usage_limit=row.usage_limit,
        used_count=row.used_count,
        max_discount_amount=row.max_discount_amount,
        min_order_amount=row.min_order_amount,
        ticket_type_id=(
            TicketTypeId(row.ticket_type_id) if row.ticket_type_id else None
        ),
    )


class DjangoPricingStore(PricingStore):
    """Database-backed pricing store using Django ORM.

    Ticket type snapshots are cached; signals drop the entry when the ticket
    type or any of its tiers change.
    """

    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        key = ticket_type_cache_key(ticket_type_id)
        cached = cache.get(key)
        if cached is not None:
            return cached

        row = (
            models.TicketType.objects.prefetch_related("price_tiers")
            .filter(id=ticket_type_id.value)
            .first()
        )
        if row is None:
            return None

        ticket_type = to_domain_ticket_type(row)
        cache.set(key, ticket_type, pricing_settings().cache_timeout)
        logger.debug("Cached ticket type %s with %d tiers", ticket_type_id, len(ticket_type.price_tiers))
        return ticket_type

    def get_promo_code(self, code: str) -> PromoCode | None:
        row = models.PromoCode.objects.filter(code=normalize_code(code)).first()
        if row is None:
            return None
        return to_domain_promo_code(row)
