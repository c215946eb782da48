"""Time-based price tier resolution.

Every function here is pure: callers pass the reference instant explicitly
and tiers are never mutated.
"""

from datetime import datetime, timedelta
from decimal import Decimal

from pricing.domain.models import NextChangeResult, PriceTier, PricingResult, TicketType
from pricing.domain.value_objects import Money, round_amount, to_decimal

EARLY_BIRD_NAME = "Early Bird"
REGULAR_NAME = "Precio Regular"
LAST_MINUTE_NAME = "Last Minute"

EARLY_BIRD_LEAD = timedelta(days=30)
REGULAR_LEAD = timedelta(days=7)
LAST_MINUTE_LEAD = timedelta(days=1)

EARLY_BIRD_FACTOR = Decimal("0.80")
LAST_MINUTE_FACTOR = Decimal("1.25")

# Tier end dates are inclusive, so a tier stops one tick before the next starts.
TIER_HANDOFF = timedelta(microseconds=1)


def _tier_key(tier: PriceTier) -> tuple[datetime, str]:
    return tier.start_date, "" if tier.id is None else str(tier.id)


def resolve_current_price(ticket_type: TicketType, now: datetime) -> PricingResult:
    """Return the price in effect at ``now``.

    Overlapping tiers are tolerated: the one that started most recently wins,
    with the tier id as a final tie-break.
    """
    live = [tier for tier in ticket_type.price_tiers if tier.is_live_at(now)]
    if not live:
        return PricingResult(price=ticket_type.price.amount)

    current = max(live, key=_tier_key)
    base = ticket_type.price.amount
    return PricingResult(
        price=current.price.amount,
        tier_name=current.name,
        is_early_bird=current.price.amount < base,
        is_premium=current.price.amount > base,
    )


def next_price_change(ticket_type: TicketType, now: datetime) -> NextChangeResult:
    """Return the soonest active tier that has not started yet."""
    upcoming = [
        tier
        for tier in ticket_type.price_tiers
        if tier.is_active and tier.start_date > now
    ]
    if not upcoming:
        return NextChangeResult()

    next_tier = min(upcoming, key=_tier_key)
    return NextChangeResult(
        next_tier=next_tier,
        time_until_change=next_tier.start_date - now,
    )


def create_default_price_tiers(
    base_price: Decimal | int,
    currency: str,
    event_start: datetime,
    now: datetime | None = None,
) -> list[PriceTier]:
    """Build the early bird / regular / last minute drafts for an event.

    The tiers are chronological, do not overlap and the last one ends when
    the event starts. When ``now`` is earlier than the early bird window the
    early bird opens immediately.
    """
    base = to_decimal(base_price)
    early_start = event_start - EARLY_BIRD_LEAD
    if now is not None and now < early_start:
        early_start = now
    regular_start = event_start - REGULAR_LEAD
    last_minute_start = event_start - LAST_MINUTE_LEAD

    return [
        PriceTier(
            name=EARLY_BIRD_NAME,
            price=Money(round_amount(base * EARLY_BIRD_FACTOR, currency)),
            currency=currency,
            start_date=early_start,
            end_date=regular_start - TIER_HANDOFF,
        ),
        PriceTier(
            name=REGULAR_NAME,
            price=Money(round_amount(base, currency)),
            currency=currency,
            start_date=regular_start,
            end_date=last_minute_start - TIER_HANDOFF,
        ),
        PriceTier(
            name=LAST_MINUTE_NAME,
            price=Money(round_amount(base * LAST_MINUTE_FACTOR, currency)),
            currency=currency,
            start_date=last_minute_start,
            end_date=event_start,
        ),
    ]
