"""Django signals for cache invalidation."""

import logging

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from pricing.models import PriceTier, TicketType
from pricing.stores.django_store import ticket_type_cache_key

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=TicketType)
def invalidate_ticket_type_cache(sender, instance, **kwargs):
    """Invalidate the cached snapshot when a ticket type is saved or deleted."""
    cache.delete(ticket_type_cache_key(instance.pk))
    logger.debug("Invalidated pricing cache for ticket type %s", instance.pk)


@receiver([post_save, post_delete], sender=PriceTier)
def invalidate_price_tier_cache(sender, instance, **kwargs):
    """Invalidate the owning ticket type's snapshot when a tier changes."""
    cache.delete(ticket_type_cache_key(instance.ticket_type_id))
    logger.debug("Invalidated pricing cache for ticket type %s", instance.ticket_type_id)
