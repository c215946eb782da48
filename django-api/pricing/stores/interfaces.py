"""Store interfaces (repository pattern).

Stores must be swappable and return immutable domain snapshots.
"""

from abc import ABC, abstractmethod

from pricing.domain import PromoCode, TicketType, TicketTypeId


class PricingStore(ABC):
    """Interface for loading pricing inputs."""

    @abstractmethod
    def get_ticket_type(self, ticket_type_id: TicketTypeId) -> TicketType | None:
        """Return a ticket type with its price tiers, or None if not found."""
        ...

    @abstractmethod
    def get_promo_code(self, code: str) -> PromoCode | None:
        """Return a promo code by its (case-insensitive) code, or None."""
        ...
