from pricing.handlers.views import DefaultPriceTiersView, QuoteView, TicketTypePricingView

__all__ = ["TicketTypePricingView", "QuoteView", "DefaultPriceTiersView"]
