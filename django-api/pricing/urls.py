from django.urls import path

from pricing.handlers import DefaultPriceTiersView, QuoteView, TicketTypePricingView

urlpatterns = [
    path(
        "ticket-types/<str:ticket_type_id>/pricing",
        TicketTypePricingView.as_view(),
        name="ticket-type-pricing",
    ),
    path(
        "ticket-types/<str:ticket_type_id>/quote",
        QuoteView.as_view(),
        name="ticket-type-quote",
    ),
    path("price-tiers/defaults", DefaultPriceTiersView.as_view(), name="price-tier-defaults"),
]
