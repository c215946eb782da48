from django.contrib import admin

from pricing.models import PriceTier, PromoCode, TicketType


class PriceTierInline(admin.TabularInline):
    model = PriceTier
    extra = 1


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name", "price", "currency", "commission_rate", "created_at"]
    search_fields = ["name"]
    inlines = [PriceTierInline]


@admin.register(PriceTier)
class PriceTierAdmin(admin.ModelAdmin):
    list_display = ["name", "ticket_type", "price", "start_date", "end_date", "is_active"]
    list_filter = ["is_active", "ticket_type"]


@admin.register(PromoCode)
class PromoCodeAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "kind", "value", "status", "used_count", "usage_limit"]
    list_filter = ["kind", "status"]
    search_fields = ["code", "name"]
