from django.contrib import admin
from .models import Shipment, ShipmentEvent


@admin.register(Shipment)
class ShipmentAdmin(admin.ModelAdmin):
    list_display  = ("tracking_id", "status", "origin_branch", "destination_branch", "current_branch", "weight_kg", "created_at")
    list_filter   = ("status", "package_type", "current_branch")
    search_fields = ("tracking_id", "sender_name", "recipient_name", "recipient_phone")
    readonly_fields = ("id", "tracking_id", "status", "current_branch", "created_at", "updated_at")
    ordering      = ("-created_at",)


@admin.register(ShipmentEvent)
class ShipmentEventAdmin(admin.ModelAdmin):
    list_display  = ("shipment", "from_status", "to_status", "branch", "manifest", "actor", "occurred_at")
    readonly_fields = ("occurred_at",)
