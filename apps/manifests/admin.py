from django.contrib import admin
from .models import Manifest


@admin.register(Manifest)
class ManifestAdmin(admin.ModelAdmin):
    list_display  = ("id", "from_branch", "to_branch", "status", "vehicle_number", "dispatched_at", "received_at")
    list_filter   = ("status", "from_branch", "to_branch")
    search_fields = ("id", "vehicle_number", "driver_name")
    readonly_fields = ("id", "status", "dispatched_at", "received_at", "dispatched_by", "received_by", "created_at")
    filter_horizontal = ("shipments",)
    ordering      = ("-dispatched_at",)
