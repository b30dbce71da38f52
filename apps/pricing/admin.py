from django.contrib import admin
from .models import Zone, WeightTier, ZoneSurcharge


@admin.register(Zone)
class ZoneAdmin(admin.ModelAdmin):
    list_display  = ("name", "is_active", "created_by", "created_at")
    list_filter   = ("is_active",)
    search_fields = ("name", "description")


@admin.register(WeightTier)
class WeightTierAdmin(admin.ModelAdmin):
    list_display  = ("min_weight", "max_weight", "price", "is_active", "updated_at")
    list_filter   = ("is_active",)
    ordering      = ("min_weight",)


@admin.register(ZoneSurcharge)
class ZoneSurchargeAdmin(admin.ModelAdmin):
    list_display  = ("from_zone", "to_zone", "surcharge", "is_active", "updated_at")
    list_filter   = ("is_active", "from_zone", "to_zone")
