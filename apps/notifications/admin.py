from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display  = ("type", "user", "branch", "tracking_id", "read", "created_at")
    list_filter   = ("type", "read", "branch")
    search_fields = ("tracking_id", "message", "user__email")
    readonly_fields = ("created_at",)
