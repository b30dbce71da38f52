from django.contrib import admin
from .models import Branch


@admin.register(Branch)
class BranchAdmin(admin.ModelAdmin):
    list_display  = ("name", "zone", "phone", "is_active", "created_at")
    list_filter   = ("zone", "is_active")
    search_fields = ("name", "address")
    readonly_fields = ("id", "created_at")
