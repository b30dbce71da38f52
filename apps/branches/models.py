"""Branch (tenant) model: every shipment, manifest and staff member belongs to one."""

import uuid
from django.db import models


class Branch(models.Model):
    id         = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name       = models.CharField(max_length=120, unique=True)
    address    = models.CharField(max_length=255, blank=True)
    phone      = models.CharField(max_length=20, blank=True)
    zone       = models.ForeignKey("pricing.Zone", on_delete=models.PROTECT,
                                   null=True, blank=True, related_name="branches")
    is_active  = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "branches"

    def __str__(self):
        return self.name
