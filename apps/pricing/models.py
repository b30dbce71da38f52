"""
Pricing models.
A quote is base price (from the weight tier) + surcharge (from the directed zone pair).
"""

from django.db import models
from django.conf import settings
from django.core.validators import MinLengthValidator, MinValueValidator


class Zone(models.Model):
    """Geographic pricing zone; branches point at one zone each."""
    name        = models.CharField(max_length=100, unique=True, validators=[MinLengthValidator(2)])
    description = models.CharField(max_length=500, blank=True)
    is_active   = models.BooleanField(default=True)
    created_by  = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                    null=True, blank=True, related_name="+")
    created_at  = models.DateTimeField(auto_now_add=True)
    updated_at  = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class WeightTier(models.Model):
    """Half-open weight band [min_weight, max_weight) with a flat base price."""
    min_weight = models.DecimalField(max_digits=10, decimal_places=3, validators=[MinValueValidator(0)])
    max_weight = models.DecimalField(max_digits=10, decimal_places=3, validators=[MinValueValidator(0)])
    price      = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    is_active  = models.BooleanField(default=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                   null=True, blank=True, related_name="+")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["min_weight"]
        indexes  = [models.Index(fields=["is_active", "min_weight"], name="tier_active_min_idx")]

    def __str__(self):
        return f"{self.min_weight}-{self.max_weight} kg → {self.price}"


class ZoneSurcharge(models.Model):
    """Directed edge from_zone → to_zone. The reverse direction is a separate row."""
    from_zone  = models.ForeignKey(Zone, on_delete=models.CASCADE, related_name="outgoing_surcharges")
    to_zone    = models.ForeignKey(Zone, on_delete=models.CASCADE, related_name="incoming_surcharges")
    surcharge  = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])
    is_active  = models.BooleanField(default=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                   null=True, blank=True, related_name="+")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering    = ["from_zone__name", "to_zone__name"]
        constraints = [
            models.UniqueConstraint(fields=["from_zone", "to_zone"], name="uniq_zone_surcharge_pair"),
        ]

    def __str__(self):
        return f"{self.from_zone} → {self.to_zone}: {self.surcharge}"
