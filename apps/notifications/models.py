"""In-app notifications: one row per recipient user."""

from django.db import models
from django.conf import settings


class Notification(models.Model):

    class Type(models.TextChoices):
        MANIFEST_DISPATCHED = "manifest_dispatched", "Manifest dispatched"
        MANIFEST_ARRIVED    = "manifest_arrived",    "Manifest arrived"

    branch      = models.ForeignKey("branches.Branch", on_delete=models.CASCADE, related_name="notifications")
    user        = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE,
                                    related_name="notifications")
    type        = models.CharField(max_length=24, choices=Type.choices)
    manifest    = models.ForeignKey("manifests.Manifest", on_delete=models.CASCADE,
                                    null=True, blank=True, related_name="+")
    shipment    = models.ForeignKey("shipments.Shipment", on_delete=models.CASCADE,
                                    null=True, blank=True, related_name="+")
    tracking_id = models.CharField(max_length=64, blank=True)
    message     = models.CharField(max_length=255)
    read        = models.BooleanField(default=False)
    created_at  = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes  = [models.Index(fields=["user", "read", "created_at"], name="notif_user_read_idx")]

    def __str__(self):
        return f"{self.type} → {self.user_id}"
