"""
Manifest: a batch of shipments carried from one branch to another.
IN_TRANSIT on creation, COMPLETED once the destination receives it; never changes after that.
"""

import uuid
from django.db import models
from django.conf import settings


class Manifest(models.Model):

    class Status(models.TextChoices):
        IN_TRANSIT = "IN_TRANSIT", "In Transit"
        COMPLETED  = "COMPLETED",  "Completed"

    id             = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    from_branch    = models.ForeignKey("branches.Branch", on_delete=models.PROTECT,
                                       related_name="outgoing_manifests")
    to_branch      = models.ForeignKey("branches.Branch", on_delete=models.PROTECT,
                                       related_name="incoming_manifests")
    shipments      = models.ManyToManyField("shipments.Shipment", related_name="manifests")
    status         = models.CharField(max_length=12, choices=Status.choices, default=Status.IN_TRANSIT)

    vehicle_number = models.CharField(max_length=50, blank=True)
    driver_name    = models.CharField(max_length=100, blank=True)
    notes          = models.CharField(max_length=500, blank=True)

    dispatched_at  = models.DateTimeField()
    received_at    = models.DateTimeField(null=True, blank=True)
    dispatched_by  = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                       null=True, related_name="dispatched_manifests")
    received_by    = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                       null=True, blank=True, related_name="received_manifests")

    created_at     = models.DateTimeField(auto_now_add=True)
    updated_at     = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-dispatched_at"]
        indexes  = [
            models.Index(fields=["from_branch", "status", "dispatched_at"], name="manifest_from_idx"),
            models.Index(fields=["to_branch", "status", "dispatched_at"], name="manifest_to_idx"),
        ]

    def __str__(self):
        return f"Manifest {self.pk} {self.from_branch} → {self.to_branch} [{self.status}]"
