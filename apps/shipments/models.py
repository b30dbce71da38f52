"""
Shipment models.
A shipment is held by exactly one branch at a time (current_branch) and moves
AT_ORIGIN → IN_TRANSIT → AT_DESTINATION through manifests. The delivery
statuses after that belong to the local delivery flow.
"""

import uuid
from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator


class Shipment(models.Model):

    class Status(models.TextChoices):
        AT_ORIGIN        = "AT_ORIGIN",        "At Origin Branch"
        IN_TRANSIT       = "IN_TRANSIT",       "In Transit to Destination"
        AT_DESTINATION   = "AT_DESTINATION",   "At Destination Branch"
        ASSIGNED         = "ASSIGNED",         "Assigned for Delivery"
        OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY", "Out for Delivery"
        DELIVERED        = "DELIVERED",        "Delivered"
        FAILED           = "FAILED",           "Delivery Failed"

    class PackageType(models.TextChoices):
        DOCUMENT = "DOCUMENT", "Document"
        PARCEL   = "PARCEL",   "Parcel"
        FRAGILE  = "FRAGILE",  "Fragile"
        BULK     = "BULK",     "Bulk"

    id                 = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    tracking_id        = models.CharField(max_length=20, unique=True)
    status             = models.CharField(max_length=16, choices=Status.choices, default=Status.AT_ORIGIN)

    origin_branch      = models.ForeignKey("branches.Branch", on_delete=models.PROTECT,
                                           related_name="originated_shipments")
    destination_branch = models.ForeignKey("branches.Branch", on_delete=models.PROTECT,
                                           related_name="inbound_shipments")
    # Custodian: the only branch allowed to dispatch or deliver the shipment.
    current_branch     = models.ForeignKey("branches.Branch", on_delete=models.PROTECT,
                                           related_name="held_shipments")

    sender_name        = models.CharField(max_length=120)
    sender_phone       = models.CharField(max_length=20, blank=True)
    recipient_name     = models.CharField(max_length=120)
    recipient_phone    = models.CharField(max_length=20, blank=True)
    recipient_address  = models.CharField(max_length=255, blank=True)

    package_type       = models.CharField(max_length=10, choices=PackageType.choices,
                                          default=PackageType.PARCEL)
    package_details    = models.CharField(max_length=500, blank=True)
    weight_kg          = models.DecimalField(max_digits=10, decimal_places=3,
                                             validators=[MinValueValidator(0)])
    price              = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    assigned_to        = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                           null=True, blank=True, related_name="assigned_shipments")
    failure_reason     = models.CharField(max_length=255, blank=True)
    created_by         = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL,
                                           null=True, blank=True, related_name="created_shipments")

    created_at         = models.DateTimeField(auto_now_add=True)
    updated_at         = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes  = [
            models.Index(fields=["current_branch", "status"], name="ship_holder_status_idx"),
            models.Index(fields=["destination_branch"], name="ship_dest_idx"),
            models.Index(fields=["created_at"], name="ship_created_idx"),
        ]

    def __str__(self):
        return f"{self.tracking_id} [{self.status}]"


class ShipmentEvent(models.Model):
    """Append-only status history; one row per transition."""
    shipment    = models.ForeignKey(Shipment, on_delete=models.CASCADE, related_name="events")
    from_status = models.CharField(max_length=16, blank=True)
    to_status   = models.CharField(max_length=16)
    branch      = models.ForeignKey("branches.Branch", on_delete=models.SET_NULL,
                                    null=True, related_name="+")
    manifest    = models.ForeignKey("manifests.Manifest", on_delete=models.SET_NULL,
                                    null=True, blank=True, related_name="shipment_events")
    actor       = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True)
    note        = models.CharField(max_length=255, blank=True)
    occurred_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["occurred_at", "id"]
