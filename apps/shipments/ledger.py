"""
ShipmentLedger: the only writer of shipment status and custody.

Batch transitions are single conditional UPDATEs: the WHERE clause carries the
expected status (and holder), so a row changed by a concurrent request simply
does not match and the count check fails. Callers run these inside
transaction.atomic() so a failed check rolls back everything.
"""

import logging
import secrets

from django.db import transaction
from django.utils import timezone

from apps.common.exceptions import EligibilityMismatch, InvalidState
from apps.pricing.engine import coerce_weight
from apps.shipments.models import Shipment, ShipmentEvent

logger = logging.getLogger("branchlink.shipments")

# No 0/O or 1/I: tracking ids get read out over the phone.
TRACKING_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
TRACKING_PREFIX = "BL-"


def generate_tracking_id():
    suffix = "".join(secrets.choice(TRACKING_ALPHABET) for _ in range(10))
    return f"{TRACKING_PREFIX}{suffix}"


class ShipmentLedger:

    @transaction.atomic
    def register(self, origin_branch, destination_branch, weight_kg, actor=None, **details) -> Shipment:
        """Create an AT_ORIGIN shipment held by its origin branch."""
        weight_kg = coerce_weight(weight_kg)
        tracking_id = generate_tracking_id()
        while Shipment.objects.filter(tracking_id=tracking_id).exists():
            tracking_id = generate_tracking_id()

        shipment = Shipment.objects.create(
            tracking_id        = tracking_id,
            origin_branch      = origin_branch,
            destination_branch = destination_branch,
            current_branch     = origin_branch,
            status             = Shipment.Status.AT_ORIGIN,
            weight_kg          = weight_kg,
            created_by         = actor,
            **details,
        )
        ShipmentEvent.objects.create(
            shipment=shipment, from_status="", to_status=Shipment.Status.AT_ORIGIN,
            branch=origin_branch, actor=actor, note="Shipment created",
        )
        logger.info("Shipment %s registered at %s", tracking_id, origin_branch.name)
        return shipment

    def available_for_dispatch(self, branch, destination_branch_id=None):
        qs = (
            Shipment.objects
            .filter(current_branch=branch, status=Shipment.Status.AT_ORIGIN)
            .select_related("origin_branch", "destination_branch")
            .order_by("-created_at")
        )
        if destination_branch_id:
            qs = qs.filter(destination_branch_id=destination_branch_id)
        return qs

    def _append_history(self, shipment_ids, from_status, to_status, branch, manifest, actor, note):
        ShipmentEvent.objects.bulk_create([
            ShipmentEvent(
                shipment_id=sid, from_status=from_status, to_status=to_status,
                branch=branch, manifest=manifest, actor=actor, note=note,
            )
            for sid in shipment_ids
        ])

    def dispatch_batch(self, shipment_ids, from_branch, manifest, actor=None) -> int:
        """AT_ORIGIN → IN_TRANSIT for every id, all held by from_branch, or nothing."""
        ids = list(dict.fromkeys(shipment_ids))
        updated = (
            Shipment.objects
            .filter(pk__in=ids, current_branch=from_branch, status=Shipment.Status.AT_ORIGIN)
            .update(status=Shipment.Status.IN_TRANSIT, updated_at=timezone.now())
        )
        if updated != len(ids):
            logger.warning(
                "Dispatch from %s refused: %d of %d shipments eligible",
                from_branch.name, updated, len(ids),
            )
            raise EligibilityMismatch()

        self._append_history(
            ids, Shipment.Status.AT_ORIGIN, Shipment.Status.IN_TRANSIT,
            from_branch, manifest, actor, f"Dispatched via Manifest {manifest.pk}",
        )
        return updated

    def receive_batch(self, shipment_ids, to_branch, manifest, actor=None) -> int:
        """IN_TRANSIT → AT_DESTINATION; custody passes to to_branch."""
        ids = list(dict.fromkeys(shipment_ids))
        updated = (
            Shipment.objects
            .filter(pk__in=ids, status=Shipment.Status.IN_TRANSIT)
            .update(
                status=Shipment.Status.AT_DESTINATION,
                current_branch=to_branch,
                updated_at=timezone.now(),
            )
        )
        if updated != len(ids):
            logger.warning(
                "Receive of manifest %s refused: %d of %d shipments in transit",
                manifest.pk, updated, len(ids),
            )
            raise InvalidState("Some shipments on this manifest are no longer in transit.")

        self._append_history(
            ids, Shipment.Status.IN_TRANSIT, Shipment.Status.AT_DESTINATION,
            to_branch, manifest, actor, f"Received via Manifest {manifest.pk}",
        )
        return updated
