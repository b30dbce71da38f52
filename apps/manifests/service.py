"""
ManifestService: moves batches of shipments between branches.

    dispatch (origin admin)      : AT_ORIGIN shipments  → IN_TRANSIT,     manifest IN_TRANSIT
    receive  (destination admin) : IN_TRANSIT shipments → AT_DESTINATION, manifest COMPLETED

Each mutation is one transaction. Eligibility and state are re-checked in the
UPDATE itself, so two concurrent requests cannot both win. Notifications are
published after the transaction; a publishing failure never fails the request.
"""

import logging
import math
from dataclasses import dataclass

from django.conf import settings
from django.db import transaction
from django.db.models import Count, Q
from django.utils import timezone

from apps.branches.models import Branch
from apps.common.exceptions import Forbidden, InvalidInput, InvalidState, NotFound
from apps.manifests.models import Manifest
from apps.notifications.service import EventPublisher
from apps.shipments.ledger import ShipmentLedger
from apps.shipments.models import Shipment

logger = logging.getLogger("branchlink.manifests")

DIRECTIONS = ("incoming", "outgoing")


def _clean(value, limit):
    return (value or "").strip()[:limit]


def _to_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass
class ManifestPage:
    data:        list
    page:        int
    limit:       int
    total:       int
    total_pages: int

    @property
    def pagination(self):
        return {
            "page":        self.page,
            "limit":       self.limit,
            "total":       self.total,
            "total_pages": self.total_pages,
        }


class ManifestService:
    """
    Manifest workflow orchestration.
    Dependencies are injected so they can be swapped in tests.
    """

    def __init__(self, publisher=None, ledger=None):
        self.publisher = publisher or EventPublisher()
        self.ledger    = ledger    or ShipmentLedger()

    # ── Guards ────────────────────────────────────────────────────────────────
    def _require_elevated(self, user, action):
        if not user.is_elevated:
            logger.warning("%s (%s) tried to %s", user.email, user.role, action)
            raise Forbidden(f"Forbidden: Only admins can {action}.")

    def _branch_of(self, user) -> Branch:
        if not user.branch_id:
            raise Forbidden("Your account is not linked to a branch.")
        return user.branch

    def _publish(self, event, tenant_id, **fields):
        try:
            self.publisher.publish(event, tenant_id, **fields)
        except Exception:
            logger.exception("Publishing %s failed", event)

    # ── Dispatch ──────────────────────────────────────────────────────────────
    def dispatch(self, user, to_branch_id, shipment_ids,
                 vehicle_number="", driver_name="", notes="") -> Manifest:
        """
        Create an IN_TRANSIT manifest from the caller's branch.
        Every shipment must be AT_ORIGIN and held by the caller's branch,
        otherwise nothing is written.
        """
        self._require_elevated(user, "dispatch manifests")
        from_branch = self._branch_of(user)

        ids = list(dict.fromkeys(shipment_ids or []))
        if not to_branch_id or not ids:
            raise InvalidInput("Invalid request: to_branch_id and non-empty shipment_ids required.")

        to_branch = Branch.objects.filter(pk=to_branch_id).first()
        if to_branch is None:
            raise NotFound("Destination branch not found.")
        if to_branch.pk == from_branch.pk:
            raise InvalidInput("Destination branch must differ from the origin branch.")

        with transaction.atomic():
            # Lock candidates so a parallel dispatch of the same shipments waits here.
            list(Shipment.objects.select_for_update().filter(pk__in=ids).values_list("pk", flat=True))

            manifest = Manifest.objects.create(
                from_branch    = from_branch,
                to_branch      = to_branch,
                status         = Manifest.Status.IN_TRANSIT,
                vehicle_number = _clean(vehicle_number, 50),
                driver_name    = _clean(driver_name, 100),
                notes          = _clean(notes, 500),
                dispatched_at  = timezone.now(),
                dispatched_by  = user,
            )
            self.ledger.dispatch_batch(ids, from_branch, manifest, actor=user)
            manifest.shipments.set(ids)

        logger.info(
            "Manifest %s dispatched %s → %s with %d shipments",
            manifest.pk, from_branch.name, to_branch.name, len(ids),
        )
        self._publish(
            "manifest_dispatched", to_branch.pk,
            manifest_id=manifest.pk,
            from_branch=from_branch.name,
            to_branch=to_branch.name,
            created_by=user.pk,
        )
        return manifest

    # ── Receive ───────────────────────────────────────────────────────────────
    def receive(self, user, manifest_id):
        """Complete an IN_TRANSIT manifest at the caller's branch. Returns (manifest, shipments)."""
        self._require_elevated(user, "receive manifests")
        branch = self._branch_of(user)

        manifest = (
            Manifest.objects.select_related("from_branch", "to_branch")
            .filter(pk=manifest_id)
            .first()
        )
        if manifest is None:
            raise NotFound("Manifest not found.")
        if manifest.to_branch_id != branch.pk:
            raise Forbidden("Forbidden: You can only receive manifests for your branch")
        if manifest.status != Manifest.Status.IN_TRANSIT:
            raise InvalidState(
                'Invalid manifest status: Can only receive manifests in "In Transit" status'
            )

        with transaction.atomic():
            now = timezone.now()
            claimed = (
                Manifest.objects
                .filter(pk=manifest.pk, status=Manifest.Status.IN_TRANSIT)
                .update(
                    status=Manifest.Status.COMPLETED,
                    received_at=now,
                    received_by=user,
                    updated_at=now,
                )
            )
            if not claimed:
                logger.warning("Manifest %s already received", manifest.pk)
                raise InvalidState(
                    'Invalid manifest status: Can only receive manifests in "In Transit" status'
                )
            ids = list(manifest.shipments.values_list("pk", flat=True))
            self.ledger.receive_batch(ids, branch, manifest, actor=user)

        manifest.refresh_from_db()
        shipments = list(
            Shipment.objects.filter(pk__in=ids)
            .select_related("origin_branch", "destination_branch")
            .order_by("tracking_id")
        )
        logger.info(
            "Manifest %s received at %s, %d shipments now held there",
            manifest.pk, branch.name, len(shipments),
        )
        self._publish(
            "manifest_arrived", manifest.from_branch_id,
            manifest_id=manifest.pk,
            from_branch=manifest.from_branch.name,
            to_branch=manifest.to_branch.name,
            received_by=user.pk,
        )
        return manifest, shipments

    # ── Read ──────────────────────────────────────────────────────────────────
    def get_manifest(self, user, manifest_id) -> Manifest:
        branch = self._branch_of(user)
        manifest = (
            Manifest.objects
            .select_related("from_branch", "to_branch", "dispatched_by", "received_by")
            .prefetch_related("shipments__origin_branch", "shipments__destination_branch")
            .filter(pk=manifest_id)
            .first()
        )
        if manifest is None:
            raise NotFound("Manifest not found.")
        if branch.pk not in (manifest.from_branch_id, manifest.to_branch_id):
            raise Forbidden("Forbidden: You do not have access to this manifest")
        return manifest

    def list_manifests(self, user, direction=None, status=None, page=1, limit=None) -> ManifestPage:
        """
        Manifests involving the caller's branch, newest dispatch first.
        page >= 1; 1 <= limit <= MANIFEST_MAX_PAGE_SIZE; junk falls back to defaults.
        """
        branch = self._branch_of(user)
        default_limit = settings.MANIFEST_PAGE_SIZE
        max_limit     = settings.MANIFEST_MAX_PAGE_SIZE

        page  = max(1, _to_int(page, 1))
        limit = min(max_limit, max(1, _to_int(limit, default_limit)))

        qs = Manifest.objects.select_related("from_branch", "to_branch")
        if direction == "incoming":
            qs = qs.filter(to_branch=branch)
        elif direction == "outgoing":
            qs = qs.filter(from_branch=branch)
        elif direction:
            raise InvalidInput('type must be "incoming" or "outgoing".')
        else:
            qs = qs.filter(Q(from_branch=branch) | Q(to_branch=branch))

        if status:
            qs = qs.filter(status=self._status_value(status))

        total  = qs.count()
        offset = (page - 1) * limit
        rows = []
        # Past the last row: answer empty without sending an out-of-range OFFSET.
        if offset < total:
            rows = list(
                qs.annotate(shipment_count=Count("shipments"))
                .order_by("-dispatched_at", "-created_at")[offset:offset + limit]
            )
        return ManifestPage(
            data=rows,
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        )

    def _status_value(self, status):
        for value, label in Manifest.Status.choices:
            if status in (value, label):
                return value
        raise InvalidInput(f"Unknown manifest status: {status}")

    # ── Dispatch picker ───────────────────────────────────────────────────────
    def available_shipments(self, user, destination_branch_id=None):
        """Shipments the caller's branch can put on a new manifest."""
        branch = self._branch_of(user)
        return self.ledger.available_for_dispatch(branch, destination_branch_id)
