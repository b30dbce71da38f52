"""
Platform Test Suite
===================
Covers: zone directory | shipment ledger | notifications | auth | shipment lookup | ops | seed data

Run:
    pytest tests/test_platform.py -v
"""

import re
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.utils import timezone
from rest_framework import status


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TESTS: Zone directory
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestZoneDirectory:

    def setup_method(self):
        from apps.branches.zones import ZoneDirectory
        self.zones = ZoneDirectory()

    def test_resolves_both_sides(self, branch_a, branch_b, zone_x, zone_y):
        res = self.zones.resolve_zones(branch_a.pk, branch_b.pk)
        assert (res.origin_zone_id, res.destination_zone_id) == (zone_x.pk, zone_y.pk)
        assert res.origin_zone_name == "Zone X"
        assert res.is_complete and not res.is_same_zone

    def test_zoneless_branch_resolves_to_none(self, branch_a, make_branch):
        orphan = make_branch("Orphan Branch")
        res = self.zones.resolve_zones(orphan.pk, branch_a.pk)
        assert res.origin_zone_id is None
        assert not res.is_complete

    def test_unknown_branch_resolves_to_none(self, branch_a):
        import uuid
        res = self.zones.resolve_zones(branch_a.pk, uuid.uuid4())
        assert res.destination_zone_id is None

    def test_validate_reports_both_missing(self, make_branch):
        left, right = make_branch("Left"), make_branch("Right")
        report = self.zones.validate_assignment(left.pk, right.pk)
        assert not report.is_valid
        assert report.errors == [
            "Origin branch does not have a zone assigned",
            "Destination branch does not have a zone assigned",
        ]

    def test_same_zone_is_a_warning_only(self, branch_b, branch_c):
        report = self.zones.validate_assignment(branch_b.pk, branch_c.pk)
        assert report.is_valid
        assert report.warnings == ["Both branches are in the same zone"]

    def test_branches_in_zone(self, branch_b, branch_c, branch_a, zone_y):
        assert list(self.zones.branches_in_zone(zone_y.pk)) == [branch_b, branch_c]


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TESTS: Shipment ledger
# ═══════════════════════════════════════════════════════════════════════════════

class TestTrackingId:

    def test_format(self):
        from apps.shipments.ledger import generate_tracking_id
        assert re.fullmatch(r"BL-[A-HJ-NP-Z2-9]{10}", generate_tracking_id())

    def test_ids_vary(self):
        from apps.shipments.ledger import generate_tracking_id
        assert len({generate_tracking_id() for _ in range(50)}) == 50


@pytest.mark.django_db
class TestShipmentLedger:

    def test_register_starts_at_origin(self, make_shipment, admin_a, branch_a, branch_b):
        from apps.shipments.models import Shipment
        shipment = make_shipment(branch_a, branch_b, weight="4.2")
        assert shipment.status == Shipment.Status.AT_ORIGIN
        assert shipment.current_branch_id == branch_a.pk
        assert shipment.weight_kg == Decimal("4.2")

        history = list(shipment.events.all())
        assert len(history) == 1
        assert history[0].from_status == ""
        assert history[0].to_status == Shipment.Status.AT_ORIGIN
        assert history[0].note == "Shipment created"

    def test_register_records_actor(self, admin_a, branch_a, branch_b):
        from apps.shipments.ledger import ShipmentLedger
        shipment = ShipmentLedger().register(
            branch_a, branch_b, Decimal("1"), actor=admin_a, sender_name="S", recipient_name="R",
        )
        assert shipment.created_by == admin_a
        assert shipment.events.get().actor == admin_a

    @pytest.mark.parametrize("weight", [None, "heavy", "-1"])
    def test_register_rejects_bad_weight(self, branch_a, branch_b, weight):
        from apps.common.exceptions import InvalidInput
        from apps.shipments.ledger import ShipmentLedger
        from apps.shipments.models import Shipment
        with pytest.raises(InvalidInput):
            ShipmentLedger().register(branch_a, branch_b, weight, sender_name="S", recipient_name="R")
        assert Shipment.objects.count() == 0

    def test_receive_batch_requires_in_transit(self, make_shipment, branch_a, branch_b):
        from apps.common.exceptions import InvalidState
        from apps.manifests.models import Manifest
        from apps.shipments.ledger import ShipmentLedger

        shipment = make_shipment(branch_a, branch_b)
        manifest = Manifest.objects.create(from_branch=branch_a, to_branch=branch_b, dispatched_at=timezone.now())
        with pytest.raises(InvalidState):
            ShipmentLedger().receive_batch([shipment.pk], branch_b, manifest)


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TESTS: Notifications
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestNotificationDispatcher:

    def test_admins_and_dispatchers_of_branch_only(self, make_user, admin_a, dispatcher_a, admin_b, branch_a):
        from apps.notifications.models import Notification
        from apps.notifications.service import NotificationDispatcher

        make_user(role="DELIVERY_STAFF", branch=branch_a)
        count = NotificationDispatcher().dispatch({
            "event": "manifest_arrived", "tenant_id": str(branch_a.pk),
            "to_branch": "Branch B",
        })

        assert count == 2
        assert set(Notification.objects.values_list("user_id", flat=True)) == {admin_a.pk, dispatcher_a.pk}
        assert Notification.objects.first().message.startswith("Manifest received at Branch B")

    def test_inactive_users_skipped(self, make_user, branch_a):
        from apps.notifications.service import NotificationDispatcher
        retired = make_user(role="ADMIN", branch=branch_a)
        retired.is_active = False
        retired.save(update_fields=["is_active"])
        assert NotificationDispatcher().dispatch({"event": "manifest_arrived", "tenant_id": str(branch_a.pk)}) == 0

    def test_unknown_event_ignored(self, admin_a, branch_a):
        from apps.notifications.models import Notification
        from apps.notifications.service import NotificationDispatcher
        assert NotificationDispatcher().dispatch({"event": "teleported", "tenant_id": str(branch_a.pk)}) == 0
        assert Notification.objects.count() == 0

    def test_every_type_has_a_message(self):
        from apps.notifications.models import Notification
        from apps.notifications.service import MESSAGES
        assert set(Notification.Type.values) == set(MESSAGES) == {"manifest_dispatched", "manifest_arrived"}


@pytest.mark.django_db
class TestEventPublisher:

    def test_delivers_after_commit(self, admin_b, branch_b, django_capture_on_commit_callbacks):
        from apps.notifications.models import Notification
        from apps.notifications.service import EventPublisher

        with django_capture_on_commit_callbacks(execute=True) as callbacks:
            EventPublisher().publish("manifest_dispatched", branch_b.pk,
                                     from_branch="Branch A")
            assert Notification.objects.count() == 0

        assert len(callbacks) == 1
        note = Notification.objects.get()
        assert note.user == admin_b
        assert note.type == "manifest_dispatched"
        assert note.message.startswith("Manifest arriving from Branch A")

    def test_queue_failure_is_swallowed(self, admin_b, branch_b, django_capture_on_commit_callbacks):
        from apps.notifications.models import Notification
        from apps.notifications.service import EventPublisher

        with patch("apps.notifications.tasks.deliver_event.delay", side_effect=ConnectionError("redis")):
            with django_capture_on_commit_callbacks(execute=True):
                EventPublisher().publish("manifest_dispatched", branch_b.pk)

        assert Notification.objects.count() == 0


# ═══════════════════════════════════════════════════════════════════════════════
# INTEGRATION: Notifications API
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestNotificationAPI:

    @pytest.fixture
    def inbox(self, admin_a, admin_b, branch_a, branch_b):
        from apps.notifications.models import Notification
        mine = [
            Notification.objects.create(branch=branch_a, user=admin_a, type="manifest_arrived",
                                        message=f"Manifest received at Branch B - M-{i}")
            for i in range(3)
        ]
        theirs = Notification.objects.create(branch=branch_b, user=admin_b, type="manifest_dispatched",
                                             message="Manifest arriving from Branch A - M-X")
        return mine, theirs

    def test_list_own_only(self, client_for, admin_a, inbox):
        resp = client_for(admin_a).get("/api/notifications/")
        assert resp.status_code == status.HTTP_200_OK
        assert resp.data["unread"] == 3
        assert len(resp.data["data"]) == 3

    def test_mark_one_read(self, client_for, admin_a, inbox):
        mine, _ = inbox
        resp = client_for(admin_a).post(f"/api/notifications/{mine[0].pk}/read/")
        assert resp.status_code == status.HTTP_200_OK
        mine[0].refresh_from_db()
        assert mine[0].read is True

    def test_cannot_mark_someone_elses(self, client_for, admin_a, inbox):
        _, theirs = inbox
        resp = client_for(admin_a).post(f"/api/notifications/{theirs.pk}/read/")
        assert resp.status_code == status.HTTP_404_NOT_FOUND
        assert resp.data["code"] == "not_found"

    def test_mark_all_read(self, client_for, admin_a, inbox):
        resp = client_for(admin_a).post("/api/notifications/read-all/")
        assert resp.data["updated"] == 3
        assert client_for(admin_a).get("/api/notifications/").data["unread"] == 0


# ═══════════════════════════════════════════════════════════════════════════════
# INTEGRATION: Auth
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestAuth:

    def test_login_token_carries_branch_claims(self, api_client, admin_a, branch_a):
        from rest_framework_simplejwt.tokens import AccessToken
        resp = api_client.post("/api/auth/login/", {
            "email": "admin.a@branchlink.test", "password": "Test@1234",
        }, format="json")
        assert resp.status_code == status.HTTP_200_OK
        token = AccessToken(resp.data["access"])
        assert token["role"] == "ADMIN"
        assert token["tenant_id"] == str(branch_a.pk)

    def test_wrong_password(self, api_client, admin_a):
        resp = api_client.post("/api/auth/login/", {
            "email": "admin.a@branchlink.test", "password": "nope",
        }, format="json")
        assert resp.status_code == status.HTTP_401_UNAUTHORIZED

    def test_bearer_token_authenticates(self, api_client, admin_a):
        login = api_client.post("/api/auth/login/", {
            "email": "admin.a@branchlink.test", "password": "Test@1234",
        }, format="json")
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")
        resp = api_client.get("/api/auth/me/")
        assert resp.status_code == status.HTTP_200_OK
        assert resp.data["branch_name"] == "Branch A"
        assert resp.data["role"] == "ADMIN"

    def test_profile_requires_auth(self, api_client):
        assert api_client.get("/api/auth/me/").status_code == status.HTTP_401_UNAUTHORIZED


# ═══════════════════════════════════════════════════════════════════════════════
# INTEGRATION: Shipment lookup
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestShipmentLookup:

    def test_origin_branch_sees_history(self, client_for, admin_a, branch_a, branch_b, make_shipment):
        shipment = make_shipment(branch_a, branch_b)
        resp = client_for(admin_a).get(f"/api/shipments/{shipment.tracking_id}/")
        assert resp.status_code == status.HTTP_200_OK
        assert resp.data["status"] == "AT_ORIGIN"
        assert [e["note"] for e in resp.data["events"]] == ["Shipment created"]

    def test_destination_branch_sees_it(self, client_for, admin_b, branch_a, branch_b, make_shipment):
        shipment = make_shipment(branch_a, branch_b)
        assert client_for(admin_b).get(f"/api/shipments/{shipment.tracking_id}/").status_code == 200

    def test_unrelated_branch_gets_404(self, client_for, make_user, branch_a, branch_b, branch_c, make_shipment):
        shipment = make_shipment(branch_a, branch_b)
        outsider = make_user(role="ADMIN", branch=branch_c)
        resp = client_for(outsider).get(f"/api/shipments/{shipment.tracking_id}/")
        assert resp.status_code == status.HTTP_404_NOT_FOUND


# ═══════════════════════════════════════════════════════════════════════════════
# OPS: Health and seed data
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestOps:

    def test_health_ok(self, api_client):
        resp = api_client.get("/api/health/")
        assert resp.status_code == status.HTTP_200_OK
        assert resp.data["status"] == "ok"
        assert resp.data["checks"] == {"database": "ok", "cache": "ok"}

    def test_swagger_docs_served(self, api_client):
        from django.urls import reverse
        resp = api_client.get(reverse("swagger-ui"))
        assert resp.status_code == status.HTTP_200_OK
        assert b"swagger-ui" in resp.content

    def test_seed_is_idempotent(self):
        from apps.branches.models import Branch
        from apps.pricing.config import validate_tiers
        from apps.pricing.models import Zone, ZoneSurcharge
        from apps.shipments.models import Shipment

        call_command("seed_initial_data", "--shipments", "1")
        counts = (Zone.objects.count(), Branch.objects.count(),
                  ZoneSurcharge.objects.count(), Shipment.objects.count())
        call_command("seed_initial_data", "--shipments", "1")

        assert counts == (4, 4, 16, 12)
        assert (Zone.objects.count(), Branch.objects.count(),
                ZoneSurcharge.objects.count(), Shipment.objects.count()) == counts
        assert validate_tiers()["is_valid"] is True
        assert Branch.objects.get(name="North Hub").staff.count() == 2

    def test_seeded_shipments_carry_their_quote(self):
        from apps.shipments.models import Shipment
        call_command("seed_initial_data", "--shipments", "2")
        # 2.5 kg and 3.5 kg both fall in the 1-5 kg tier (100) plus the cross-zone 50.
        assert set(Shipment.objects.values_list("price", flat=True)) == {Decimal("150.00")}


# ═══════════════════════════════════════════════════════════════════════════════
# UNIT TESTS: Error envelope
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.mark.django_db
class TestExceptionHandler:

    def test_domain_error_carries_lists(self):
        from apps.common.exceptions import ZoneAssignmentError, api_exception_handler
        exc = ZoneAssignmentError(errors=["Origin branch does not have a zone assigned"])
        resp = api_exception_handler(exc, {})
        assert resp.status_code == 400
        assert resp.data == {
            "error":  "Zone assignment error.",
            "code":   "zone_assignment_error",
            "errors": ["Origin branch does not have a zone assigned"],
        }

    def test_unexpected_error_is_generic_500(self):
        from apps.common.exceptions import api_exception_handler
        resp = api_exception_handler(RuntimeError("boom"), {})
        assert resp.status_code == 500
        assert resp.data == {"error": "Internal server error.", "code": "internal_error"}
