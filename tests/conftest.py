"""Shared fixtures for the BranchLink test suite."""

import uuid
from decimal import Decimal

import pytest


# ═══════════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def make_zone(db):
    from apps.pricing.models import Zone

    def _make(name, **kwargs):
        return Zone.objects.create(name=name, **kwargs)
    return _make


@pytest.fixture
def make_branch(db):
    from apps.branches.models import Branch

    def _make(name, zone=None):
        return Branch.objects.create(name=name, zone=zone)
    return _make


@pytest.fixture
def make_user(db):
    from django.contrib.auth import get_user_model
    User = get_user_model()

    def _make(role="ADMIN", branch=None, email=None, **kwargs):
        email = email or f"user-{uuid.uuid4().hex[:10]}@branchlink.test"
        return User.objects.create_user(
            email=email, password="Test@1234",
            full_name=kwargs.get("full_name", "Test User"),
            role=role, branch=branch,
        )
    return _make


@pytest.fixture
def zone_x(make_zone):
    return make_zone("Zone X")


@pytest.fixture
def zone_y(make_zone):
    return make_zone("Zone Y")


@pytest.fixture
def branch_a(make_branch, zone_x):
    return make_branch("Branch A", zone=zone_x)


@pytest.fixture
def branch_b(make_branch, zone_y):
    return make_branch("Branch B", zone=zone_y)


@pytest.fixture
def branch_c(make_branch, zone_y):
    return make_branch("Branch C", zone=zone_y)


@pytest.fixture
def admin_a(make_user, branch_a):
    return make_user(role="ADMIN", branch=branch_a, email="admin.a@branchlink.test", full_name="Alice A")


@pytest.fixture
def admin_b(make_user, branch_b):
    return make_user(role="ADMIN", branch=branch_b, email="admin.b@branchlink.test", full_name="Bob B")


@pytest.fixture
def dispatcher_a(make_user, branch_a):
    return make_user(role="DISPATCHER", branch=branch_a, email="dispatch.a@branchlink.test")


@pytest.fixture
def super_admin(make_user):
    return make_user(role="SUPER_ADMIN", email="root@branchlink.test", full_name="Platform Owner")


@pytest.fixture
def make_shipment(db):
    from apps.shipments.ledger import ShipmentLedger
    ledger = ShipmentLedger()

    def _make(origin, destination, weight="2.5", **kwargs):
        kwargs.setdefault("sender_name", "Sender")
        kwargs.setdefault("recipient_name", "Recipient")
        return ledger.register(origin, destination, weight_kg=Decimal(weight), **kwargs)
    return _make


@pytest.fixture
def client_for():
    from rest_framework.test import APIClient

    def _client(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client


@pytest.fixture
def pricing_table(zone_x, zone_y):
    """[0,5) → 100, [5,20) → 250, X→Y = 50."""
    from apps.pricing.models import WeightTier, ZoneSurcharge
    WeightTier.objects.create(min_weight=Decimal("0"), max_weight=Decimal("5"), price=Decimal("100"))
    WeightTier.objects.create(min_weight=Decimal("5"), max_weight=Decimal("20"), price=Decimal("250"))
    ZoneSurcharge.objects.create(from_zone=zone_x, to_zone=zone_y, surcharge=Decimal("50"))
    return zone_x, zone_y
