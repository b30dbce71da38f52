"""Shipment API views."""

from django.db.models import Q
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.authentication.permissions import HasBranch
from .models import Shipment
from . import serializers as sz


# ── GET /api/shipments/{tracking_id}/ ─────────────────────────────────────────
@extend_schema(tags=["Shipments"], summary="Retrieve a shipment and its status history")
class ShipmentDetailView(generics.RetrieveAPIView):
    serializer_class   = sz.ShipmentDetailSerializer
    permission_classes = [IsAuthenticated, HasBranch]
    lookup_field = "tracking_id"

    def get_queryset(self):
        # Visible to the branches it starts at, goes to, or currently sits in.
        branch_id = self.request.user.branch_id
        return (
            Shipment.objects
            .filter(
                Q(origin_branch_id=branch_id)
                | Q(destination_branch_id=branch_id)
                | Q(current_branch_id=branch_id)
            )
            .select_related("origin_branch", "destination_branch", "current_branch", "assigned_to")
            .prefetch_related("events__actor", "events__branch")
        )
