"""Shipment serializers."""

from rest_framework import serializers
from .models import Shipment, ShipmentEvent


class ShipmentEventSerializer(serializers.ModelSerializer):
    actor_name  = serializers.CharField(source="actor.full_name", read_only=True, default=None)
    branch_name = serializers.CharField(source="branch.name", read_only=True, default=None)

    class Meta:
        model  = ShipmentEvent
        fields = ["from_status", "to_status", "branch_name", "manifest", "actor_name", "note", "occurred_at"]


class ShipmentSummarySerializer(serializers.ModelSerializer):
    """Compact form used inside manifests and dispatch pickers."""
    origin_branch_name      = serializers.CharField(source="origin_branch.name", read_only=True)
    destination_branch_name = serializers.CharField(source="destination_branch.name", read_only=True)

    class Meta:
        model  = Shipment
        fields = [
            "id", "tracking_id", "status",
            "origin_branch", "origin_branch_name",
            "destination_branch", "destination_branch_name",
            "current_branch", "sender_name", "recipient_name",
            "package_type", "weight_kg", "created_at",
        ]


class ShipmentDetailSerializer(ShipmentSummarySerializer):
    current_branch_name = serializers.CharField(source="current_branch.name", read_only=True)
    assigned_to_name    = serializers.CharField(source="assigned_to.full_name", read_only=True, default=None)
    events              = ShipmentEventSerializer(many=True, read_only=True)

    class Meta(ShipmentSummarySerializer.Meta):
        fields = ShipmentSummarySerializer.Meta.fields + [
            "current_branch_name", "sender_phone", "recipient_phone", "recipient_address",
            "package_details", "price", "assigned_to", "assigned_to_name",
            "failure_reason", "updated_at", "events",
        ]
