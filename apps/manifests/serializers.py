"""Manifest serializers."""

from rest_framework import serializers
from apps.shipments.serializers import ShipmentSummarySerializer
from .models import Manifest


class ManifestCreateSerializer(serializers.Serializer):
    to_branch_id   = serializers.UUIDField()
    shipment_ids   = serializers.ListField(child=serializers.UUIDField(), allow_empty=False)
    # Over-long text is trimmed by the service rather than rejected.
    vehicle_number = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    driver_name    = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    notes          = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)


class ManifestSerializer(serializers.ModelSerializer):
    from_branch_name  = serializers.CharField(source="from_branch.name", read_only=True)
    to_branch_name    = serializers.CharField(source="to_branch.name",   read_only=True)
    shipment_count    = serializers.SerializerMethodField()

    class Meta:
        model  = Manifest
        fields = [
            "id", "status",
            "from_branch", "from_branch_name", "to_branch", "to_branch_name",
            "vehicle_number", "driver_name", "notes", "shipment_count",
            "dispatched_at", "dispatched_by", "received_at", "received_by",
        ]

    def get_shipment_count(self, obj):
        count = getattr(obj, "shipment_count", None)
        if count is None:
            count = obj.shipments.count()
        return count


class ManifestDetailSerializer(ManifestSerializer):
    shipments          = ShipmentSummarySerializer(many=True, read_only=True)
    dispatched_by_name = serializers.CharField(source="dispatched_by.full_name", read_only=True, default=None)
    received_by_name   = serializers.CharField(source="received_by.full_name",   read_only=True, default=None)

    class Meta(ManifestSerializer.Meta):
        fields = ManifestSerializer.Meta.fields + ["dispatched_by_name", "received_by_name", "shipments"]
