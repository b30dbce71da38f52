"""Pricing serializers."""

from rest_framework import serializers
from .models import Zone, WeightTier, ZoneSurcharge


class ZoneSerializer(serializers.ModelSerializer):
    # Declared explicitly: duplicates are a 409 from the service, not a 400 here.
    name         = serializers.CharField(min_length=2, max_length=100)
    description  = serializers.CharField(max_length=500, required=False, allow_blank=True)
    branch_count = serializers.IntegerField(read_only=True, required=False)

    class Meta:
        model  = Zone
        fields = ["id", "name", "description", "is_active", "branch_count", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]


class ZoneBranchSerializer(serializers.Serializer):
    id   = serializers.UUIDField()
    name = serializers.CharField()


class ZoneDetailSerializer(ZoneSerializer):
    branches = ZoneBranchSerializer(many=True, read_only=True)

    class Meta(ZoneSerializer.Meta):
        fields = ZoneSerializer.Meta.fields + ["branches"]


class WeightTierSerializer(serializers.ModelSerializer):
    # Range and overlap rules live in PricingConfigService.
    min_weight = serializers.DecimalField(max_digits=10, decimal_places=3)
    max_weight = serializers.DecimalField(max_digits=10, decimal_places=3)
    price      = serializers.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        model  = WeightTier
        fields = ["id", "min_weight", "max_weight", "price", "is_active", "created_at", "updated_at"]
        read_only_fields = ["id", "created_at", "updated_at"]


class ZoneSurchargeSerializer(serializers.ModelSerializer):
    from_zone_name = serializers.CharField(source="from_zone.name", read_only=True)
    to_zone_name   = serializers.CharField(source="to_zone.name",   read_only=True)

    class Meta:
        model  = ZoneSurcharge
        fields = [
            "id", "from_zone", "from_zone_name", "to_zone", "to_zone_name",
            "surcharge", "is_active", "created_at", "updated_at",
        ]
        read_only_fields = fields


class SurchargeUpsertSerializer(serializers.Serializer):
    from_zone_id = serializers.IntegerField()
    to_zone_id   = serializers.IntegerField()
    surcharge    = serializers.DecimalField(max_digits=10, decimal_places=2)
    is_active    = serializers.BooleanField(required=False)


class SurchargeUpdateSerializer(serializers.Serializer):
    surcharge = serializers.DecimalField(max_digits=10, decimal_places=2, required=False)
    is_active = serializers.BooleanField(required=False)


class PriceQuoteRequestSerializer(serializers.Serializer):
    weight                = serializers.DecimalField(max_digits=None, decimal_places=None)
    origin_branch_id      = serializers.UUIDField()
    destination_branch_id = serializers.UUIDField()
