"""Pricing API views: quotes plus super-admin configuration of zones, tiers and surcharges."""

import logging
from django.db.models import Count
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from apps.authentication.permissions import CanQuotePrice, IsSuperAdmin, IsSuperAdminOrReadOnly
from .config import PricingConfigService, validate_tiers
from .engine import PriceCalculator
from .models import Zone, WeightTier, ZoneSurcharge
from . import serializers as sz

logger = logging.getLogger("branchlink.pricing")
calculator = PriceCalculator()
config_service = PricingConfigService()


def _include_inactive(request):
    return request.query_params.get("include_inactive", "").lower() == "true"


# ── POST /api/pricing/calculate/ ─────────────────────────────────────────────
@extend_schema(tags=["Pricing"], summary="Quote a delivery price between two branches")
class PriceCalculateView(APIView):
    permission_classes = [IsAuthenticated, CanQuotePrice]

    def post(self, request):
        ser = sz.PriceQuoteRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        d = ser.validated_data
        quote = calculator.quote_for_branches(
            d["weight"], d["origin_branch_id"], d["destination_branch_id"]
        )
        return Response(quote.as_dict())


# ── GET/POST /api/pricing/zones/ ─────────────────────────────────────────────
@extend_schema(tags=["Pricing"], summary="List or create pricing zones")
class ZoneListCreateView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdminOrReadOnly]

    def get(self, request):
        zones = Zone.objects.annotate(branch_count=Count("branches"))
        if not _include_inactive(request):
            zones = zones.filter(is_active=True)
        return Response(sz.ZoneSerializer(zones, many=True).data)

    def post(self, request):
        ser = sz.ZoneSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        zone = config_service.create_zone(
            request.user,
            name=ser.validated_data["name"],
            description=ser.validated_data.get("description", ""),
        )
        return Response(sz.ZoneSerializer(zone).data, status=status.HTTP_201_CREATED)


# ── GET/PATCH/DELETE /api/pricing/zones/{id}/ ────────────────────────────────
@extend_schema(tags=["Pricing"], summary="Retrieve, update or delete a zone")
class ZoneDetailView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdminOrReadOnly]

    def get(self, request, pk):
        zone = config_service.get_zone(pk)
        return Response(sz.ZoneDetailSerializer(zone).data)

    def patch(self, request, pk):
        ser = sz.ZoneSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        zone = config_service.update_zone(pk, **ser.validated_data)
        return Response(sz.ZoneDetailSerializer(zone).data)

    def delete(self, request, pk):
        config_service.delete_zone(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


# ── GET/POST /api/pricing/weight-tiers/ ──────────────────────────────────────
@extend_schema(tags=["Pricing"], summary="List or create weight tiers")
class WeightTierListCreateView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdminOrReadOnly]

    def get(self, request):
        tiers = WeightTier.objects.all()
        if not _include_inactive(request):
            tiers = tiers.filter(is_active=True)
        return Response(sz.WeightTierSerializer(tiers, many=True).data)

    def post(self, request):
        ser = sz.WeightTierSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        tier, warnings = config_service.create_tier(request.user, **ser.validated_data)
        body = {"tier": sz.WeightTierSerializer(tier).data}
        if warnings:
            body["warnings"] = warnings
        return Response(body, status=status.HTTP_201_CREATED)


# ── GET /api/pricing/weight-tiers/validate/ ──────────────────────────────────
@extend_schema(tags=["Pricing"], summary="Check the active weight tiers for errors and gaps")
class WeightTierValidateView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdmin]

    def get(self, request):
        return Response(validate_tiers())


# ── GET/PATCH/DELETE /api/pricing/weight-tiers/{id}/ ─────────────────────────
@extend_schema(tags=["Pricing"], summary="Retrieve, update or delete a weight tier")
class WeightTierDetailView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdminOrReadOnly]

    def get(self, request, pk):
        return Response(sz.WeightTierSerializer(config_service.get_tier(pk)).data)

    def patch(self, request, pk):
        ser = sz.WeightTierSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        tier, warnings = config_service.update_tier(pk, **ser.validated_data)
        body = {"tier": sz.WeightTierSerializer(tier).data}
        if warnings:
            body["warnings"] = warnings
        return Response(body)

    def delete(self, request, pk):
        config_service.delete_tier(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)


# ── GET/POST /api/pricing/zone-surcharges/ ───────────────────────────────────
@extend_schema(tags=["Pricing"], summary="List zone-pair surcharges or upsert one")
class ZoneSurchargeListCreateView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdminOrReadOnly]

    def get(self, request):
        edges = ZoneSurcharge.objects.select_related("from_zone", "to_zone")
        if not _include_inactive(request):
            edges = edges.filter(is_active=True)
        return Response(sz.ZoneSurchargeSerializer(edges, many=True).data)

    def post(self, request):
        ser = sz.SurchargeUpsertSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        d = ser.validated_data
        edge, created = config_service.upsert_surcharge(
            request.user, d["from_zone_id"], d["to_zone_id"], d["surcharge"],
            is_active=d.get("is_active"),
        )
        return Response(
            sz.ZoneSurchargeSerializer(edge).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


# ── PATCH/DELETE /api/pricing/zone-surcharges/{id}/ ──────────────────────────
@extend_schema(tags=["Pricing"], summary="Update or delete a zone-pair surcharge")
class ZoneSurchargeDetailView(APIView):
    permission_classes = [IsAuthenticated, IsSuperAdminOrReadOnly]

    def get(self, request, pk):
        return Response(sz.ZoneSurchargeSerializer(config_service.get_surcharge(pk)).data)

    def patch(self, request, pk):
        ser = sz.SurchargeUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        edge = config_service.update_surcharge(pk, **ser.validated_data)
        return Response(sz.ZoneSurchargeSerializer(edge).data)

    def delete(self, request, pk):
        config_service.delete_surcharge(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
