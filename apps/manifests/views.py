"""Manifest API views: dispatch, receive, read and list."""

from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter

from apps.authentication.permissions import HasBranch
from apps.shipments.serializers import ShipmentSummarySerializer
from .filters import AvailableShipmentFilter
from .service import ManifestService
from . import serializers as sz

manifest_service = ManifestService()


# ── GET/POST /api/manifests/ ──────────────────────────────────────────────────
class ManifestListCreateView(APIView):
    permission_classes = [IsAuthenticated, HasBranch]

    @extend_schema(
        tags=["Manifests"],
        summary="List manifests involving the caller's branch",
        parameters=[
            OpenApiParameter("type", str, enum=["incoming", "outgoing"]),
            OpenApiParameter("status", str),
            OpenApiParameter("page", int),
            OpenApiParameter("limit", int),
        ],
    )
    def get(self, request):
        params = request.query_params
        result = manifest_service.list_manifests(
            request.user,
            direction=params.get("type") or None,
            status=params.get("status") or None,
            page=params.get("page"),
            limit=params.get("limit"),
        )
        return Response({
            "data":       sz.ManifestSerializer(result.data, many=True).data,
            "pagination": result.pagination,
        })

    @extend_schema(
        tags=["Manifests"],
        summary="Dispatch shipments to another branch",
        request=sz.ManifestCreateSerializer,
        responses={201: sz.ManifestDetailSerializer},
    )
    def post(self, request):
        ser = sz.ManifestCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        d = ser.validated_data
        manifest = manifest_service.dispatch(
            request.user,
            to_branch_id=d["to_branch_id"],
            shipment_ids=d["shipment_ids"],
            vehicle_number=d.get("vehicle_number", ""),
            driver_name=d.get("driver_name", ""),
            notes=d.get("notes", ""),
        )
        manifest = manifest_service.get_manifest(request.user, manifest.pk)
        return Response(sz.ManifestDetailSerializer(manifest).data, status=status.HTTP_201_CREATED)


# ── GET /api/manifests/available-shipments/ ───────────────────────────────────
@extend_schema(tags=["Manifests"], summary="Shipments at the caller's branch ready to be dispatched")
class AvailableShipmentsView(generics.ListAPIView):
    serializer_class   = ShipmentSummarySerializer
    permission_classes = [IsAuthenticated, HasBranch]
    pagination_class   = None
    filterset_class    = AvailableShipmentFilter
    search_fields      = ["tracking_id", "sender_name", "recipient_name"]
    ordering_fields    = ["created_at", "weight_kg", "tracking_id"]

    def get_queryset(self):
        return manifest_service.available_shipments(self.request.user)


# ── GET /api/manifests/{id}/ ──────────────────────────────────────────────────
@extend_schema(tags=["Manifests"], summary="Manifest with branch names and shipments")
class ManifestDetailView(APIView):
    permission_classes = [IsAuthenticated, HasBranch]

    def get(self, request, pk):
        manifest = manifest_service.get_manifest(request.user, pk)
        return Response(sz.ManifestDetailSerializer(manifest).data)


# ── PUT /api/manifests/{id}/receive/ ──────────────────────────────────────────
@extend_schema(tags=["Manifests"], summary="Receive an in-transit manifest at the destination branch")
class ManifestReceiveView(APIView):
    permission_classes = [IsAuthenticated, HasBranch]

    def put(self, request, pk):
        manifest, shipments = manifest_service.receive(request.user, pk)
        return Response({
            "manifest":          sz.ManifestSerializer(manifest).data,
            "updated_shipments": ShipmentSummarySerializer(shipments, many=True).data,
        })
