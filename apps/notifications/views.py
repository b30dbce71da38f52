"""In-app notification endpoints for the signed-in user."""

from rest_framework import serializers, status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.common.exceptions import NotFound
from .models import Notification

NOTIFICATION_LIST_LIMIT = 50


class NotificationSerializer(serializers.ModelSerializer):
    class Meta:
        model  = Notification
        fields = ["id", "type", "message", "manifest", "shipment", "tracking_id", "read", "created_at"]


@extend_schema(tags=["Notifications"], summary="Latest notifications for the signed-in user")
class NotificationListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        qs = Notification.objects.filter(user=request.user).order_by("-created_at", "-id")
        return Response({
            "unread": qs.filter(read=False).count(),
            "data":   NotificationSerializer(qs[:NOTIFICATION_LIST_LIMIT], many=True).data,
        })


@extend_schema(tags=["Notifications"], summary="Mark one notification as read")
class NotificationReadView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request, pk):
        updated = Notification.objects.filter(pk=pk, user=request.user).update(read=True)
        if not updated:
            raise NotFound("Notification not found.")
        return Response({"message": "Notification marked as read"})


@extend_schema(tags=["Notifications"], summary="Mark all notifications as read")
class NotificationReadAllView(APIView):
    permission_classes = [IsAuthenticated]

    def post(self, request):
        count = Notification.objects.filter(user=request.user, read=False).update(read=True)
        return Response({"message": "All notifications marked as read", "updated": count},
                        status=status.HTTP_200_OK)
