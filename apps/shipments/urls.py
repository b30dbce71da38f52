from django.urls import path
from .views import ShipmentDetailView

urlpatterns = [
    path("<str:tracking_id>/", ShipmentDetailView.as_view(), name="shipment-detail"),
]
