from django.urls import path
from .views import ManifestListCreateView, AvailableShipmentsView, ManifestDetailView, ManifestReceiveView

urlpatterns = [
    path("",                          ManifestListCreateView.as_view(), name="manifest-list"),
    path("available-shipments/",      AvailableShipmentsView.as_view(), name="manifest-available-shipments"),
    path("<uuid:pk>/",                ManifestDetailView.as_view(),     name="manifest-detail"),
    path("<uuid:pk>/receive/",        ManifestReceiveView.as_view(),    name="manifest-receive"),
]
