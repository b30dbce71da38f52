from django.urls import path
from .views import (
    PriceCalculateView,
    ZoneListCreateView, ZoneDetailView,
    WeightTierListCreateView, WeightTierValidateView, WeightTierDetailView,
    ZoneSurchargeListCreateView, ZoneSurchargeDetailView,
)

urlpatterns = [
    path("calculate/",                  PriceCalculateView.as_view(),          name="pricing-calculate"),
    path("zones/",                      ZoneListCreateView.as_view(),          name="zone-list"),
    path("zones/<int:pk>/",             ZoneDetailView.as_view(),              name="zone-detail"),
    path("weight-tiers/",               WeightTierListCreateView.as_view(),    name="weight-tier-list"),
    path("weight-tiers/validate/",      WeightTierValidateView.as_view(),      name="weight-tier-validate"),
    path("weight-tiers/<int:pk>/",      WeightTierDetailView.as_view(),        name="weight-tier-detail"),
    path("zone-surcharges/",            ZoneSurchargeListCreateView.as_view(), name="zone-surcharge-list"),
    path("zone-surcharges/<int:pk>/",   ZoneSurchargeDetailView.as_view(),     name="zone-surcharge-detail"),
]
