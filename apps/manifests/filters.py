"""Query filters for the dispatch picker."""

import django_filters

from apps.shipments.models import Shipment


class AvailableShipmentFilter(django_filters.FilterSet):
    destination_branch_id = django_filters.UUIDFilter(field_name="destination_branch_id")

    class Meta:
        model  = Shipment
        fields = ["destination_branch_id", "package_type"]
