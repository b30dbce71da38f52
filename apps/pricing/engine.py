"""
Price engine.

    total = base price of the weight tier containing the weight
          + surcharge of the directed (origin zone → destination zone) pair

Tiers are half-open [min, max): a weight equal to a tier's max belongs to the
next tier. An unconfigured zone pair costs nothing extra, but the quote says so.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from apps.branches.zones import ZoneDirectory
from apps.common.exceptions import InvalidInput, TierResolutionError, ZoneAssignmentError
from apps.pricing.models import WeightTier, ZoneSurcharge

logger = logging.getLogger("branchlink.pricing")


@dataclass
class PriceQuote:
    base_price:  Decimal
    surcharge:   Decimal
    total_price: Decimal
    breakdown:   dict = field(default_factory=dict)
    warnings:    list = field(default_factory=list)

    def as_dict(self):
        return {
            "base_price":  self.base_price,
            "surcharge":   self.surcharge,
            "total_price": self.total_price,
            "breakdown":   self.breakdown,
            "warnings":    self.warnings,
        }


def coerce_weight(value) -> Decimal:
    """Parse a weight in kg; finite and non-negative or InvalidInput."""
    if value is None or isinstance(value, bool):
        raise InvalidInput("Weight is required and must be a number.")
    try:
        weight = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInput("Weight must be a number.")
    if not weight.is_finite():
        raise InvalidInput("Weight must be a finite number.")
    if weight < 0:
        raise InvalidInput("Weight cannot be negative.")
    return weight


class PriceCalculator:
    """
    Stateless; every call reads the active tiers and surcharges.
    The zone directory is injected so views and tests can swap it.
    """

    def __init__(self, zone_directory=None):
        self.zones = zone_directory or ZoneDirectory()

    def match_tier(self, weight: Decimal) -> WeightTier:
        matches = list(
            WeightTier.objects.filter(
                is_active=True,
                min_weight__lte=weight,
                max_weight__gt=weight,
            )[:2]
        )
        if len(matches) != 1:
            if matches:
                logger.error("Overlapping active tiers for weight %s", weight)
            raise TierResolutionError(f"No weight tier found for weight: {weight} kg.")
        return matches[0]

    def calculate_price(self, weight, origin_zone_id, destination_zone_id) -> PriceQuote:
        weight = coerce_weight(weight)
        if origin_zone_id is None or destination_zone_id is None:
            raise InvalidInput("Both origin and destination zone ids are required.")

        tier = self.match_tier(weight)

        edge = (
            ZoneSurcharge.objects.select_related("from_zone", "to_zone")
            .filter(from_zone_id=origin_zone_id, to_zone_id=destination_zone_id, is_active=True)
            .first()
        )
        surcharge  = edge.surcharge if edge else Decimal("0.00")
        base_price = tier.price
        total      = base_price + surcharge
        same_zone  = origin_zone_id == destination_zone_id

        warnings = []
        if edge is None:
            warnings.append("No surcharge configured for this zone pair; surcharge set to 0")

        breakdown = {
            "weight": weight,
            "weight_tier": {
                "min_weight": tier.min_weight,
                "max_weight": tier.max_weight,
                "price":      tier.price,
            },
            "from_zone_id":         origin_zone_id,
            "to_zone_id":           destination_zone_id,
            "surcharge_type":       "same-zone" if same_zone else "different-zone",
            "is_same_zone":         same_zone,
            "surcharge_configured": edge is not None,
            "base_price":           base_price,
            "surcharge":            surcharge,
            "total_price":          total,
        }
        return PriceQuote(base_price, surcharge, total, breakdown, warnings)

    def quote_for_branches(self, weight, origin_branch_id, destination_branch_id) -> PriceQuote:
        """Resolve both branches to zones, then price. Misconfigured zones → ZoneAssignmentError."""
        weight = coerce_weight(weight)

        resolution = self.zones.resolve_zones(origin_branch_id, destination_branch_id)
        if not resolution.is_complete:
            report = self.zones.validate_assignment(origin_branch_id, destination_branch_id)
            logger.warning(
                "Quote refused for %s → %s: %s",
                origin_branch_id, destination_branch_id, "; ".join(report.errors),
            )
            raise ZoneAssignmentError(errors=report.errors, warnings=report.warnings)

        quote = self.calculate_price(
            weight, resolution.origin_zone_id, resolution.destination_zone_id
        )
        quote.breakdown["from_zone"] = resolution.origin_zone_name
        quote.breakdown["to_zone"]   = resolution.destination_zone_name
        if resolution.is_same_zone:
            quote.warnings.append("Both branches are in the same zone")
        return quote
