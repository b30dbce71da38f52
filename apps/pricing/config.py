"""
Pricing configuration: zones, weight tiers and zone-pair surcharges.

Tier rules:
  * 0 <= min < max, price >= 0
  * no two ACTIVE tiers overlap; [0,5) and [5,10) are adjacent, not overlapping
  * gaps and a first tier above 0 are allowed but reported as warnings
"""

import logging
from decimal import Decimal

from django.db import IntegrityError, transaction

from apps.common.exceptions import Conflict, InvalidInput, NotFound
from apps.pricing.models import WeightTier, Zone, ZoneSurcharge

logger = logging.getLogger("branchlink.pricing")


def validate_tiers(tiers=None) -> dict:
    """Consistency report over the active tiers (or the given iterable)."""
    if tiers is None:
        tiers = WeightTier.objects.filter(is_active=True)
    tiers = sorted(tiers, key=lambda t: (t.min_weight, t.max_weight))

    errors, warnings = [], []
    if not tiers:
        errors.append("No weight tiers configured")
        return {"is_valid": False, "errors": errors, "warnings": warnings}

    for tier in tiers:
        if tier.max_weight <= tier.min_weight:
            errors.append(
                f"Tier {tier.min_weight}-{tier.max_weight} kg: max weight must be greater than min weight"
            )
        if tier.price < 0:
            errors.append(f"Tier {tier.min_weight}-{tier.max_weight} kg: price cannot be negative")

    for current, nxt in zip(tiers, tiers[1:]):
        if current.max_weight > nxt.min_weight:
            errors.append(
                f"Tiers {current.min_weight}-{current.max_weight} kg and "
                f"{nxt.min_weight}-{nxt.max_weight} kg overlap"
            )
        elif current.max_weight < nxt.min_weight:
            warnings.append(
                f"Gap between {current.max_weight} kg and {nxt.min_weight} kg; "
                f"weights in this range cannot be priced"
            )

    if tiers[0].min_weight > 0:
        warnings.append(f"First tier starts at {tiers[0].min_weight} kg, not 0 kg")

    return {"is_valid": not errors, "errors": errors, "warnings": warnings}


class PricingConfigService:

    # ── Zones ─────────────────────────────────────────────────────────────────
    def create_zone(self, user, name, description="") -> Zone:
        name = name.strip()
        if Zone.objects.filter(name__iexact=name).exists():
            raise Conflict("Zone with this name already exists.")
        try:
            with transaction.atomic():
                zone = Zone.objects.create(name=name, description=description, created_by=user)
        except IntegrityError:
            raise Conflict("Zone with this name already exists.")
        logger.info("Zone %s created by %s", zone.name, user.email)
        return zone

    def get_zone(self, zone_id) -> Zone:
        zone = Zone.objects.filter(pk=zone_id).first()
        if zone is None:
            raise NotFound("Zone not found.")
        return zone

    def update_zone(self, zone_id, **changes) -> Zone:
        zone = self.get_zone(zone_id)
        name = changes.get("name")
        if name is not None:
            name = name.strip()
            if Zone.objects.filter(name__iexact=name).exclude(pk=zone.pk).exists():
                raise Conflict("Zone with this name already exists.")
            zone.name = name
        if "description" in changes:
            zone.description = changes["description"]
        if "is_active" in changes:
            zone.is_active = changes["is_active"]
        zone.save()
        return zone

    def delete_zone(self, zone_id):
        zone = self.get_zone(zone_id)
        assigned = zone.branches.count()
        if assigned:
            raise InvalidInput(
                f"Cannot delete zone. {assigned} branch(es) are assigned to this zone. "
                f"Please reassign them first."
            )
        zone.delete()
        logger.info("Zone %s deleted", zone_id)

    # ── Weight tiers ──────────────────────────────────────────────────────────
    def _check_tier_values(self, min_weight, max_weight, price):
        if min_weight < 0 or max_weight < 0 or price < 0:
            raise InvalidInput("Weight and price values cannot be negative.")
        if max_weight <= min_weight:
            raise InvalidInput("Max weight must be greater than min weight.")

    def _check_overlap(self, min_weight, max_weight, exclude_id=None):
        others = WeightTier.objects.filter(
            is_active=True,
            min_weight__lt=max_weight,
            max_weight__gt=min_weight,
        )
        if exclude_id is not None:
            others = others.exclude(pk=exclude_id)
        clash = others.order_by("min_weight").first()
        if clash is not None:
            raise InvalidInput(
                f"Weight tier overlaps with existing tier "
                f"({clash.min_weight} - {clash.max_weight} kg)"
            )

    @transaction.atomic
    def create_tier(self, user, min_weight, max_weight, price, is_active=True):
        self._check_tier_values(min_weight, max_weight, price)
        if is_active:
            self._check_overlap(min_weight, max_weight)
        tier = WeightTier.objects.create(
            min_weight=min_weight, max_weight=max_weight, price=price,
            is_active=is_active, created_by=user,
        )
        logger.info("Weight tier %s-%s kg created at %s", min_weight, max_weight, price)
        return tier, validate_tiers()["warnings"]

    def get_tier(self, tier_id) -> WeightTier:
        tier = WeightTier.objects.filter(pk=tier_id).first()
        if tier is None:
            raise NotFound("Weight tier not found.")
        return tier

    @transaction.atomic
    def update_tier(self, tier_id, **changes):
        tier = self.get_tier(tier_id)
        min_weight = changes.get("min_weight", tier.min_weight)
        max_weight = changes.get("max_weight", tier.max_weight)
        price      = changes.get("price", tier.price)
        is_active  = changes.get("is_active", tier.is_active)

        self._check_tier_values(min_weight, max_weight, price)
        if is_active:
            self._check_overlap(min_weight, max_weight, exclude_id=tier.pk)

        tier.min_weight, tier.max_weight = min_weight, max_weight
        tier.price, tier.is_active = price, is_active
        tier.save()
        return tier, validate_tiers()["warnings"]

    def delete_tier(self, tier_id):
        self.get_tier(tier_id).delete()

    # ── Zone surcharges ───────────────────────────────────────────────────────
    @transaction.atomic
    def upsert_surcharge(self, user, from_zone_id, to_zone_id, surcharge, is_active=None):
        """Returns (edge, created). An existing ordered pair is updated in place."""
        if surcharge < 0:
            raise InvalidInput("Surcharge cannot be negative.")
        zones = Zone.objects.filter(pk__in=[from_zone_id, to_zone_id]).count()
        expected = 1 if from_zone_id == to_zone_id else 2
        if zones != expected:
            raise NotFound("One or both zones not found.")

        edge = (
            ZoneSurcharge.objects.select_for_update()
            .filter(from_zone_id=from_zone_id, to_zone_id=to_zone_id)
            .first()
        )
        if edge is not None:
            edge.surcharge = surcharge
            if is_active is not None:
                edge.is_active = is_active
            edge.save(update_fields=["surcharge", "is_active", "updated_at"])
            logger.info("Surcharge %s → %s updated to %s", from_zone_id, to_zone_id, surcharge)
            return edge, False

        edge = ZoneSurcharge.objects.create(
            from_zone_id=from_zone_id, to_zone_id=to_zone_id, surcharge=surcharge,
            is_active=True if is_active is None else is_active, created_by=user,
        )
        logger.info("Surcharge %s → %s created at %s", from_zone_id, to_zone_id, surcharge)
        return edge, True

    def get_surcharge(self, surcharge_id) -> ZoneSurcharge:
        edge = ZoneSurcharge.objects.select_related("from_zone", "to_zone").filter(pk=surcharge_id).first()
        if edge is None:
            raise NotFound("Zone surcharge not found.")
        return edge

    def update_surcharge(self, surcharge_id, surcharge=None, is_active=None) -> ZoneSurcharge:
        edge = self.get_surcharge(surcharge_id)
        if surcharge is not None:
            if surcharge < Decimal("0"):
                raise InvalidInput("Surcharge cannot be negative.")
            edge.surcharge = surcharge
        if is_active is not None:
            edge.is_active = is_active
        edge.save()
        return edge

    def delete_surcharge(self, surcharge_id):
        self.get_surcharge(surcharge_id).delete()
