"""
Management command: seed demo zones, branches, pricing and shipments.

Usage:
    python manage.py seed_initial_data
    python manage.py seed_initial_data --shipments 5

Each branch also gets an admin and a dispatcher, e.g. admin@north-hub.branchlink.test.
"""

from decimal import Decimal
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from apps.branches.models import Branch
from apps.pricing.engine import PriceCalculator
from apps.pricing.models import Zone, WeightTier, ZoneSurcharge
from apps.shipments.ledger import ShipmentLedger
from apps.shipments.models import Shipment


ZONES = [
    ("North", "Northern districts"),
    ("South", "Southern districts"),
    ("East",  "Eastern districts"),
    ("West",  "Western districts"),
]

BRANCHES = [
    ("North Hub",   "North"),
    ("South Hub",   "South"),
    ("East Depot",  "East"),
    ("West Depot",  "West"),
]

WEIGHT_TIERS = [
    ("0",  "1",   "60.00"),
    ("1",  "5",   "100.00"),
    ("5",  "20",  "250.00"),
    ("20", "50",  "480.00"),
    ("50", "100", "900.00"),
]

STAFF_ROLES = ("ADMIN", "DISPATCHER")

SAME_ZONE_SURCHARGE  = Decimal("0.00")
CROSS_ZONE_SURCHARGE = Decimal("50.00")


class Command(BaseCommand):
    help = "Seed demo zones, branches, weight tiers, surcharges and shipments"

    def add_arguments(self, parser):
        parser.add_argument("--shipments", type=int, default=3,
                            help="AT_ORIGIN shipments per branch pair to create when none exist, priced at the current rates")
        parser.add_argument("--password", default="Demo@1234",
                            help="Password for demo branch staff created by this command")

    def handle(self, *args, **options):
        zones = {}
        created_zones = 0
        for name, description in ZONES:
            zone, created = Zone.objects.get_or_create(name=name, defaults={"description": description})
            zones[name] = zone
            created_zones += created

        branches = []
        created_branches = 0
        for name, zone_name in BRANCHES:
            branch, created = Branch.objects.get_or_create(name=name, defaults={"zone": zones[zone_name]})
            branches.append(branch)
            created_branches += created

        User = get_user_model()
        created_staff = 0
        for branch in branches:
            slug = branch.name.lower().replace(" ", "-")
            for role in STAFF_ROLES:
                email = f"{role.lower()}@{slug}.branchlink.test"
                if User.objects.filter(email=email).exists():
                    continue
                User.objects.create_user(
                    email=email, password=options["password"],
                    full_name=f"{branch.name} {role.title()}", role=role, branch=branch,
                )
                created_staff += 1

        created_tiers = 0
        for low, high, price in WEIGHT_TIERS:
            _, created = WeightTier.objects.get_or_create(
                min_weight=Decimal(low), max_weight=Decimal(high),
                defaults={"price": Decimal(price)},
            )
            created_tiers += created

        created_edges = 0
        for origin in zones.values():
            for dest in zones.values():
                _, created = ZoneSurcharge.objects.get_or_create(
                    from_zone=origin, to_zone=dest,
                    defaults={
                        "surcharge": SAME_ZONE_SURCHARGE if origin == dest else CROSS_ZONE_SURCHARGE,
                    },
                )
                created_edges += created

        ledger = ShipmentLedger()
        calculator = PriceCalculator()
        created_shipments = 0
        per_pair = options["shipments"]
        for origin in branches:
            if Shipment.objects.filter(origin_branch=origin).exists():
                continue
            for dest in branches:
                if dest == origin:
                    continue
                for i in range(per_pair):
                    weight = Decimal("2.500") + i
                    quote = calculator.quote_for_branches(weight, origin.pk, dest.pk)
                    ledger.register(
                        origin, dest, weight,
                        sender_name=f"{origin.name} Sender {i + 1}",
                        recipient_name=f"{dest.name} Recipient {i + 1}",
                        price=quote.total_price,
                    )
                    created_shipments += 1

        self.stdout.write(self.style.SUCCESS(
            f"Seeded {created_zones} zones, {created_branches} branches, {created_staff} staff, {created_tiers} tiers, "
            f"{created_edges} surcharges and {created_shipments} shipments."
        ))
