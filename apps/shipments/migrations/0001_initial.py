import django.core.validators
import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("branches", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Shipment",
            fields=[
                ("id",          models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("tracking_id", models.CharField(max_length=20, unique=True)),
                ("status", models.CharField(
                    choices=[
                        ("AT_ORIGIN",        "At Origin Branch"),
                        ("IN_TRANSIT",       "In Transit to Destination"),
                        ("AT_DESTINATION",   "At Destination Branch"),
                        ("ASSIGNED",         "Assigned for Delivery"),
                        ("OUT_FOR_DELIVERY", "Out for Delivery"),
                        ("DELIVERED",        "Delivered"),
                        ("FAILED",           "Delivery Failed"),
                    ],
                    default="AT_ORIGIN",
                    max_length=16,
                )),
                ("sender_name",       models.CharField(max_length=120)),
                ("sender_phone",      models.CharField(blank=True, max_length=20)),
                ("recipient_name",    models.CharField(max_length=120)),
                ("recipient_phone",   models.CharField(blank=True, max_length=20)),
                ("recipient_address", models.CharField(blank=True, max_length=255)),
                ("package_type", models.CharField(
                    choices=[
                        ("DOCUMENT", "Document"),
                        ("PARCEL",   "Parcel"),
                        ("FRAGILE",  "Fragile"),
                        ("BULK",     "Bulk"),
                    ],
                    default="PARCEL",
                    max_length=10,
                )),
                ("package_details", models.CharField(blank=True, max_length=500)),
                ("weight_kg",       models.DecimalField(decimal_places=3, max_digits=10,
                                                        validators=[django.core.validators.MinValueValidator(0)])),
                ("price",           models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("failure_reason",  models.CharField(blank=True, max_length=255)),
                ("created_at",      models.DateTimeField(auto_now_add=True)),
                ("updated_at",      models.DateTimeField(auto_now=True)),
                ("origin_branch", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="originated_shipments",
                    to="branches.branch",
                )),
                ("destination_branch", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="inbound_shipments",
                    to="branches.branch",
                )),
                ("current_branch", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="held_shipments",
                    to="branches.branch",
                )),
                ("assigned_to", models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="assigned_shipments",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("created_by", models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="created_shipments",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.AddIndex(
            model_name="shipment",
            index=models.Index(fields=["current_branch", "status"], name="ship_holder_status_idx"),
        ),
        migrations.AddIndex(
            model_name="shipment",
            index=models.Index(fields=["destination_branch"], name="ship_dest_idx"),
        ),
        migrations.AddIndex(
            model_name="shipment",
            index=models.Index(fields=["created_at"], name="ship_created_idx"),
        ),
        migrations.CreateModel(
            name="ShipmentEvent",
            fields=[
                ("id",          models.BigAutoField(auto_created=True, primary_key=True, serialize=False)),
                ("from_status", models.CharField(blank=True, max_length=16)),
                ("to_status",   models.CharField(max_length=16)),
                ("note",        models.CharField(blank=True, max_length=255)),
                ("occurred_at", models.DateTimeField(auto_now_add=True)),
                ("shipment",    models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="events",
                    to="shipments.shipment",
                )),
                ("branch",      models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="+",
                    to="branches.branch",
                )),
                ("actor",       models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={"ordering": ["occurred_at", "id"]},
        ),
    ]
