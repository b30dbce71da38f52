import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("branches", "0001_initial"),
        ("shipments", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Manifest",
            fields=[
                ("id",     models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("status", models.CharField(
                    choices=[("IN_TRANSIT", "In Transit"), ("COMPLETED", "Completed")],
                    default="IN_TRANSIT",
                    max_length=12,
                )),
                ("vehicle_number", models.CharField(blank=True, max_length=50)),
                ("driver_name",    models.CharField(blank=True, max_length=100)),
                ("notes",          models.CharField(blank=True, max_length=500)),
                ("dispatched_at",  models.DateTimeField()),
                ("received_at",    models.DateTimeField(blank=True, null=True)),
                ("created_at",     models.DateTimeField(auto_now_add=True)),
                ("updated_at",     models.DateTimeField(auto_now=True)),
                ("from_branch", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="outgoing_manifests",
                    to="branches.branch",
                )),
                ("to_branch", models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="incoming_manifests",
                    to="branches.branch",
                )),
                ("dispatched_by", models.ForeignKey(
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="dispatched_manifests",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("received_by", models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="received_manifests",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("shipments", models.ManyToManyField(related_name="manifests", to="shipments.shipment")),
            ],
            options={"ordering": ["-dispatched_at"]},
        ),
        migrations.AddIndex(
            model_name="manifest",
            index=models.Index(fields=["from_branch", "status", "dispatched_at"], name="manifest_from_idx"),
        ),
        migrations.AddIndex(
            model_name="manifest",
            index=models.Index(fields=["to_branch", "status", "dispatched_at"], name="manifest_to_idx"),
        ),
    ]
