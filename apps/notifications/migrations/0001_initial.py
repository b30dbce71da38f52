import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("branches", "0001_initial"),
        ("manifests", "0001_initial"),
        ("shipments", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id",   models.BigAutoField(auto_created=True, primary_key=True, serialize=False)),
                ("type", models.CharField(
                    choices=[
                        ("manifest_dispatched", "Manifest dispatched"),
                        ("manifest_arrived",    "Manifest arrived"),
                    ],
                    max_length=24,
                )),
                ("tracking_id", models.CharField(blank=True, max_length=64)),
                ("message",     models.CharField(max_length=255)),
                ("read",        models.BooleanField(default=False)),
                ("created_at",  models.DateTimeField(auto_now_add=True)),
                ("branch", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="notifications",
                    to="branches.branch",
                )),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="notifications",
                    to=settings.AUTH_USER_MODEL,
                )),
                ("manifest", models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="+",
                    to="manifests.manifest",
                )),
                ("shipment", models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="+",
                    to="shipments.shipment",
                )),
            ],
            options={"ordering": ["-created_at"]},
        ),
        migrations.AddIndex(
            model_name="notification",
            index=models.Index(fields=["user", "read", "created_at"], name="notif_user_read_idx"),
        ),
    ]
