import django.db.models.deletion
import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("pricing", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Branch",
            fields=[
                ("id",         models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name",       models.CharField(max_length=120, unique=True)),
                ("address",    models.CharField(blank=True, max_length=255)),
                ("phone",      models.CharField(blank=True, max_length=20)),
                ("is_active",  models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("zone",       models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name="branches",
                    to="pricing.zone",
                )),
            ],
            options={"ordering": ["name"], "verbose_name_plural": "branches"},
        ),
    ]
