import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Zone",
            fields=[
                ("id",          models.BigAutoField(auto_created=True, primary_key=True, serialize=False)),
                ("name",        models.CharField(max_length=100, unique=True,
                                                 validators=[django.core.validators.MinLengthValidator(2)])),
                ("description", models.CharField(blank=True, max_length=500)),
                ("is_active",   models.BooleanField(default=True)),
                ("created_at",  models.DateTimeField(auto_now_add=True)),
                ("updated_at",  models.DateTimeField(auto_now=True)),
                ("created_by",  models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="+",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={"ordering": ["name"]},
        ),
        migrations.CreateModel(
            name="WeightTier",
            fields=[
                ("id",         models.BigAutoField(auto_created=True, primary_key=True, serialize=False)),
                ("min_weight", models.DecimalField(decimal_places=3, max_digits=10,
                                                   validators=[django.core.validators.MinValueValidator(0)])),
                ("max_weight", models.DecimalField(decimal_places=3, max_digits=10,
                                                   validators=[django.core.validators.MinValueValidator(0)])),
                ("price",      models.DecimalField(decimal_places=2, max_digits=10,
                                                   validators=[django.core.validators.MinValueValidator(0)])),
                ("is_active",  models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("created_by", models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="+",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={"ordering": ["min_weight"]},
        ),
        migrations.AddIndex(
            model_name="weighttier",
            index=models.Index(fields=["is_active", "min_weight"], name="tier_active_min_idx"),
        ),
        migrations.CreateModel(
            name="ZoneSurcharge",
            fields=[
                ("id",         models.BigAutoField(auto_created=True, primary_key=True, serialize=False)),
                ("surcharge",  models.DecimalField(decimal_places=2, max_digits=10,
                                                   validators=[django.core.validators.MinValueValidator(0)])),
                ("is_active",  models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("from_zone",  models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="outgoing_surcharges",
                    to="pricing.zone",
                )),
                ("to_zone",    models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="incoming_surcharges",
                    to="pricing.zone",
                )),
                ("created_by", models.ForeignKey(
                    blank=True, null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name="+",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={"ordering": ["from_zone__name", "to_zone__name"]},
        ),
        migrations.AddConstraint(
            model_name="zonesurcharge",
            constraint=models.UniqueConstraint(fields=("from_zone", "to_zone"), name="uniq_zone_surcharge_pair"),
        ),
    ]
