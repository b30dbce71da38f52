import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("shipments", "0001_initial"),
        ("manifests", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="shipmentevent",
            name="manifest",
            field=models.ForeignKey(
                blank=True, null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="shipment_events",
                to="manifests.manifest",
            ),
        ),
    ]
