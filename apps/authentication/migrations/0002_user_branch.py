import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("authentication", "0001_initial"),
        ("branches", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="user",
            name="branch",
            field=models.ForeignKey(
                blank=True, null=True,
                on_delete=django.db.models.deletion.PROTECT,
                related_name="staff",
                to="branches.branch",
            ),
        ),
        migrations.AddIndex(
            model_name="user",
            index=models.Index(fields=["branch", "role"], name="auth_user_branch_role_idx"),
        ),
    ]
