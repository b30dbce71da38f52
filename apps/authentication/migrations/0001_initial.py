import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("password",     models.CharField(max_length=128, verbose_name="password")),
                ("last_login",   models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False)),
                ("id",           models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("email",        models.EmailField(max_length=254, unique=True)),
                ("full_name",    models.CharField(max_length=120)),
                ("phone",        models.CharField(blank=True, max_length=20)),
                ("role",         models.CharField(
                    choices=[
                        ("SUPER_ADMIN", "Super Admin"),
                        ("ADMIN", "Branch Admin"),
                        ("DISPATCHER", "Dispatcher"),
                        ("DELIVERY_STAFF", "Delivery Staff"),
                    ],
                    default="DISPATCHER",
                    max_length=16,
                )),
                ("is_active",     models.BooleanField(default=True)),
                ("is_staff",      models.BooleanField(default=False)),
                ("created_at",    models.DateTimeField(auto_now_add=True)),
                ("groups",        models.ManyToManyField(blank=True, related_name="user_set", related_query_name="user", to="auth.group")),
                ("user_permissions", models.ManyToManyField(blank=True, related_name="user_set", related_query_name="user", to="auth.permission")),
            ],
            options={"verbose_name": "User"},
        ),
        migrations.AddIndex(
            model_name="user",
            index=models.Index(fields=["role"], name="auth_user_role_idx"),
        ),
    ]
