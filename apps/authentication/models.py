"""
Authentication models.
User is the custom auth user: branch staff (admin, dispatcher, delivery) and the platform super admin.
"""

import uuid
from django.db import models
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin, BaseUserManager


class UserManager(BaseUserManager):
    def create_user(self, email, password=None, **extra):
        if not email:
            raise ValueError("Email is required.")
        user = self.model(email=self.normalize_email(email), **extra)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password, **extra):
        extra.setdefault("is_staff", True)
        extra.setdefault("is_superuser", True)
        extra.setdefault("role", User.Role.SUPER_ADMIN)
        return self.create_user(email, password, **extra)


class User(AbstractBaseUser, PermissionsMixin):
    """A person working for a branch, or the platform operator (no branch)."""

    class Role(models.TextChoices):
        SUPER_ADMIN    = "SUPER_ADMIN",    "Super Admin"
        ADMIN          = "ADMIN",          "Branch Admin"
        DISPATCHER     = "DISPATCHER",     "Dispatcher"
        DELIVERY_STAFF = "DELIVERY_STAFF", "Delivery Staff"

    ELEVATED_ROLES = (Role.ADMIN, Role.SUPER_ADMIN)
    PRICING_ROLES  = (Role.ADMIN, Role.DISPATCHER, Role.SUPER_ADMIN)

    id            = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email         = models.EmailField(unique=True)
    full_name     = models.CharField(max_length=120)
    phone         = models.CharField(max_length=20, blank=True)
    role          = models.CharField(max_length=16, choices=Role.choices, default=Role.DISPATCHER)
    branch        = models.ForeignKey("branches.Branch", on_delete=models.PROTECT,
                                      null=True, blank=True, related_name="staff")
    is_active     = models.BooleanField(default=True)
    is_staff      = models.BooleanField(default=False)
    created_at    = models.DateTimeField(auto_now_add=True)

    USERNAME_FIELD  = "email"
    REQUIRED_FIELDS = ["full_name"]

    objects = UserManager()

    class Meta:
        verbose_name = "User"
        indexes = [
            models.Index(fields=["role"], name="auth_user_role_idx"),
            models.Index(fields=["branch", "role"], name="auth_user_branch_role_idx"),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.role})"

    @property
    def is_elevated(self):
        return self.role in self.ELEVATED_ROLES

    @property
    def tenant_id(self):
        return self.branch_id
