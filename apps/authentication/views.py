"""Authentication: JWT login with branch claims, token refresh, own profile."""

from django.contrib.auth import get_user_model
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from drf_spectacular.utils import extend_schema

User = get_user_model()


# ── Serializers ───────────────────────────────────────────────────────────────
class BranchTokenSerializer(TokenObtainPairSerializer):
    """Adds role and tenant (branch) claims to the issued tokens."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"]      = user.role
        token["tenant_id"] = str(user.branch_id) if user.branch_id else None
        return token


class UserProfileSerializer(serializers.ModelSerializer):
    branch_name = serializers.CharField(source="branch.name", read_only=True, default=None)

    class Meta:
        model  = User
        fields = ["id", "email", "full_name", "phone", "role", "branch", "branch_name", "created_at"]
        read_only_fields = ["id", "email", "role", "branch", "created_at"]


# ── Views ─────────────────────────────────────────────────────────────────────
@extend_schema(tags=["Auth"])
class LoginView(TokenObtainPairView):
    """POST /api/auth/login/: Exchange email + password for a JWT pair."""
    serializer_class = BranchTokenSerializer


@extend_schema(tags=["Auth"])
class RefreshView(TokenRefreshView):
    """POST /api/auth/refresh/"""


@extend_schema(tags=["Auth"])
class ProfileView(generics.RetrieveUpdateAPIView):
    """GET/PATCH /api/auth/me/: Retrieve or update own profile."""
    serializer_class   = UserProfileSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        return self.request.user
