"""Role and branch permissions for the API views."""

from rest_framework.permissions import BasePermission, SAFE_METHODS


class HasBranch(BasePermission):
    """Caller must be attached to a branch."""

    message = "Your account is not linked to a branch."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.branch_id)


class CanQuotePrice(BasePermission):
    message = "Only admins and dispatchers can calculate prices."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.role in user.PRICING_ROLES


class IsSuperAdmin(BasePermission):
    """Pricing configuration is owned by the platform operator."""

    message = "Super admin access required."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False
        return user.role == user.Role.SUPER_ADMIN


class IsSuperAdminOrReadOnly(IsSuperAdmin):
    """Any signed-in user may read; only super admins may write."""

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return super().has_permission(request, view)
