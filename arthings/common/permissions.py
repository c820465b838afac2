from rest_framework.permissions import BasePermission
from rolepermissions.checkers import has_permission as has_role_permission, has_role

ADMIN_ROLE = "admin"


def is_admin(user):
    return bool(user and user.is_authenticated and has_role(user, ADMIN_ROLE))


def is_owner_or_admin(user, owner_id):
    """Single ownership predicate: the resource owner, or anyone holding the admin role."""
    if not user or not user.is_authenticated:
        return False
    return user.pk == owner_id or is_admin(user)


class IsAdminRole(BasePermission):
    """
    Admin role, plus the role permission named by the view's
    ``required_permission`` when it declares one.
    """
    message = "Admin access required."

    def has_permission(self, request, view):
        if not is_admin(request.user):
            return False
        required = getattr(view, "required_permission", None)
        return required is None or has_role_permission(request.user, required)


class IsOwnerOrAdmin(BasePermission):
    """
    Object-level check. The view names the attribute holding the owner's
    key with ``owner_field`` (defaults to ``user_id``).
    """
    message = "You can only modify your own content."

    def has_object_permission(self, request, view, obj):
        owner_field = getattr(view, "owner_field", "user_id")
        return is_owner_or_admin(request.user, getattr(obj, owner_field))
