"""
Role-based permissions shared by the API apps.
"""

from rest_framework.permissions import BasePermission, SAFE_METHODS


def is_staff_role(user):
    """Return True for authenticated staff/admin accounts."""
    if not user or not user.is_authenticated:
        return False
    return getattr(user, "is_staff_role", False)


class IsStaffRole(BasePermission):
    """
    Only staff and admin accounts.
    """

    message = "Staff or admin role required."

    def has_permission(self, request, view):
        return is_staff_role(request.user)


class IsOwnerOrStaff(BasePermission):
    """
    Object-level access for the owning customer, or any staff/admin account.

    Views expose the owner id of an object through ``get_owner_id(obj)``.
    """

    message = "You do not have access to this resource."

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

    def has_object_permission(self, request, view, obj):
        if is_staff_role(request.user):
            return True
        owner_id = view.get_owner_id(obj)
        return owner_id is not None and str(owner_id) == str(request.user.pk)


class IsStaffOrReadOnly(BasePermission):
    """
    Anyone may read; writes need a staff/admin account.
    """

    message = "Staff or admin role required."

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True
        return is_staff_role(request.user)
