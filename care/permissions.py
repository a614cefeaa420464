"""
Permission classes and ownership helpers.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

from care.exceptions import ForbiddenError

DIRECTORY_EDITOR_ROLES = {"hospital"}


def is_directory_editor(user) -> bool:
    return bool(
        user and user.is_authenticated
        and (user.is_staff or getattr(user, "role", None) in DIRECTORY_EDITOR_ROLES)
    )


class IsHospitalRole(BasePermission):
    """Read for any authenticated user; writes for hospital accounts or staff."""
    message = "Only hospital accounts may modify the directory"

    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        if not (user and user.is_authenticated):
            return False
        if request.method in SAFE_METHODS:
            return True
        return is_directory_editor(user)


def ensure_owner(user, obj) -> None:
    if getattr(obj, "user_id", None) != getattr(user, "id", None):
        raise ForbiddenError()
