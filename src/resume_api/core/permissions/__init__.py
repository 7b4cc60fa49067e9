"""Permission grants and the pure access checks built on them."""

from resume_api.core.permissions.checker import can_access_developer, can_access_resource
from resume_api.core.permissions.models import Permission, PermissionScope


__all__ = [
    "Permission",
    "PermissionScope",
    "can_access_developer",
    "can_access_resource",
]
