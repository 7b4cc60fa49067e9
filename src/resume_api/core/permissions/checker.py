"""Permission checking logic.

The functions here are pure: they evaluate a user's already-loaded
grants and never touch the database.
"""

from typing import TYPE_CHECKING

from resume_api.core.constants import DEVELOPERS_RESOURCE


if TYPE_CHECKING:
    from resume_api.modules.users.models import User


def can_access_resource(
    user: "User",
    resource: str,
    resource_id: str,
    created_by_id: str | None,
) -> bool:
    """Decide whether a user may access one resource instance.

    Access is granted if any of the following holds:
    - the user holds an ``All`` grant on the resource type
    - the user holds a ``Specific`` grant on this instance
    - the user created the instance

    Args:
        user: The acting user, with permissions loaded
        resource: The resource type (e.g., "Developers")
        resource_id: The instance identifier
        created_by_id: External ID of the instance's creator

    Returns:
        True if the user may access the instance
    """
    return (
        user.has_permission(resource)
        or user.has_permission(resource, resource_id)
        or (created_by_id is not None and created_by_id == user.external_id)
    )


def can_access_developer(user: "User", developer_id: str, created_by_id: str | None) -> bool:
    """Shorthand for ``can_access_resource`` on the "Developers" resource."""
    return can_access_resource(user, DEVELOPERS_RESOURCE, developer_id, created_by_id)
