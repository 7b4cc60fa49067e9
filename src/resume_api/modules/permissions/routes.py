"""Permission management API routes.

Every route requires the admin permission claim on the caller's token.
"""

from fastapi import Query, status

from resume_api.core.auth import AdminUserId
from resume_api.modules.permissions import router
from resume_api.modules.permissions.schemas import (
    AllPermissionGrant,
    PermissionRevokeResponse,
    SpecificPermissionGrant,
)
from resume_api.modules.users.services import PermissionSvc


@router.post(
    "/all",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Grant access to a resource type",
    description="Grant a user access to every instance of a resource type.",
)
async def grant_all_permission(
    data: AllPermissionGrant,
    service: PermissionSvc,
    admin_id: AdminUserId,  # noqa: ARG001 - required for auth
) -> None:
    """Grant an All-scope permission."""
    await service.give_user_all_permission(data.external_user_id, data.resource)


@router.post(
    "/specific",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Grant access to a resource instance",
)
async def grant_specific_permission(
    data: SpecificPermissionGrant,
    service: PermissionSvc,
    admin_id: AdminUserId,  # noqa: ARG001 - required for auth
) -> None:
    """Grant a Specific-scope permission."""
    await service.give_user_specific_permission(
        data.external_user_id, data.resource, data.resource_id
    )


@router.delete(
    "/specific",
    response_model=PermissionRevokeResponse,
    summary="Revoke access to a resource instance",
    description="Remove every user's Specific grant on a resource instance.",
)
async def revoke_specific_permissions(
    service: PermissionSvc,
    admin_id: AdminUserId,  # noqa: ARG001 - required for auth
    resource: str = Query(..., min_length=1),
    resource_id: str = Query(..., min_length=1),
) -> PermissionRevokeResponse:
    """Revoke Specific-scope permissions from all users."""
    removed = await service.remove_specific_permission_from_all_users(resource, resource_id)
    return PermissionRevokeResponse(resource=resource, resource_id=resource_id, removed=removed)
