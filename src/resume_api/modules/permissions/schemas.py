"""Pydantic schemas for permission management endpoints."""

from pydantic import BaseModel, Field

from resume_api.core.constants import (
    MAX_EXTERNAL_ID_LENGTH,
    MAX_PERMISSION_RESOURCE_ID_LENGTH,
    MAX_PERMISSION_RESOURCE_LENGTH,
)


class AllPermissionGrant(BaseModel):
    """Grant a user access to every instance of a resource type."""

    external_user_id: str = Field(..., min_length=1, max_length=MAX_EXTERNAL_ID_LENGTH)
    resource: str = Field(..., min_length=1, max_length=MAX_PERMISSION_RESOURCE_LENGTH)


class SpecificPermissionGrant(AllPermissionGrant):
    """Grant a user access to one resource instance."""

    resource_id: str = Field(..., min_length=1, max_length=MAX_PERMISSION_RESOURCE_ID_LENGTH)


class PermissionRevokeResponse(BaseModel):
    """Schema for a bulk revoke result."""

    resource: str
    resource_id: str
    removed: int
