"""Permissions module: administrative grant and revoke endpoints."""

from fastapi import APIRouter


router = APIRouter(prefix="/permissions", tags=["permissions"])

# Import routes to register them (must be after router is defined)
from resume_api.modules.permissions import routes  # noqa: F401, E402


# Module metadata
__module__ = {
    "name": "permissions",
    "version": "1.0.0",
    "description": "Grant and revoke resource permissions",
    "dependencies": ["users"],
}
