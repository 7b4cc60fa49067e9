"""FastAPI dependencies for authentication.

This module provides FastAPI dependency injection functions for:
- Extracting and validating the bearer token
- Getting the current external user ID
- Requiring the admin permission claim
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from resume_api.config import settings
from resume_api.core.auth.backend import decode_token
from resume_api.core.auth.schemas import TokenData
from resume_api.core.errors import ForbiddenError, UnauthorizedError


# HTTP Bearer token security scheme
bearer_scheme = HTTPBearer(auto_error=False)


async def get_token_data(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """Extract and validate token data from the Authorization header.

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    if not credentials:
        raise UnauthorizedError(
            "Missing authentication token",
            error_code="missing_token",
        )

    token_data = decode_token(credentials.credentials)
    if not token_data:
        raise UnauthorizedError(
            "Invalid or expired token",
            error_code="token_validation_failed",
        )

    request.state.user_id = token_data.external_user_id
    return token_data


async def get_current_user_id(
    token_data: Annotated[TokenData, Depends(get_token_data)],
) -> str:
    """Get the external ID of the authenticated user."""
    return token_data.external_user_id


async def require_admin(
    token_data: Annotated[TokenData, Depends(get_token_data)],
) -> str:
    """Get the external ID of the authenticated user, requiring admin access.

    Raises:
        ForbiddenError: If the token lacks the admin permission claim
    """
    if settings.admin_permission not in token_data.permissions:
        raise ForbiddenError(
            "Admin access required",
            error_code="admin_required",
            details={"required_permission": settings.admin_permission},
        )
    return token_data.external_user_id


# Type aliases for cleaner dependency injection
CurrentUserId = Annotated[str, Depends(get_current_user_id)]
AdminUserId = Annotated[str, Depends(require_admin)]
