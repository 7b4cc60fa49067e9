"""Authentication module for bearer token verification."""

from resume_api.core.auth.backend import decode_token
from resume_api.core.auth.dependencies import (
    AdminUserId,
    CurrentUserId,
    get_current_user_id,
    get_token_data,
    require_admin,
)
from resume_api.core.auth.schemas import TokenData


__all__ = [
    "AdminUserId",
    "CurrentUserId",
    "TokenData",
    "decode_token",
    "get_current_user_id",
    "get_token_data",
    "require_admin",
]
