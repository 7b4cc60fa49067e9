"""Error handling module with RFC 7807 Problem Details."""

from resume_api.core.errors.exceptions import (
    AccessDeniedError,
    AppException,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from resume_api.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AccessDeniedError",
    "AppException",
    "BadRequestError",
    # Handlers
    "FieldError",
    "ForbiddenError",
    "NotFoundError",
    "ProblemDetail",
    "UnauthorizedError",
    "ValidationError",
    "register_exception_handlers",
]
