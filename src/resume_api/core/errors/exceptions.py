"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Raised when a requested resource is not found.

    Example:
        raise NotFoundError("Developer not found", resource="developer", resource_id=id)
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        resource_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message=message, details=details, **kwargs)


class ValidationError(AppException):
    """Raised when input to a domain factory fails validation.

    Example:
        raise ValidationError("External ID cannot be empty")
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 422

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class UnauthorizedError(AppException):
    """Raised when authentication is required but not provided or invalid.

    Example:
        raise UnauthorizedError("Invalid access token")
    """

    message = "Authentication required"
    error_code = "unauthorized"
    status_code = 401


class AccessDeniedError(AppException):
    """Raised when a user may not access a developer or one of its children.

    Also raised when a child resource is addressed through a developer
    that does not own it. Maps to 401, like every authorization
    failure of the public API.

    Example:
        raise AccessDeniedError(user_id="auth0|42", developer_id=str(developer.id))
    """

    message = "You do not have permission to perform this action"
    error_code = "access_denied"
    status_code = 401

    def __init__(
        self,
        user_id: str | None = None,
        developer_id: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if user_id is not None:
            details["user_id"] = user_id
        if developer_id is not None:
            details["developer_id"] = developer_id
        if message is None and user_id is not None and developer_id is not None:
            message = (
                f"User {user_id} does not have permission to access developer {developer_id}"
            )
        super().__init__(message=message, details=details, **kwargs)


class ForbiddenError(AppException):
    """Raised when the token lacks a claim required by an endpoint.

    Example:
        raise ForbiddenError(
            "Admin access required",
            details={"required_permission": "Admin:access"}
        )
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class BadRequestError(AppException):
    """Raised for general client errors.

    Example:
        raise BadRequestError("Invalid ID format", error_code="invalid_id_format")
    """

    message = "Bad request"
    error_code = "bad_request"
    status_code = 400
