"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"
    PERMISSION_DENIED = "PERMISSION_DENIED"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_GROUP_NOT_FOUND = "USER_GROUP_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    USER_GROUP_CONFLICT = "USER_GROUP_CONFLICT"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authenticated, but not allowed."""

    def __init__(
        self,
        message: str = "Access denied",
        error_code: ErrorCode = ErrorCode.FORBIDDEN,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=403,
            details=details,
        )


class PermissionDeniedError(AuthorizationError):
    """The acting user lacks the permission required on a resource."""

    def __init__(self, permission: str, resource_id: str) -> None:
        super().__init__(
            message=f"Permission {permission} denied on resource {resource_id}",
            error_code=ErrorCode.PERMISSION_DENIED,
            details={"permission": permission, "resource_id": resource_id},
        )


class UserNotFoundError(AppException):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class UserGroupNotFoundError(AppException):
    """User group not found."""

    def __init__(self, user_group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_GROUP_NOT_FOUND,
            message=f"User group not found: {user_group_id}",
            status_code=404,
            details={"user_group_id": user_group_id},
        )


class UserGroupConflictError(AppException):
    """User group was modified by someone else since it was read."""

    def __init__(self, user_group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_GROUP_CONFLICT,
            message=f"User group was modified concurrently: {user_group_id}",
            status_code=409,
            details={"user_group_id": user_group_id},
        )


class EntityValidationError(AppException):
    """Domain entity failed validation before persistence."""

    def __init__(self, entity_type: str, errors: list[dict[str, Any]]) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=f"Invalid {entity_type}",
            status_code=400,
            details=errors,
        )
