# 📄 File: soundcave/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the SoundCave app uses to say what went wrong
# in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# All modules for error handling, error handling middleware, API endpoints, domain services

from typing import Any, Dict, Optional

from fastapi import status


class SoundCaveException(Exception):
    """
    Base exception class for the SoundCave application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(SoundCaveException):
    """
    Exception raised for authentication failures.

    ``reason`` distinguishes a missing credential, a malformed header,
    and an expired or invalid token.
    """

    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED_CREDENTIAL = "malformed_credential"
    EXPIRED_CREDENTIAL = "expired_credential"
    INVALID_CREDENTIAL = "invalid_credential"

    def __init__(
        self,
        message: str = "Authentication failed",
        reason: str = INVALID_CREDENTIAL,
        cause: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        details["reason"] = reason
        if cause:
            details["cause"] = cause

        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="UNAUTHENTICATED"
        )
        self.reason = reason


class AuthorizationError(SoundCaveException):
    """
    Exception raised when a valid caller lacks the role or ownership
    an operation requires.
    """

    def __init__(
        self,
        message: str = "Access denied",
        required_role: Optional[str] = None,
        actual_role: Optional[str] = None,
        reason: str = "insufficient_role",
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        details["reason"] = reason
        if required_role:
            details["required_role"] = required_role
        if actual_role:
            details["actual_role"] = actual_role

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="FORBIDDEN"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(SoundCaveException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(SoundCaveException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class ConflictError(SoundCaveException):
    """
    Exception raised for resource conflicts.
    Used for duplicate resources, existing relationships and self references.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        resource_type: Optional[str] = None,
        conflict_field: Optional[str] = None,
        existing_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if conflict_field:
            details["conflict_field"] = conflict_field
        if existing_value is not None:
            details["existing_value"] = str(existing_value)

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="CONFLICT"
        )


class InvalidStateError(SoundCaveException):
    """
    Exception raised when an operation does not apply to the current state,
    such as removing a relationship that does not exist.
    """

    def __init__(
        self,
        message: str = "Operation not valid in the current state",
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if resource_type:
            details["resource_type"] = resource_type

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_STATE"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class ExternalServiceError(SoundCaveException):
    """
    Exception raised when an upstream service (identity provider,
    object store) fails or is unreachable.
    """

    def __init__(
        self,
        message: str = "External service error",
        service_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if service_name:
            details["service_name"] = service_name

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_SERVICE_ERROR"
        )


class FileStorageError(SoundCaveException):
    """
    Exception raised for object storage failures.
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        operation: Optional[str] = None,
        file_path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if file_path:
            details["file_path"] = file_path

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="FILE_STORAGE_ERROR"
        )


class FileTooLargeError(SoundCaveException):
    """
    Exception raised when an uploaded file exceeds the size limit.
    """

    def __init__(
        self,
        message: str = "File too large",
        file_size: Optional[int] = None,
        max_size: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if file_size is not None:
            details["file_size"] = file_size
        if max_size is not None:
            details["max_size"] = max_size

        super().__init__(
            message=message,
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details=details,
            error_code="FILE_TOO_LARGE"
        )


class InvalidFileTypeError(SoundCaveException):
    """
    Exception raised when an uploaded file has a disallowed type or
    unreadable content.
    """

    def __init__(
        self,
        message: str = "Invalid file type",
        content_type: Optional[str] = None,
        allowed_types: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if content_type:
            details["content_type"] = content_type
        if allowed_types:
            details["allowed_types"] = sorted(allowed_types)

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_FILE_TYPE"
        )


class InternalError(SoundCaveException):
    """
    Opaque server-side failure.

    Only the correlation id is exposed to the caller; the underlying
    exception is logged server-side under the same id.
    """

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        message: str = "An internal error occurred"
    ):
        details = {"correlation_id": correlation_id} if correlation_id else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="INTERNAL_ERROR"
        )
        self.correlation_id = correlation_id
