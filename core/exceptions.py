"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

from typing import Optional, Any, Dict, List


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Report').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ValidationError(AppException):
    """Exception raised when a single input value is unusable."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class MetricsValidationError(AppException):
    """Raised when biometric input fails the range checks.

    Carries every error and warning produced by the validator so that the
    client can show all of them at once.
    """

    def __init__(self, errors: List[str], warnings: Optional[List[str]] = None):
        super().__init__(
            "Invalid body metrics",
            status_code=422,
            details={"errors": list(errors), "warnings": list(warnings or [])},
        )
        self.errors = list(errors)
        self.warnings = list(warnings or [])


class InvalidActivityLevelError(AppException):
    """Raised when an activity level has no multiplier."""

    def __init__(self, activity_level: Any, allowed: List[str]):
        super().__init__(
            f"Unknown activity level: {activity_level}",
            status_code=400,
            details={"activity_level": activity_level, "allowed": allowed},
        )


class UnsupportedExportFormatError(AppException):
    """Raised when a report is requested in a format we cannot produce."""

    def __init__(self, fmt: str, supported: List[str]):
        super().__init__(
            f"Unsupported export format: {fmt}",
            status_code=400,
            details={"format": fmt, "supported": supported},
        )


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'delete').
        """
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
