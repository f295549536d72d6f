"""
Custom Exceptions for Jobtrack

Business logic exceptions with user-friendly messages and proper error codes.
Every exception carries the HTTP status it is rendered with.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone
from enum import Enum

from fastapi import status


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    DATABASE = "database"
    SYSTEM = "system"


class BaseApplicationException(Exception):
    """
    Base exception for all application-specific errors.

    Provides structured error information for consistent error handling
    and user-friendly error responses.
    """

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        error_code: Optional[str] = None,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.details = details or {}
        self.headers = headers
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "error_code": self.error_code,
            "message": self.user_message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details
        }


# Validation Exceptions
class BadRequestException(BaseApplicationException):
    """Exception for requests rejected on their content."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("error_code", "BAD_REQUEST")
        super().__init__(
            message=message,
            category=ErrorCategory.VALIDATION,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_400_BAD_REQUEST,
            **kwargs
        )


class EmptyJobFieldException(BadRequestException):
    """Raised when an update would blank out company or position."""

    def __init__(self, fields: list, **kwargs):
        super().__init__(
            message="Company or Position fields cannot be empty",
            error_code="EMPTY_JOB_FIELD",
            details={"fields": fields},
            **kwargs
        )


class ReadOnlyUserException(BadRequestException):
    """Raised when the demo account attempts a mutation."""

    def __init__(self, user_id: str, **kwargs):
        super().__init__(
            message="Test user - Read Only Permission",
            error_code="READ_ONLY_USER",
            details={"user_id": user_id},
            **kwargs
        )


# Authentication Exceptions
class AuthenticationException(BaseApplicationException):
    """Exception for authentication errors."""

    def __init__(self, message: str = "Authentication required", **kwargs):
        kwargs.setdefault("error_code", "AUTH_REQUIRED")
        super().__init__(
            message=message,
            category=ErrorCategory.AUTHENTICATION,
            severity=ErrorSeverity.MEDIUM,
            http_status=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"},
            **kwargs
        )


class InvalidTokenException(AuthenticationException):
    """Exception for invalid authentication tokens."""

    def __init__(self, **kwargs):
        super().__init__(
            message="Invalid or expired authentication token",
            error_code="INVALID_TOKEN",
            **kwargs
        )


# Resource Exceptions
class ResourceNotFoundException(BaseApplicationException):
    """Exception for resource not found errors."""

    def __init__(self, resource_type: str, resource_id: Optional[str] = None, **kwargs):
        message = f"No {resource_type}"
        if resource_id is not None:
            message += f" with id {resource_id}"

        kwargs.setdefault("error_code", "RESOURCE_NOT_FOUND")
        super().__init__(
            message=message,
            category=ErrorCategory.NOT_FOUND,
            severity=ErrorSeverity.LOW,
            http_status=status.HTTP_404_NOT_FOUND,
            details={"resource_type": resource_type, "resource_id": resource_id},
            **kwargs
        )


class JobNotFoundException(ResourceNotFoundException):
    """Exception for job not found errors."""

    def __init__(self, job_id: Any, **kwargs):
        super().__init__(
            resource_type="job",
            resource_id=str(job_id),
            error_code="JOB_NOT_FOUND",
            **kwargs
        )


# Database Exceptions
class DatabaseException(BaseApplicationException):
    """Exception for database errors."""

    def __init__(self, message: str = "Database operation failed", **kwargs):
        super().__init__(
            message=message,
            user_message="Something went wrong, try again later",
            error_code="DATABASE_ERROR",
            category=ErrorCategory.DATABASE,
            severity=ErrorSeverity.HIGH,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            **kwargs
        )
