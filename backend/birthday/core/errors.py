"""Error Hierarchy — typed, categorized exceptions for every profile failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() produces the REST envelope; to_sse_event() the SSE envelope
    - User-facing text is NOT built here (see core/user_messages.py)

Design Decisions:
    - Single hierarchy with BirthdayError base: one FastAPI handler catches all
    - DatabaseError carries the attempted DataOperation for diagnostics
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from birthday.core.domain_types import DataOperation


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    profile_id: int | None = None
    field_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class BirthdayError(Exception):
    """Base exception for all profile errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            }
        }

    def to_sse_event(self) -> dict:
        """Convert to SSE error event."""
        return {
            "type": "error",
            "data": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "severity": self.severity.value,
                "recoverable": self.severity in (
                    ErrorSeverity.INFO, ErrorSeverity.WARNING, ErrorSeverity.ERROR,
                ),
            },
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ProfileValidationError(BirthdayError):
    """User input violates a profile business rule."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ProfileNotFoundError(BirthdayError):
    """The singleton profile row does not exist."""
    def __init__(self, profile_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Profile '{profile_id}' not found",
            "PROFILE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.profile_id = profile_id


class IncompleteProfileError(BirthdayError):
    """Display data requested for a profile without name or birthday."""
    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Profile is missing required fields: {', '.join(missing)}",
            "PROFILE_INCOMPLETE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.missing = missing


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(BirthdayError):
    """Database operation failed."""
    def __init__(
        self, message: str, operation: DataOperation, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation.value} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
