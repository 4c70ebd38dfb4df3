"""Error Hierarchy — typed, categorized exceptions for all Notebox failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST body: always "message" and "code",
      plus "field" for errors tied to one input field
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with NoteboxError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Flat {message, field} body over a nested envelope: the web client reads
      error.message directly (ADR: keep client contract)
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


class NoteboxError(Exception):
    """Base exception for all Notebox errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error body."""
        return {"message": self.message, "code": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(NoteboxError):
    """Input shape or value rejected. Carries the first offending field only."""
    def __init__(self, message: str, field: str):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        return {**super().to_response(), "field": self.field}


class NotFoundError(NoteboxError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: int):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class UniqueConstraintError(NoteboxError):
    """A unique column already holds the submitted value."""
    def __init__(self, resource_type: str, field: str, value: str):
        super().__init__(
            f"{resource_type} with {field} '{value}' already exists",
            "UNIQUE_CONSTRAINT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, 409,
        )
        self.resource_type = resource_type
        self.field = field
        self.value = value

    def to_response(self) -> dict:
        return {**super().to_response(), "field": self.field}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(NoteboxError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 503,
        )
        self.operation = operation
