"""Error Hierarchy — typed, categorized exceptions for all warehouse failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors stop an entity from being constructed at all
    - State errors leave the entity graph exactly as it was before the call
    - Persistence errors keep the driver exception as __cause__
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with WarehouseError base: API and CLI boundaries catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


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
    box_id: int | None = None
    pallet_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class WarehouseError(Exception):
    """Base exception for all warehouse errors."""

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
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "box_id": self.context.box_id,
                    "pallet_id": self.context.pallet_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Validation Errors (construction) ───────────────────────────

class EntityValidationError(WarehouseError):
    """Entity construction rejected: non-positive value, missing or inverted dates."""
    def __init__(self, message: str, code: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


# ─── State Errors (membership mutation) ─────────────────────────

class StateError(WarehouseError):
    """A membership change would break a Box/Pallet relationship invariant."""
    def __init__(self, message: str, code: str, context: ErrorContext | None = None):
        super().__init__(
            message, code, ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )


class BoxTooLargeError(StateError):
    """Box footprint exceeds the pallet footprint."""
    def __init__(self, box_id: int, pallet_id: int):
        super().__init__(
            f"Box {box_id} does not fit the footprint of pallet {pallet_id}",
            "BOX_TOO_LARGE",
            ErrorContext(box_id=box_id, pallet_id=pallet_id, operation="add_box"),
        )


class BoxOnAnotherPalletError(StateError):
    """Box is already owned by a different pallet."""
    def __init__(self, box_id: int, owner_id: int | None, pallet_id: int):
        super().__init__(
            f"Box {box_id} is already on another pallet ({owner_id})",
            "BOX_ON_ANOTHER_PALLET",
            ErrorContext(
                box_id=box_id, pallet_id=pallet_id, operation="add_box",
                debug_info={"owner_pallet_id": owner_id},
            ),
        )


class DuplicateBoxError(StateError):
    """Box is already in this pallet's collection."""
    def __init__(self, box_id: int, pallet_id: int):
        super().__init__(
            f"Box {box_id} has already been added to pallet {pallet_id}",
            "BOX_ALREADY_ON_PALLET",
            ErrorContext(box_id=box_id, pallet_id=pallet_id, operation="add_box"),
        )


class ResourceNotFoundError(WarehouseError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int | str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WarehouseError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.operation = operation
