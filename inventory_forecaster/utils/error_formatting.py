"""
Error UX & messaging.

Turns forecaster exceptions into ErrorContext objects: a readable message,
severity, context, recovery steps and an error code for log lines.
"""

from typing import Dict, Optional, Any
from dataclasses import dataclass, field
from enum import Enum

from ..domain.errors import (
    AlreadyExistsError,
    ForecasterError,
    HistoryOutOfSyncError,
    InvalidQuantityError,
    NegativeHorizonError,
    NotFoundError,
    ValidationError,
)


# ============================================================
# Error Severity Levels
# ============================================================

class ErrorSeverity(Enum):
    """Error severity classification for presentation."""

    INFO = "info"           # Informational (no action needed)
    WARNING = "warning"     # Caution (optional action)
    ERROR = "error"         # Error (action required)
    CRITICAL = "critical"   # Critical (system-level issue)


# ============================================================
# Error Context
# ============================================================

@dataclass
class ErrorContext:
    """
    Structured error context for user-friendly messaging.

    Attributes:
        message: User-friendly error description
        severity: Error severity level
        technical_details: Technical error info (for logs/debugging)
        context: Additional context (product, operation, data)
        recovery_steps: List of recovery actions user can take
        error_code: Optional error code for support/documentation
    """
    message: str
    severity: ErrorSeverity
    technical_details: str
    context: Dict[str, Any] = field(default_factory=dict)
    recovery_steps: list = field(default_factory=list)
    error_code: Optional[str] = None

    def format_for_display(self, include_technical: bool = False) -> str:
        """
        Format error for console display.

        Args:
            include_technical: Include technical details in message
        """
        lines = [self.message]

        if self.context:
            lines.append("")
            lines.append("Details:")
            for key, value in self.context.items():
                if value is not None:
                    lines.append(f"  • {key}: {value}")

        if self.recovery_steps:
            lines.append("")
            lines.append("Suggested actions:")
            for i, step in enumerate(self.recovery_steps, 1):
                lines.append(f"  {i}. {step}")

        if include_technical and self.technical_details:
            lines.append("")
            lines.append("Technical details:")
            lines.append(f"  {self.technical_details}")

        if self.error_code:
            lines.append("")
            lines.append(f"Error code: {self.error_code}")

        return "\n".join(lines)

    def format_for_log(self) -> str:
        """Format error for structured logging."""
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items() if v is not None)
        return f"[{self.severity.value.upper()}] {self.message} | Context: {context_str} | Technical: {self.technical_details}"


# ============================================================
# Error Formatters (Transform technical → user-friendly)
# ============================================================

class ErrorFormatter:
    """
    Main error formatting utility.
    Transforms exceptions into user-friendly ErrorContext objects.
    """

    @staticmethod
    def format_forecaster_error(
        exc: Exception,
        operation: str,
        product: Optional[str] = None,
        additional_context: Optional[Dict[str, Any]] = None
    ) -> ErrorContext:
        """
        Format errors raised by registry, history, forecast or workflows.

        Args:
            exc: The exception raised
            operation: Operation that failed (e.g., "record_sale", "add_product")
            product: Product involved (if applicable)
            additional_context: Additional context data

        Returns:
            ErrorContext with user-friendly message and recovery steps
        """
        context: Dict[str, Any] = {"Operation": operation}
        if product:
            context["Product"] = product
        if additional_context:
            context.update(additional_context)

        technical = f"{type(exc).__name__}: {exc}"

        if isinstance(exc, NotFoundError):
            return ErrorContext(
                message=f"Product not found: {exc}",
                severity=ErrorSeverity.WARNING,
                technical_details=technical,
                context=context,
                recovery_steps=[
                    "Check the product name (matching ignores case)",
                    "Register the product before recording sales or updates",
                ],
                error_code="INV_001",
            )

        elif isinstance(exc, AlreadyExistsError):
            return ErrorContext(
                message=f"Product already exists: {exc}",
                severity=ErrorSeverity.WARNING,
                technical_details=technical,
                context=context,
                recovery_steps=[
                    "Use a different name, or update the existing product instead",
                ],
                error_code="INV_002",
            )

        elif isinstance(exc, InvalidQuantityError):
            return ErrorContext(
                message=f"Invalid sale quantity: {exc}",
                severity=ErrorSeverity.ERROR,
                technical_details=technical,
                context=context,
                recovery_steps=[
                    "Enter a whole number of units greater than zero",
                ],
                error_code="INV_003",
            )

        elif isinstance(exc, NegativeHorizonError):
            return ErrorContext(
                message=f"Invalid forecast horizon: {exc}",
                severity=ErrorSeverity.ERROR,
                technical_details=technical,
                context=context,
                recovery_steps=[
                    "Use a horizon of zero or more days",
                ],
                error_code="INV_004",
            )

        elif isinstance(exc, HistoryOutOfSyncError):
            return ErrorContext(
                message=f"Product history is out of sync: {exc}",
                severity=ErrorSeverity.ERROR,
                technical_details=technical,
                context=context,
                recovery_steps=[
                    "Reset the forecaster (products and history together)",
                    "Register the products again",
                ],
                error_code="INV_006",
            )

        elif isinstance(exc, ValidationError):
            return ErrorContext(
                message=f"Invalid input: {exc}",
                severity=ErrorSeverity.ERROR,
                technical_details=technical,
                context=context,
                recovery_steps=[
                    "Names cannot be empty; stock must be an integer",
                    "Cost and price must be numbers >= 0",
                ],
                error_code="INV_005",
            )

        elif isinstance(exc, ForecasterError):
            return ErrorContext(
                message=f"Operation failed: {exc}",
                severity=ErrorSeverity.ERROR,
                technical_details=technical,
                context=context,
                recovery_steps=["Check the input values and retry"],
                error_code="INV_999",
            )

        # Fallback for unknown errors
        else:
            return ErrorContext(
                message=f"Unexpected error during {operation}",
                severity=ErrorSeverity.CRITICAL,
                technical_details=technical,
                context=context,
                recovery_steps=[
                    "Retry the operation",
                    "If the error persists, check the log file",
                ],
                error_code="INV_UNKNOWN",
            )

    @staticmethod
    def format_validation_error(
        field_name: str,
        value: Any,
        constraint: str,
        expected: Optional[str] = None
    ) -> ErrorContext:
        """
        Format validation errors (command-line input, settings values).

        Args:
            field_name: Field name that failed validation
            value: Value that was rejected
            constraint: Constraint that was violated
            expected: Expected value/format (optional)
        """
        message = f"Field '{field_name}' is not valid"
        if expected:
            message += f": {expected}"

        recovery_steps = [f"Check the value of '{field_name}'"]
        if "date" in constraint.lower():
            recovery_steps.append("Date format: YYYY-MM-DD (e.g. 2026-01-28)")
        elif "range" in constraint.lower() or "positive" in constraint.lower():
            recovery_steps.append("Check that the value is within the allowed range")

        return ErrorContext(
            message=message,
            severity=ErrorSeverity.WARNING,
            technical_details=f"Validation failed: {constraint}",
            context={"Field": field_name, "Value": value},
            recovery_steps=recovery_steps,
            error_code="VAL_001",
        )
