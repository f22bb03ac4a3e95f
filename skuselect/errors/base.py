"""Exception hierarchy for skuselect.

The selection core itself never raises for unreachable choices or catalog
inconsistencies; those are silent guards. The errors defined here cover
the edges of the package: loading a catalog, validating its shape, and
addressing a dimension or value that does not exist.

All skuselect errors inherit from SkuSelectError and carry:
- error_code: an ErrorCode enum for programmatic handling
- context: ErrorContext with catalog/dimension/value details
- suggestions: actionable steps to resolve the issue

Example:
    try:
        catalog = load_catalog("catalog.yaml")
    except CatalogLoadError as e:
        print(e.format_verbose())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for skuselect.

    Error codes are organized by category:
    - E1xx: Catalog loading errors
    - E2xx: Catalog validation errors
    - E3xx: Selection errors
    - E9xx: Unknown/internal errors
    """

    CATALOG_NOT_FOUND = "E101"
    CATALOG_UNREADABLE = "E102"
    CATALOG_FORMAT_UNSUPPORTED = "E103"

    CATALOG_INVALID = "E201"

    UNKNOWN_DIMENSION = "E301"
    UNKNOWN_VALUE = "E302"

    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 200:
            return "catalog"
        elif code_num < 300:
            return "validation"
        elif code_num < 400:
            return "selection"
        return "unknown"


@dataclass
class ErrorContext:
    """Structured context describing where an error occurred.

    Attributes:
        source: Catalog file path or other input origin.
        dimension: Dimension name involved in the error.
        value: Dimension value name involved in the error.
        extra: Additional context-specific information.
    """

    source: str | None = None
    dimension: str | None = None
    value: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "source": self.source,
            "dimension": self.dimension,
            "value": self.value,
            "extra": self.extra or None,
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the error location as a readable string."""
        parts = []
        if self.source:
            parts.append(f"source={self.source}")
        if self.dimension:
            parts.append(f"dimension={self.dimension}")
        if self.value:
            parts.append(f"value={self.value}")
        return " > ".join(parts) if parts else "unknown location"


class SkuSelectError(Exception):
    """Base exception for all skuselect errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with details
        suggestions: List of actionable steps to resolve the issue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [f"Error [{self.error_code.value}]: {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class CatalogLoadError(SkuSelectError):
    """A catalog file could not be found, read, or parsed."""

    error_code = ErrorCode.CATALOG_UNREADABLE
    default_message = "Failed to load catalog"
    default_suggestions = [
        "Check that the catalog path exists and is readable",
        "Catalog files must be JSON (.json) or YAML (.yaml, .yml)",
    ]


class CatalogValidationError(SkuSelectError):
    """A catalog does not match the expected dimensions/variants shape.

    The ``errors`` attribute holds the per-field messages reported by
    the model validation.
    """

    error_code = ErrorCode.CATALOG_INVALID
    default_message = "Invalid catalog"
    default_suggestions = [
        "A catalog needs top-level 'dimensions' and 'variants' lists",
        "Every value name must be non-empty and unique within its dimension",
        "Variant inventory must be an integer >= 0",
    ]

    def __init__(
        self,
        message: str | None = None,
        errors: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        self.errors = errors or []
        super().__init__(message=message, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = self.errors
        return result


class UnknownSelectionError(SkuSelectError):
    """A toggle addressed a dimension or value that is not in the state."""

    error_code = ErrorCode.UNKNOWN_VALUE
    default_message = "Unknown dimension value"
    default_suggestions = [
        "Dimension and value names are case-sensitive",
        "Run 'skuselect index <catalog>' to list the known values",
    ]
