"""Tests for the skuselect error hierarchy."""

from __future__ import annotations

from skuselect.errors import (
    CatalogLoadError,
    CatalogValidationError,
    ErrorCode,
    ErrorContext,
    SkuSelectError,
    UnknownSelectionError,
)


class TestErrorCode:
    def test_categories(self):
        assert ErrorCode.CATALOG_NOT_FOUND.category == "catalog"
        assert ErrorCode.CATALOG_INVALID.category == "validation"
        assert ErrorCode.UNKNOWN_DIMENSION.category == "selection"
        assert ErrorCode.UNKNOWN.category == "unknown"


class TestErrorContext:
    def test_format_location(self):
        context = ErrorContext(source="c.yaml", dimension="Color", value="Red")
        assert context.format_location() == "source=c.yaml > dimension=Color > value=Red"
        assert ErrorContext().format_location() == "unknown location"

    def test_to_dict_drops_empty(self):
        assert ErrorContext(dimension="Size").to_dict() == {"dimension": "Size"}


class TestSkuSelectError:
    def test_hierarchy(self):
        for cls in (CatalogLoadError, CatalogValidationError, UnknownSelectionError):
            assert issubclass(cls, SkuSelectError)

    def test_defaults(self):
        error = CatalogLoadError()
        assert error.message == "Failed to load catalog"
        assert error.error_code == ErrorCode.CATALOG_UNREADABLE
        assert error.suggestions
        assert str(error) == "[E102] Failed to load catalog"

    def test_str_includes_location(self):
        error = UnknownSelectionError(
            "Unknown value 'Green'", context=ErrorContext(dimension="Color", value="Green")
        )
        assert str(error) == "[E302] Unknown value 'Green' | at dimension=Color > value=Green"

    def test_extra_context_and_custom_suggestions(self):
        error = SkuSelectError("boom", suggestions=["try again"], attempt=2)
        assert error.context.extra == {"attempt": 2}
        assert error.suggestions == ["try again"]

    def test_format_verbose(self):
        error = CatalogLoadError("bad file", context=ErrorContext(source="x.json"))
        text = error.format_verbose()
        assert text.startswith("Error [E102]: bad file")
        assert "Location: source=x.json" in text
        assert "Suggestions:" in text

    def test_to_dict(self):
        cause = ValueError("nope")
        data = CatalogValidationError("invalid", errors=["a: b"], cause=cause).to_dict()
        assert data["error_type"] == "CatalogValidationError"
        assert data["error_code"] == "E201"
        assert data["errors"] == ["a: b"]
        assert data["cause"] == "nope"
