"""skuselect error handling.

Exception hierarchy with error codes, structured context and
troubleshooting suggestions.
"""

from skuselect.errors.base import (
    CatalogLoadError,
    CatalogValidationError,
    ErrorCode,
    ErrorContext,
    SkuSelectError,
    UnknownSelectionError,
)

__all__ = [
    "ErrorCode",
    "ErrorContext",
    "SkuSelectError",
    "CatalogLoadError",
    "CatalogValidationError",
    "UnknownSelectionError",
]
