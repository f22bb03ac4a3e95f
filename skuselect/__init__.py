"""skuselect - incremental variant selection against a stocked catalog.

skuselect indexes every partial combination of dimension values (color,
size, ...) against the in-stock variants of a catalog, then drives a
selection state machine over that index:

- values that would dead-end the user are disabled,
- at most one value per dimension is selected,
- a completed selection resolves to a concrete variant and is emitted.

Example:
    >>> from skuselect import SkuSelector, load_catalog
    >>> selector = SkuSelector(load_catalog("catalog.yaml"), on_change=print)
    >>> selector.toggle("Color", "Red")
    >>> selector.toggle("Size", "S")
"""

from skuselect.catalog import (
    Catalog,
    Dimension,
    DimensionValue,
    Variant,
    VariantId,
    load_catalog,
    parse_catalog,
)
from skuselect.config import SelectorConfig, load_config
from skuselect.errors import (
    CatalogLoadError,
    CatalogValidationError,
    ErrorCode,
    ErrorContext,
    SkuSelectError,
    UnknownSelectionError,
)
from skuselect.index import DEFAULT_DELIMITER, PathIndex, PathIndexBuilder, join_key
from skuselect.selection import (
    ChangeCallback,
    ChangeEmitter,
    ChangeListeners,
    SelectionController,
    SelectionState,
    VariantResolver,
    VariantSummary,
)
from skuselect.selector import SkuSelector

__version__ = "0.1.0"

__all__ = [
    # Catalog
    "Catalog",
    "Dimension",
    "DimensionValue",
    "Variant",
    "VariantId",
    "load_catalog",
    "parse_catalog",
    # Index
    "DEFAULT_DELIMITER",
    "PathIndex",
    "PathIndexBuilder",
    "join_key",
    # Selection
    "SelectionState",
    "SelectionController",
    "VariantResolver",
    "VariantSummary",
    "ChangeEmitter",
    "ChangeListeners",
    "ChangeCallback",
    "SkuSelector",
    # Config
    "SelectorConfig",
    "load_config",
    # Errors
    "ErrorCode",
    "ErrorContext",
    "SkuSelectError",
    "CatalogLoadError",
    "CatalogValidationError",
    "UnknownSelectionError",
]
