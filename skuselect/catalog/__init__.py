"""Catalog models and loading."""

from skuselect.catalog.loader import load_catalog, parse_catalog
from skuselect.catalog.models import Catalog, Dimension, DimensionValue, Variant, VariantId

__all__ = [
    "Catalog",
    "Dimension",
    "DimensionValue",
    "Variant",
    "VariantId",
    "load_catalog",
    "parse_catalog",
]
