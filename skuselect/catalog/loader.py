"""Load catalogs from JSON/YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skuselect.catalog.models import Catalog
from skuselect.errors import CatalogLoadError, CatalogValidationError, ErrorCode, ErrorContext

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> Catalog:
    """Load and validate a catalog file.

    Raises:
        CatalogLoadError: The file is missing, unreadable or malformed.
        CatalogValidationError: The data does not describe a catalog.
    """
    path = Path(path)
    context = ErrorContext(source=str(path))

    if not path.exists():
        raise CatalogLoadError(
            f"Catalog file not found: {path}",
            error_code=ErrorCode.CATALOG_NOT_FOUND,
            context=context,
        )

    suffix = path.suffix.lower()
    try:
        with open(path, encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            elif suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                raise CatalogLoadError(
                    f"Unsupported catalog format: {suffix or '(none)'}",
                    error_code=ErrorCode.CATALOG_FORMAT_UNSUPPORTED,
                    context=context,
                )
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogLoadError(f"Cannot parse catalog {path}: {e}", context=context, cause=e) from e

    logger.debug("Loaded catalog data from %s", path)
    return parse_catalog(data, source=str(path))


def parse_catalog(data: Any, source: str | None = None) -> Catalog:
    """Validate already-decoded catalog data."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CatalogValidationError(
            f"Catalog must be a mapping, got {type(data).__name__}",
            context=ErrorContext(source=source),
        )
    try:
        return Catalog.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise CatalogValidationError(
            f"Catalog validation failed with {len(errors)} error(s)",
            errors=errors,
            context=ErrorContext(source=source),
            cause=e,
        ) from e
