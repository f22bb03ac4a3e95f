"""Resolve a completed combination to a variant summary."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from skuselect.catalog.models import Catalog, VariantId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantSummary:
    """Normalized view of a resolved variant.

    Attributes:
        id: Variant id.
        price: Current price.
        old_price: Previous price, if any.
        inventory: Units in stock.
        description: Options formatted as ``"Color: Red Size: S"``.
        extra: Pass-through fields from the catalog record.
    """

    id: VariantId
    price: float
    old_price: float | None
    inventory: int
    description: str
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "price": self.price,
            "oldPrice": self.old_price,
            "inventory": self.inventory,
            "description": self.description,
        }
        if self.extra:
            result["extra"] = dict(self.extra)
        return result


class VariantResolver:
    """Looks up variants by id and builds their summaries.

    A missing id means the index and the catalog disagree; it is logged
    and reported as None rather than raised.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def resolve(self, variant_id: VariantId) -> VariantSummary | None:
        variant = self.catalog.variant_by_id(variant_id)
        if variant is None:
            logger.warning("Resolved variant %r is not in the catalog; skipping", variant_id)
            return None

        return VariantSummary(
            id=variant.id,
            price=variant.price,
            old_price=variant.old_price,
            inventory=variant.inventory,
            description=variant.describe(),
            extra=dict(variant.extra),
        )
