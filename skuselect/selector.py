"""One-stop wiring of index, state, controller, resolver and emitter.

Example:
    >>> selector = SkuSelector.from_file("catalog.yaml", on_change=print)
    >>> selector.toggle("Color", "Red")
    >>> selector.state.disabled_names()
    {'Color': [], 'Size': ['M']}
    >>> selector.toggle("Size", "S")
    VariantSummary(id='red-s', ...)
"""

from __future__ import annotations

import logging
from pathlib import Path

from skuselect.catalog.loader import load_catalog
from skuselect.catalog.models import Catalog, Dimension, DimensionValue
from skuselect.config import SelectorConfig
from skuselect.index.builder import PathIndex, PathIndexBuilder
from skuselect.selection.controller import SelectionController
from skuselect.selection.emitter import ChangeCallback, ChangeListeners
from skuselect.selection.resolver import VariantResolver, VariantSummary
from skuselect.selection.state import SelectionState

logger = logging.getLogger(__name__)


class SkuSelector:
    """A selection session over one catalog.

    The index is built once at construction. A catalog change requires a
    new SkuSelector.

    Attributes:
        catalog: The source catalog, never mutated.
        index: The path index built from the catalog.
        state: The mutable selection flags.
        listeners: Callbacks notified on every completed selection.
        last_summary: The most recently emitted summary, if any.
    """

    def __init__(
        self,
        catalog: Catalog,
        on_change: ChangeCallback | None = None,
        config: SelectorConfig | None = None,
    ) -> None:
        self.config = config or SelectorConfig()
        self.catalog = catalog
        self.index: PathIndex = PathIndexBuilder(self.config.delimiter).build(catalog)
        self.state = SelectionState(catalog, self.index)
        self.listeners = ChangeListeners()
        self.last_summary: VariantSummary | None = None

        self.listeners.subscribe(self._remember)
        if on_change is not None:
            self.listeners.subscribe(on_change)

        self.controller = SelectionController(
            self.state,
            self.index,
            VariantResolver(catalog),
            self.listeners,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        on_change: ChangeCallback | None = None,
        config: SelectorConfig | None = None,
    ) -> SkuSelector:
        return cls(load_catalog(path), on_change=on_change, config=config)

    def toggle(
        self,
        dimension: str | Dimension,
        value: str | DimensionValue,
    ) -> VariantSummary | None:
        return self.controller.toggle(dimension, value)

    def reset(self) -> None:
        self.controller.reset()

    def _remember(self, summary: VariantSummary) -> None:
        self.last_summary = summary
