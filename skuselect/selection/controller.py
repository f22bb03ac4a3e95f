"""Selection state machine.

The controller exposes a single action, ``toggle``. Each toggle runs to
completion before returning:

1. Ignore the action if the value is disabled.
2. Deselect the value, or select it and clear its siblings.
3. Recompute every ``disabled`` flag from the path index.
4. If every dimension now has a selection, resolve and emit the variant.

Example:
    >>> controller = SelectionController(state, index, resolver, emitter)
    >>> controller.toggle("Color", "Red")
    >>> summary = controller.toggle("Size", "S")
    >>> summary.description
    'Color: Red Size: S'
"""

from __future__ import annotations

import logging

from skuselect.catalog.models import Dimension, DimensionValue
from skuselect.index.builder import PathIndex
from skuselect.selection.emitter import ChangeEmitter
from skuselect.selection.resolver import VariantResolver, VariantSummary
from skuselect.selection.state import SelectionState

logger = logging.getLogger(__name__)


class SelectionController:
    """Mutates a SelectionState in response to choice actions."""

    def __init__(
        self,
        state: SelectionState,
        index: PathIndex,
        resolver: VariantResolver,
        emitter: ChangeEmitter | None = None,
    ) -> None:
        self.state = state
        self.index = index
        self.resolver = resolver
        self.emitter = emitter

    def toggle(
        self,
        dimension: str | Dimension,
        value: str | DimensionValue,
    ) -> VariantSummary | None:
        """Select or deselect ``value`` in ``dimension``.

        Returns the emitted summary when the toggle completes the
        selection, otherwise None. Toggling a disabled value changes
        nothing.

        Raises:
            UnknownSelectionError: The dimension or value does not exist.
        """
        dimension_name = dimension if isinstance(dimension, str) else dimension.name
        value_name = value if isinstance(value, str) else value.name
        target_dimension = self.state.dimension(dimension_name)
        target = self.state.value(dimension_name, value_name)

        if target.disabled:
            logger.debug("Ignoring toggle of disabled value %s=%s", dimension_name, value_name)
            return None

        if target.selected:
            target.selected = False
            logger.debug("Deselected %s=%s", dimension_name, value_name)
        else:
            for sibling in target_dimension.values:
                sibling.selected = False
            target.selected = True
            logger.debug("Selected %s=%s", dimension_name, value_name)

        self.recompute_disabled()
        return self.check_completion()

    def reset(self) -> None:
        """Clear every selection and recompute reachability."""
        for dimension in self.state.dimensions:
            for value in dimension.values:
                value.selected = False
        self.recompute_disabled()

    def recompute_disabled(self) -> None:
        """Recompute ``disabled`` for every value from the current selection.

        A value is probed together with the selections of all other
        dimensions. Unselected dimensions are left out of the probe key
        rather than treated as wildcards.
        """
        selected = self.state.selected_names()
        for i, dimension in enumerate(self.state.dimensions):
            for value in dimension.values:
                probe = [
                    value.name if j == i else name
                    for j, name in enumerate(selected)
                ]
                key = self.index.key(name for name in probe if name is not None)
                value.disabled = key not in self.index

    def check_completion(self) -> VariantSummary | None:
        """Resolve and emit the variant if every dimension is selected."""
        if not self.state.is_complete():
            return None

        key = self.index.key(self.state.selected_names())
        variant_id = self.index.first(key)
        if variant_id is None:
            logger.warning("Complete selection %r has no in-stock variant", key)
            return None

        summary = self.resolver.resolve(variant_id)
        if summary is None:
            return None

        logger.info("Selection complete: %s -> %r", key, variant_id)
        if self.emitter is not None:
            self.emitter.emit(summary)
        return summary
