"""Mutable per-dimension selection flags."""

from __future__ import annotations

from skuselect.catalog.models import Catalog, Dimension, DimensionValue
from skuselect.errors import ErrorCode, ErrorContext, UnknownSelectionError
from skuselect.index.builder import PathIndex

FlagSnapshot = tuple[tuple[tuple[str, bool, bool], ...], ...]


class SelectionState:
    """Owns the ``selected``/``disabled`` flags for every dimension value.

    The dimensions are deep-copied from the catalog, so toggling never
    alters the source catalog. The state is created once and then only
    mutated by a SelectionController.

    Initially nothing is selected and a value is disabled when no
    in-stock variant carries it.
    """

    def __init__(self, catalog: Catalog, index: PathIndex) -> None:
        self._dimensions: list[Dimension] = [
            dimension.model_copy(deep=True) for dimension in catalog.dimensions
        ]
        for dimension in self._dimensions:
            for value in dimension.values:
                value.selected = False
                value.disabled = value.name not in index

    @property
    def dimensions(self) -> list[Dimension]:
        return self._dimensions

    def dimension(self, name: str) -> Dimension:
        for dimension in self._dimensions:
            if dimension.name == name:
                return dimension
        raise UnknownSelectionError(
            f"Unknown dimension: {name}",
            error_code=ErrorCode.UNKNOWN_DIMENSION,
            context=ErrorContext(dimension=name),
        )

    def value(self, dimension: str, value: str) -> DimensionValue:
        found = self.dimension(dimension).value(value)
        if found is None:
            raise UnknownSelectionError(
                f"Unknown value '{value}' for dimension '{dimension}'",
                context=ErrorContext(dimension=dimension, value=value),
            )
        return found

    def selected_names(self) -> list[str | None]:
        """Selected value name per dimension, None where unselected."""
        names = []
        for dimension in self._dimensions:
            selected = dimension.selected_value()
            names.append(selected.name if selected else None)
        return names

    def selected_map(self) -> dict[str, str]:
        """Dimension name to selected value name, selected dimensions only."""
        return {
            dimension.name: name
            for dimension, name in zip(self._dimensions, self.selected_names())
            if name is not None
        }

    def disabled_names(self) -> dict[str, list[str]]:
        return {
            dimension.name: [v.name for v in dimension.values if v.disabled]
            for dimension in self._dimensions
        }

    def is_complete(self) -> bool:
        """True when every dimension has a selection (never for zero dimensions)."""
        names = self.selected_names()
        return bool(names) and all(name is not None for name in names)

    def snapshot(self) -> FlagSnapshot:
        """Hashable copy of every ``(name, selected, disabled)`` flag."""
        return tuple(
            tuple((v.name, v.selected, v.disabled) for v in dimension.values)
            for dimension in self._dimensions
        )
