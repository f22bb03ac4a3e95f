"""Pytest fixtures for skuselect tests."""

from __future__ import annotations

from typing import Any

import pytest

from skuselect.catalog import Catalog
from skuselect.index import PathIndexBuilder
from skuselect.selection import (
    ChangeListeners,
    SelectionController,
    SelectionState,
    VariantResolver,
    VariantSummary,
)


def make_catalog(
    dimensions: dict[str, list[str]],
    variants: list[tuple[str, tuple[str, ...], int]],
) -> Catalog:
    """Build a catalog from ``{dim: [values]}`` and ``(id, values, inventory)`` rows."""
    names = list(dimensions)
    return Catalog.model_validate(
        {
            "dimensions": [{"name": name, "values": values} for name, values in dimensions.items()],
            "variants": [
                {
                    "id": variant_id,
                    "price": 10.0,
                    "inventory": inventory,
                    "options": list(zip(names, values)),
                }
                for variant_id, values, inventory in variants
            ],
        }
    )


@pytest.fixture
def shirt_data() -> dict[str, Any]:
    """Color{Red, Blue} x Size{S, M}; Red/M is out of stock, Blue/M does not exist."""
    return {
        "dimensions": [
            {"id": "c", "name": "Color", "values": ["Red", "Blue"]},
            {"id": "s", "name": "Size", "values": ["S", "M"]},
        ],
        "variants": [
            {
                "id": "red-s",
                "price": 19.99,
                "oldPrice": 24.99,
                "inventory": 5,
                "options": [["Color", "Red"], ["Size", "S"]],
                "sku": "TS-RED-S",
            },
            {
                "id": "red-m",
                "price": 19.99,
                "inventory": 0,
                "options": [["Color", "Red"], ["Size", "M"]],
            },
            {
                "id": "blue-s",
                "price": 17.5,
                "inventory": 3,
                "options": [["Color", "Blue"], ["Size", "S"]],
            },
        ],
    }


@pytest.fixture
def shirt_catalog(shirt_data: dict[str, Any]) -> Catalog:
    return Catalog.model_validate(shirt_data)


@pytest.fixture
def shoe_catalog() -> Catalog:
    """Three dimensions with a sparse set of stocked combinations."""
    return make_catalog(
        {
            "Color": ["Black", "White", "Tan"],
            "Size": ["40", "41", "42"],
            "Width": ["Regular", "Wide"],
        },
        [
            ("b-40-r", ("Black", "40", "Regular"), 2),
            ("b-41-r", ("Black", "41", "Regular"), 1),
            ("b-41-w", ("Black", "41", "Wide"), 4),
            ("w-42-r", ("White", "42", "Regular"), 7),
            ("w-40-w", ("White", "40", "Wide"), 0),
            ("t-42-w", ("Tan", "42", "Wide"), 1),
        ],
    )


class Harness:
    """Index, state, controller and collected emissions for one catalog."""

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self.index = PathIndexBuilder().build(catalog)
        self.state = SelectionState(catalog, self.index)
        self.emitted: list[VariantSummary] = []
        self.controller = SelectionController(
            self.state,
            self.index,
            VariantResolver(catalog),
            ChangeListeners(self.emitted.append),
        )

    def disabled(self) -> set[tuple[str, str]]:
        return {
            (dimension.name, value.name)
            for dimension in self.state.dimensions
            for value in dimension.values
            if value.disabled
        }


@pytest.fixture
def shirt(shirt_catalog: Catalog) -> Harness:
    return Harness(shirt_catalog)


@pytest.fixture
def shoes(shoe_catalog: Catalog) -> Harness:
    return Harness(shoe_catalog)
