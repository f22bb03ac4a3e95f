"""Property-based tests for selection invariants.

Random catalogs and random toggle sequences are generated with
Hypothesis. After every toggle the state is checked against a
brute-force scan of the in-stock variants, independent of the index.

Value names are unique across dimensions so that a key names a single
assignment of values to dimensions.
"""

from __future__ import annotations

import itertools

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from skuselect.catalog import Catalog
from tests.conftest import Harness, make_catalog


@st.composite
def catalogs(draw: st.DrawFn) -> Catalog:
    dimension_count = draw(st.integers(min_value=1, max_value=3))
    dimensions = {
        f"D{d}": [f"d{d}v{v}" for v in range(draw(st.integers(min_value=1, max_value=3)))]
        for d in range(dimension_count)
    }
    combinations = list(itertools.product(*dimensions.values()))
    chosen = draw(st.lists(st.sampled_from(combinations), max_size=len(combinations) + 2))
    variants = [
        (f"sku{i}", values, draw(st.integers(min_value=0, max_value=2)))
        for i, values in enumerate(chosen)
    ]
    return make_catalog(dimensions, variants)


toggles = st.lists(
    st.tuples(st.integers(min_value=0, max_value=2), st.integers(min_value=0, max_value=2)),
    max_size=12,
)


def apply(harness: Harness, dimension_index: int, value_index: int) -> None:
    dimensions = harness.state.dimensions
    dimension = dimensions[dimension_index % len(dimensions)]
    value = dimension.values[value_index % len(dimension.values)]
    harness.controller.toggle(dimension.name, value.name)


def reachable(catalog: Catalog, selected: list[str | None], i: int, name: str) -> bool:
    for variant in catalog.in_stock():
        names = variant.value_names()
        if names[i] != name:
            continue
        if all(s is None or names[j] == s for j, s in enumerate(selected) if j != i):
            return True
    return False


def assert_invariants(harness: Harness) -> None:
    selected = harness.state.selected_names()
    for i, dimension in enumerate(harness.state.dimensions):
        assert sum(v.selected for v in dimension.values) <= 1
        for value in dimension.values:
            assert value.disabled == (not reachable(harness.catalog, selected, i, value.name))


class TestSelectionInvariants:
    """Invariants that hold for every catalog and every action sequence."""

    @given(catalog=catalogs(), actions=toggles)
    @settings(max_examples=150, suppress_health_check=[HealthCheck.too_slow])
    def test_flags_match_brute_force_after_every_toggle(self, catalog, actions):
        harness = Harness(catalog)
        assert_invariants(harness)

        for dimension_index, value_index in actions:
            apply(harness, dimension_index, value_index)
            assert_invariants(harness)

    @given(catalog=catalogs(), actions=toggles)
    @settings(max_examples=150)
    def test_emitted_variant_matches_selection(self, catalog, actions):
        harness = Harness(catalog)

        for dimension_index, value_index in actions:
            before = len(harness.emitted)
            flags = harness.state.snapshot()
            apply(harness, dimension_index, value_index)

            if len(harness.emitted) > before:
                summary = harness.emitted[-1]
                variant = catalog.variant_by_id(summary.id)
                assert harness.state.is_complete()
                assert variant.inventory > 0
                assert list(variant.value_names()) == harness.state.selected_names()
            elif harness.state.snapshot() != flags:
                assert not harness.state.is_complete()

    @given(catalog=catalogs(), actions=toggles, target=st.tuples(st.integers(0, 2), st.integers(0, 2)))
    @settings(max_examples=100)
    def test_disabled_toggle_changes_nothing(self, catalog, actions, target):
        harness = Harness(catalog)
        for dimension_index, value_index in actions:
            apply(harness, dimension_index, value_index)

        dimension = harness.state.dimensions[target[0] % len(harness.state.dimensions)]
        value = dimension.values[target[1] % len(dimension.values)]
        if not value.disabled:
            return

        before = harness.state.snapshot()
        emitted = len(harness.emitted)
        harness.controller.toggle(dimension.name, value.name)
        assert harness.state.snapshot() == before
        assert len(harness.emitted) == emitted

    @given(catalog=catalogs(), actions=toggles, target=st.tuples(st.integers(0, 2), st.integers(0, 2)))
    @settings(max_examples=100)
    def test_double_toggle_round_trip(self, catalog, actions, target):
        harness = Harness(catalog)
        for dimension_index, value_index in actions:
            apply(harness, dimension_index, value_index)

        dimension = harness.state.dimensions[target[0] % len(harness.state.dimensions)]
        value = dimension.values[target[1] % len(dimension.values)]
        selected = dimension.selected_value()
        if selected is not None and selected is not value:
            # Selecting a sibling replaces it; the second toggle cannot bring it back.
            return

        before = harness.state.snapshot()
        apply(harness, *target)
        apply(harness, *target)
        assert harness.state.snapshot() == before

    @given(catalog=catalogs(), first=toggles, second=toggles)
    @settings(max_examples=150)
    def test_disabled_flags_depend_only_on_selection(self, catalog, first, second):
        a = Harness(catalog)
        b = Harness(catalog)
        for dimension_index, value_index in first:
            apply(a, dimension_index, value_index)
        for dimension_index, value_index in second:
            apply(b, dimension_index, value_index)

        if a.state.selected_names() == b.state.selected_names():
            assert a.state.snapshot() == b.state.snapshot()
