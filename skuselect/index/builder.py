"""Power-set path index over in-stock variants.

Every in-stock variant contributes one key per non-empty, order-preserving
subsequence of its value names. With dimensions Color and Size, a
variant (Red, S) is registered under ``Red``, ``S`` and ``Red;S``. A
partial selection is therefore reachable exactly when its key is present.

Example:
    >>> index = PathIndexBuilder().build(catalog)
    >>> index.ids_for("Red")
    ('red-s',)
    >>> "Red;M" in index
    False
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator, Mapping

from skuselect.catalog.models import Catalog, VariantId

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"


def join_key(names: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join value names into a canonical key.

    Names must be non-empty and must not contain the delimiter, otherwise
    distinct combinations can collide.
    """
    return delimiter.join(names)


class PathIndex(Mapping[str, tuple[VariantId, ...]]):
    """Read-only mapping from canonical key to in-stock variant ids.

    Ids are listed in catalog order, so ``first(key)`` is always the
    earliest registered variant for that combination.
    """

    def __init__(
        self,
        entries: Mapping[str, Iterable[VariantId]],
        delimiter: str = DEFAULT_DELIMITER,
    ) -> None:
        self._entries: dict[str, tuple[VariantId, ...]] = {
            key: tuple(ids) for key, ids in entries.items()
        }
        self.delimiter = delimiter

    def __getitem__(self, key: str) -> tuple[VariantId, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PathIndex({len(self)} keys, delimiter={self.delimiter!r})"

    def key(self, names: Iterable[str]) -> str:
        return join_key(names, self.delimiter)

    def ids_for(self, key: str) -> tuple[VariantId, ...]:
        """Variant ids for ``key``; empty when the key is unreachable."""
        return self._entries.get(key, ())

    def first(self, key: str) -> VariantId | None:
        ids = self._entries.get(key)
        return ids[0] if ids else None


class PathIndexBuilder:
    """Builds a PathIndex from a catalog.

    Cost is the sum of 2^K over in-stock variants, where K is the number
    of dimensions. Dimension counts in real catalogs are small.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER) -> None:
        if not delimiter:
            raise ValueError("delimiter cannot be empty")
        self.delimiter = delimiter

    def build(self, catalog: Catalog) -> PathIndex:
        entries: dict[str, list[VariantId]] = {}
        full_keys: set[str] = set()
        in_stock = catalog.in_stock()

        for variant in in_stock:
            names = variant.value_names()
            full_key = join_key(names, self.delimiter)
            duplicate = full_key in full_keys
            if duplicate:
                logger.warning(
                    "Variant %r duplicates combination %r; keeping the first registered variant",
                    variant.id,
                    full_key,
                )
            full_keys.add(full_key)

            for key in self._subsequence_keys(names):
                # A full combination resolves to a single variant.
                if duplicate and key == full_key:
                    continue
                entries.setdefault(key, []).append(variant.id)

        logger.debug(
            "Built path index: %d in-stock variant(s) of %d, %d key(s)",
            len(in_stock),
            len(catalog.variants),
            len(entries),
        )
        return PathIndex(entries, self.delimiter)

    def _subsequence_keys(self, names: tuple[str, ...]) -> Iterator[str]:
        """Keys for every non-empty order-preserving subsequence of ``names``."""
        for size in range(1, len(names) + 1):
            for positions in itertools.combinations(range(len(names)), size):
                yield join_key((names[i] for i in positions), self.delimiter)
