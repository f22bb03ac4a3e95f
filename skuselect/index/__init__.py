"""Combinatorial path index over stocked variants."""

from skuselect.index.builder import DEFAULT_DELIMITER, PathIndex, PathIndexBuilder, join_key

__all__ = ["DEFAULT_DELIMITER", "PathIndex", "PathIndexBuilder", "join_key"]
