"""Catalog domain models.

A catalog is the input to everything in skuselect:
- Dimension: one axis of product variation (e.g. Color)
- DimensionValue: one option within a dimension (e.g. Red)
- Variant: one purchasable combination, one value per dimension
- Catalog: the dimensions and variants together

Example:
    >>> catalog = Catalog.model_validate({
    ...     "dimensions": [
    ...         {"name": "Color", "values": ["Red", "Blue"]},
    ...         {"name": "Size", "values": ["S", "M"]},
    ...     ],
    ...     "variants": [
    ...         {"id": "red-s", "price": 10, "inventory": 5,
    ...          "options": {"Color": "Red", "Size": "S"}},
    ...     ],
    ... })
    >>> catalog.variants[0].value_names()
    ('Red', 'S')
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

VariantId = str | int


class DimensionValue(BaseModel):
    """One concrete option within a dimension.

    ``selected`` and ``disabled`` are only ever written by the selection
    controller, on the selection state's own copy of the dimensions.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    description: str = ""
    image: str | None = None
    selected: bool = False
    disabled: bool = False

    @model_validator(mode="after")
    def default_description(self) -> DimensionValue:
        if not self.description:
            self.description = self.name
        return self


class Dimension(BaseModel):
    """One axis of variation with its ordered values."""

    model_config = ConfigDict(extra="forbid")

    id: str | int | None = None
    name: str = Field(..., min_length=1)
    values: list[DimensionValue] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def coerce_plain_values(cls, v: Any) -> Any:
        """Accept bare names as shorthand for ``{"name": ...}``."""
        if isinstance(v, list):
            return [{"name": str(item)} if isinstance(item, str | int | float) else item for item in v]
        return v

    @model_validator(mode="after")
    def validate_values(self) -> Dimension:
        if self.id is None:
            self.id = self.name
        seen: set[str] = set()
        duplicates = []
        for value in self.values:
            if value.name in seen:
                duplicates.append(value.name)
            seen.add(value.name)
        if duplicates:
            raise ValueError(f"Dimension '{self.name}' has duplicate values: {duplicates}")
        return self

    def value(self, name: str) -> DimensionValue | None:
        """Get a value by name, or None if absent."""
        for value in self.values:
            if value.name == name:
                return value
        return None

    def selected_value(self) -> DimensionValue | None:
        """Get the currently selected value, if any."""
        for value in self.values:
            if value.selected:
                return value
        return None


class Variant(BaseModel):
    """A concrete stocked combination (SKU).

    ``options`` holds one ``(dimension_name, value_name)`` pair per
    dimension, in catalog dimension order. Any input key that is not a
    known field is collected into ``extra`` and passed through untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    id: VariantId
    price: float
    old_price: float | None = Field(default=None, alias="oldPrice")
    inventory: int = Field(default=0, ge=0)
    options: list[tuple[str, str]] = Field(default_factory=list)
    extra: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def collect_extra(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = {"id", "price", "old_price", "oldPrice", "inventory", "options", "extra"}
        extra = dict(data.get("extra") or {})
        extra.update({k: v for k, v in data.items() if k not in known})
        result = {k: v for k, v in data.items() if k in known}
        result["extra"] = extra
        return result

    @field_validator("options", mode="before")
    @classmethod
    def coerce_options(cls, v: Any) -> Any:
        """Accept an ordered mapping or a list of ``{dimension, value}`` dicts."""
        if isinstance(v, dict):
            v = list(v.items())
        if isinstance(v, list):
            pairs = [
                (item["dimension"], item["value"]) if isinstance(item, dict) else item
                for item in v
            ]
            # YAML reads bare sizes like 40 as numbers.
            return [
                tuple(str(p) if isinstance(p, int | float) else p for p in pair)
                if isinstance(pair, list | tuple)
                else pair
                for pair in pairs
            ]
        return v

    def value_names(self) -> tuple[str, ...]:
        """Value names in dimension order."""
        return tuple(value for _, value in self.options)

    def describe(self) -> str:
        """Format options as ``"Color: Red Size: S"``."""
        return " ".join(f"{dimension}: {value}" for dimension, value in self.options)


class Catalog(BaseModel):
    """Dimensions and variants supplied once at construction."""

    model_config = ConfigDict(extra="ignore")

    dimensions: list[Dimension] = Field(default_factory=list)
    variants: list[Variant] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> Catalog:
        seen: set[VariantId] = set()
        duplicates = []
        for variant in self.variants:
            if variant.id in seen:
                duplicates.append(variant.id)
            seen.add(variant.id)
        if duplicates:
            raise ValueError(f"Catalog has duplicate variant ids: {duplicates}")
        return self

    @property
    def dimension_names(self) -> list[str]:
        return [d.name for d in self.dimensions]

    def in_stock(self) -> list[Variant]:
        """Variants with ``inventory > 0``, in catalog order."""
        return [v for v in self.variants if v.inventory > 0]

    def variant_by_id(self, variant_id: VariantId) -> Variant | None:
        """Variant registered under ``variant_id``, or None."""
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None
