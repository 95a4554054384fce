from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

"""Schema variant model: declarative column -> output slot bindings.

A SchemaVariant describes one input table shape. Each FieldBinding routes one
source column into one slot of the metadata document; attribute bindings are
kept in declaration order, which is the order of the output attributes.
"""

__all__ = [
    "OutputSlot",
    "FieldBinding",
    "SchemaVariant",
]


class OutputSlot(Enum):
    """Slot of the metadata document a source column feeds."""
    TITLE = "title"
    IMAGE = "image"
    VIDEO = "video"
    EXTERNAL_URL = "external_url"
    ATTRIBUTE = "attribute"


_SINGLE_SLOTS = (OutputSlot.TITLE, OutputSlot.IMAGE)
_OPTIONAL_SLOTS = (OutputSlot.VIDEO, OutputSlot.EXTERNAL_URL)


@dataclass(frozen=True)
class FieldBinding:
    source_column: str  # exact header name in the CSV
    output_slot: OutputSlot
    trait_label: str | None = None  # only for ATTRIBUTE bindings


@dataclass(frozen=True)
class SchemaVariant:
    """Fixed mapping from expected input columns to document slots."""
    name: str
    bindings: tuple[FieldBinding, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for b in self.bindings:
            if b.source_column in seen:
                raise ValueError(f"variant '{self.name}': duplicate column '{b.source_column}'")
            seen.add(b.source_column)
            if b.output_slot is OutputSlot.ATTRIBUTE and not b.trait_label:
                raise ValueError(
                    f"variant '{self.name}': attribute column '{b.source_column}' lacks a trait label"
                )
        for slot in _SINGLE_SLOTS:
            count = sum(1 for b in self.bindings if b.output_slot is slot)
            if count != 1:
                raise ValueError(f"variant '{self.name}': expected exactly one {slot.value} binding, got {count}")
        for slot in _OPTIONAL_SLOTS:
            count = sum(1 for b in self.bindings if b.output_slot is slot)
            if count > 1:
                raise ValueError(f"variant '{self.name}': at most one {slot.value} binding allowed, got {count}")

    @property
    def required_columns(self) -> list[str]:
        """All recognized columns; each must be present in the header."""
        return [b.source_column for b in self.bindings]

    @property
    def attribute_bindings(self) -> list[FieldBinding]:
        return [b for b in self.bindings if b.output_slot is OutputSlot.ATTRIBUTE]

    def column_for(self, slot: OutputSlot) -> str | None:
        """Source column bound to a non-attribute slot (None if unbound)."""
        for b in self.bindings:
            if b.output_slot is slot:
                return b.source_column
        return None
