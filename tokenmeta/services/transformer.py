from __future__ import annotations

from ..models.metadata import DISPLAY_TYPE_STRING, AttributeEntry, MetadataDocument
from ..models.row_record import RowRecord
from ..models.schema import OutputSlot, SchemaVariant

"""Row -> metadata document mapping.

Pure function driven by a SchemaVariant; never raises. Attribute and URL
values are trimmed, the title is copied verbatim into name and description.
"""

__all__ = [
    "transform_row",
]


def _optional(value: str) -> str | None:
    trimmed = value.strip()
    return trimmed or None


def transform_row(record: RowRecord, variant: SchemaVariant) -> MetadataDocument:
    attributes: list[AttributeEntry] = []
    for binding in variant.attribute_bindings:
        value = record.get(binding.source_column).strip()
        if value:
            attributes.append(
                AttributeEntry(
                    trait_type=binding.trait_label or binding.source_column,
                    value=value,
                    display_type=DISPLAY_TYPE_STRING,
                )
            )

    title = record.get(variant.column_for(OutputSlot.TITLE))
    return MetadataDocument(
        name=title,
        description=title,
        image=record.get(variant.column_for(OutputSlot.IMAGE)).strip(),
        video=_optional(record.get(variant.column_for(OutputSlot.VIDEO))),
        external_url=_optional(record.get(variant.column_for(OutputSlot.EXTERNAL_URL))),
        attributes=attributes,
    )
