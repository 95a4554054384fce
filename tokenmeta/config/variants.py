from __future__ import annotations

from ..models.schema import FieldBinding, OutputSlot, SchemaVariant

"""Built-in schema variants.

default: lowercase media columns (video / image / external_url), includes Set.
product: MP4 URL / IMAGE URL / URL TO PRODUCT media columns, no Set.
"""

__all__ = [
    "DEFAULT_VARIANT",
    "PRODUCT_VARIANT",
    "UnknownVariantError",
    "get_variant",
    "variant_names",
]


def _attr(column: str, label: str) -> FieldBinding:
    return FieldBinding(column, OutputSlot.ATTRIBUTE, label)


DEFAULT_VARIANT = SchemaVariant(
    name="default",
    bindings=(
        FieldBinding("TITLE", OutputSlot.TITLE),
        FieldBinding("image", OutputSlot.IMAGE),
        FieldBinding("video", OutputSlot.VIDEO),
        FieldBinding("external_url", OutputSlot.EXTERNAL_URL),
        _attr("GRADER", "Grader"),
        _attr("SERIAL NUMBER", "Serial Number"),
        _attr("GRADE", "Grade"),
        _attr("YEAR", "Year"),
        _attr("LANGUAGE", "Language"),
        _attr("SET", "Set"),
    ),
)

PRODUCT_VARIANT = SchemaVariant(
    name="product",
    bindings=(
        FieldBinding("TITLE", OutputSlot.TITLE),
        FieldBinding("IMAGE URL", OutputSlot.IMAGE),
        FieldBinding("MP4 URL", OutputSlot.VIDEO),
        FieldBinding("URL TO PRODUCT", OutputSlot.EXTERNAL_URL),
        _attr("GRADER", "Grader"),
        _attr("SERIAL NUMBER", "Serial Number"),
        _attr("GRADE", "Grade"),
        _attr("YEAR", "Year"),
        _attr("LANGUAGE", "Language"),
    ),
)

_VARIANTS: dict[str, SchemaVariant] = {v.name: v for v in (DEFAULT_VARIANT, PRODUCT_VARIANT)}


class UnknownVariantError(KeyError):
    pass


def variant_names() -> list[str]:
    return list(_VARIANTS)


def get_variant(name: str) -> SchemaVariant:
    try:
        return _VARIANTS[name]
    except KeyError:
        raise UnknownVariantError(f"unknown schema variant '{name}' (known: {', '.join(_VARIANTS)})") from None
