from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

"""Metadata document models (token-metadata convention).

Serialized key order is fixed: name, description, image, video?,
external_url?, attributes. Optional URL fields are absent (not null, not "")
when unset.
"""

__all__ = [
    "DISPLAY_TYPE_STRING",
    "AttributeEntry",
    "MetadataDocument",
]

DISPLAY_TYPE_STRING = "string"


@dataclass(frozen=True)
class AttributeEntry:
    trait_type: str
    value: Any  # str for every built-in variant
    display_type: str = DISPLAY_TYPE_STRING

    def to_dict(self) -> dict[str, Any]:
        return {
            "trait_type": self.trait_type,
            "value": self.value,
            "display_type": self.display_type,
        }


@dataclass(frozen=True)
class MetadataDocument:
    """Output unit; one per input row. name and description always match."""
    name: str
    description: str
    image: str
    video: str | None = None
    external_url: str | None = None
    attributes: list[AttributeEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "image": self.image,
        }
        if self.video is not None:
            data["video"] = self.video
        if self.external_url is not None:
            data["external_url"] = self.external_url
        data["attributes"] = [a.to_dict() for a in self.attributes]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetadataDocument:
        return cls(
            name=data["name"],
            description=data["description"],
            image=data["image"],
            video=data.get("video"),
            external_url=data.get("external_url"),
            attributes=[
                AttributeEntry(
                    trait_type=a["trait_type"],
                    value=a["value"],
                    display_type=a.get("display_type", DISPLAY_TYPE_STRING),
                )
                for a in data.get("attributes", [])
            ],
        )
