from __future__ import annotations

import json
from pathlib import Path

from ..errors import IoError
from ..models.metadata import MetadataDocument

"""Document writer: pretty JSON, one file per document named by its identifier."""

__all__ = [
    "serialize_document",
    "write_document",
]


def serialize_document(document: MetadataDocument, *, indent: int = 2) -> str:
    # no trailing newline; non-ASCII written as-is
    return json.dumps(document.to_dict(), indent=indent, ensure_ascii=False)


def write_document(
    document: MetadataDocument,
    identifier: int,
    output_dir: Path,
    *,
    indent: int = 2,
) -> Path:
    """Write ``document`` to ``output_dir/<identifier>``, overwriting any existing file.

    Raises:
        IoError: the directory cannot be created or the file cannot be written.
    """
    target = output_dir / str(identifier)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(serialize_document(document, indent=indent), encoding="utf-8")
    except OSError as e:
        raise IoError(f"cannot write metadata file ({e.strerror or e})", target) from e
    return target
