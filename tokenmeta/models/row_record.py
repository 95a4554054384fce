from __future__ import annotations

from dataclasses import dataclass

"""RowRecord model: one parsed CSV row bound to the recognized columns."""

__all__ = [
    "RowRecord",
]


@dataclass(frozen=True)
class RowRecord:
    """Logical representation of a single data row.

    Values are the raw cell strings (never trimmed, may be empty), keyed by
    the recognized column names of the active schema variant.
    """
    row_number: int  # 1-based data row index (header excluded)
    values: dict[str, str]

    def get(self, column: str | None) -> str:
        if column is None:
            return ""
        return self.values.get(column, "")
