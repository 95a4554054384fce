from __future__ import annotations

from pathlib import Path

"""Error kinds raised by the generation pipeline.

Every error is fatal to the run: the orchestrator records it in the error log
and re-raises, the CLI reports it and exits 1.
"""

__all__ = [
    "ProcessingError",
    "IoError",
    "ParseError",
]


class ProcessingError(Exception):
    """Base exception for pipeline errors."""

    error_type = "PROCESSING_ERROR"


class IoError(ProcessingError):
    """A file could not be opened, read or written."""

    error_type = "IO_ERROR"

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class ParseError(ProcessingError):
    """A row (or the header, row 0) does not fit the expected columns."""

    error_type = "PARSE_ERROR"

    def __init__(self, message: str, row: int = -1, column: str | None = None) -> None:
        location = f"row {row}" if row >= 0 else "unknown row"
        if column is not None:
            location += f", column '{column}'"
        super().__init__(f"{message} ({location})")
        self.row = row
        self.column = column
