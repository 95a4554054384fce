from __future__ import annotations

import csv
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import IoError, ParseError
from ..models.row_record import RowRecord
from ..models.schema import SchemaVariant

"""CSV table reader.

- First line is the header; columns are bound by exact header name.
- Cells are kept as raw strings: no NA conversion, no trimming.
- Columns not named by the schema variant are ignored, but every row must
  carry exactly as many fields as the header.
- Rows are produced lazily (one-row chunks) so that a malformed row N fails
  only after rows 1..N-1 have been handed out.
- Undecodable bytes are carried through as escaped surrogates and reported
  against the row (and column) that holds them.
"""

__all__ = [
    "read_header",
    "missing_columns",
    "validate_header",
    "count_rows",
    "iter_rows",
]

# csv.Error can escape the python engine when a quoted field never closes
_DECODE_ERRORS = (pd.errors.ParserError, UnicodeDecodeError, csv.Error)

# what surrogateescape turns an undecodable byte into
_ESCAPED_BYTE = re.compile("[\udc80-\udcff]")


def _read_csv_kwargs(delimiter: str, encoding: str) -> dict[str, Any]:
    return {
        "sep": delimiter,
        "encoding": encoding,
        "encoding_errors": "surrogateescape",
        "dtype": object,  # no numeric inference, cells stay raw strings
        "keep_default_na": False,  # "" / "NA" / "null" stay literal strings
        "engine": "python",
    }


def _open_error(path: Path, e: OSError) -> IoError:
    return IoError(f"cannot open input file ({e.strerror or e})", path)


def read_header(path: Path, *, delimiter: str = ",", encoding: str = "utf-8") -> list[str]:
    """Return the header column names of a delimited file."""
    try:
        frame = pd.read_csv(path, nrows=0, **_read_csv_kwargs(delimiter, encoding))
    except OSError as e:
        raise _open_error(path, e) from e
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"{path}: no header row", row=0) from e
    except _DECODE_ERRORS as e:
        raise ParseError(f"{path}: cannot decode header: {e}", row=0) from e
    columns = [str(c) for c in frame.columns]
    for col in columns:
        if _ESCAPED_BYTE.search(col):
            raise ParseError(f"{path}: cannot decode header as {encoding}", row=0, column=col)
    return columns


def missing_columns(columns: list[str], variant: SchemaVariant) -> list[str]:
    present = set(columns)
    return [c for c in variant.required_columns if c not in present]


def validate_header(columns: list[str], variant: SchemaVariant) -> None:
    """Check that every column the variant recognizes is in the header."""
    missing = missing_columns(columns, variant)
    if missing:
        raise ParseError(
            f"header lacks column(s) required by schema '{variant.name}': {missing}",
            row=0,
            column=missing[0],
        )


def count_rows(path: Path, *, delimiter: str = ",", encoding: str = "utf-8") -> int:
    """Count data records in a full pass.

    Rows with too many fields or undecodable bytes are counted as well; they
    fail later, during the processing pass.
    """
    bad_lines = 0

    def _tally(line: list[str]) -> None:
        nonlocal bad_lines
        bad_lines += 1
        return None

    try:
        frame = pd.read_csv(path, on_bad_lines=_tally, **_read_csv_kwargs(delimiter, encoding))
    except OSError as e:
        raise _open_error(path, e) from e
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"{path}: no header row", row=0) from e
    except _DECODE_ERRORS as e:
        raise ParseError(f"{path}: cannot decode file: {e}") from e
    return len(frame) + bad_lines


def _bind_row(raw: pd.Series, columns: list[str], row_number: int, encoding: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for col in columns:
        if col not in raw.index:
            raise ParseError("missing column", row=row_number, column=col)
        val = raw[col]
        # short rows are padded with NA by the parser
        if pd.isna(val):
            raise ParseError("missing field", row=row_number, column=col)
        values[col] = str(val)
    for col, val in raw.items():
        if pd.isna(val):
            raise ParseError("missing field", row=row_number, column=str(col))
        if _ESCAPED_BYTE.search(str(val)):
            raise ParseError(f"cannot decode field as {encoding}", row=row_number, column=str(col))
    return values


def iter_rows(
    path: Path,
    variant: SchemaVariant,
    *,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> Iterator[RowRecord]:
    """Yield one RowRecord per data row, in file order.

    Raises:
        IoError: the file cannot be opened.
        ParseError: a row cannot be decoded into the variant's columns.
    """
    columns = variant.required_columns
    try:
        reader = pd.read_csv(path, chunksize=1, **_read_csv_kwargs(delimiter, encoding))
    except OSError as e:
        raise _open_error(path, e) from e
    except pd.errors.EmptyDataError as e:
        raise ParseError(f"{path}: no header row", row=0) from e
    except _DECODE_ERRORS as e:
        raise ParseError(f"{path}: cannot decode header: {e}", row=0) from e

    row_number = 0
    with reader:
        while True:
            try:
                chunk = next(reader)
            except StopIteration:
                break
            except _DECODE_ERRORS as e:
                raise ParseError(f"cannot decode row: {e}", row=row_number + 1) from e
            # a first data row longer than the header turns its leading
            # fields into an implicit index and shifts every value left
            if not isinstance(chunk.index, pd.RangeIndex):
                raise ParseError("row has more fields than the header", row=row_number + 1)
            for _, raw in chunk.iterrows():
                row_number += 1
                yield RowRecord(row_number=row_number, values=_bind_row(raw, columns, row_number, encoding))
