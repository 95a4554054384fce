from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import GenerateConfig
from ..config.variants import get_variant
from ..errors import IoError, ParseError, ProcessingError
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.counter import SequentialCounter
from ..models.generation_result import GenerationResult
from ..models.schema import SchemaVariant
from ..table.reader import count_rows, iter_rows, read_header, validate_header
from .progress import ProgressTracker
from .transformer import transform_row
from .writer import write_document

logger = logging.getLogger(__name__)

"""Pipeline orchestration: CSV -> one metadata file per row.

Flow:
1. Validate the header against the schema variant
2. Count pass, log the total
3. Processing pass: transform + write each row under the running counter
4. Return GenerationResult

The first ParseError / IoError is written to the error log and re-raised.
Files written before the failure are left in place.
"""

__all__ = [
    "ProcessingError",
    "generate_all",
]


def _record_failure(error_log: ErrorLogBuffer, input_path: Path, error: ProcessingError) -> None:
    if isinstance(error, ParseError):
        record = ErrorRecord.create(
            file=str(input_path),
            row=error.row,
            column=error.column or "",
            error_type=error.error_type,
            message=str(error),
        )
    elif isinstance(error, IoError):
        record = ErrorRecord.create(
            file=str(error.path),
            row=-1,
            column="",
            error_type=error.error_type,
            message=str(error),
        )
    else:  # pragma: no cover
        record = ErrorRecord.create(str(input_path), -1, "", error.error_type, str(error))
    error_log.append(record)
    try:
        error_log.flush()
    except OSError as e:
        # the ProcessingError below is re-raised either way
        logger.warning(f"failed to write error log: {e}")


def generate_all(
    config: GenerateConfig,
    variant: SchemaVariant | None = None,
    *,
    error_log: ErrorLogBuffer | None = None,
) -> GenerationResult:
    """Generate one metadata file per data row of ``config.input_path``.

    Args:
        config: Resolved configuration (input, output directory, variant name, format)
        variant: Schema variant; looked up from ``config.schema`` when omitted
        error_log: Error log buffer (a fresh one per run by default)

    Returns:
        GenerationResult with counts and timing

    Raises:
        IoError: input unreadable or an output file cannot be written
        ParseError: header or a row does not match the variant
    """
    variant = variant or get_variant(config.schema)
    error_log = error_log if error_log is not None else ErrorLogBuffer()
    input_path = Path(config.input_path)
    output_dir = Path(config.output_directory)
    read_opts = {"delimiter": config.delimiter, "encoding": config.encoding}

    start_time = datetime.now(UTC)
    logger.info(f"Starting CSV parsing and metadata generation (schema={variant.name})...")

    counter = SequentialCounter()
    output_files: list[Path] = []
    try:
        validate_header(read_header(input_path, **read_opts), variant)
        total_rows = count_rows(input_path, **read_opts)
        logger.info(f"Found {total_rows} records in {input_path}")

        with ProgressTracker(total_rows) as progress:
            for record in iter_rows(input_path, variant, **read_opts):
                document = transform_row(record, variant)
                target = write_document(document, counter.value, output_dir, indent=config.indent)
                output_files.append(target)
                logger.info(f"Generated metadata file: {target.name}")
                progress.advance(target.name)
                counter.increment()
    except ProcessingError as e:
        _record_failure(error_log, input_path, e)
        raise

    logger.info(f"Successfully generated {counter.produced} metadata files!")

    end_time = datetime.now(UTC)
    elapsed_seconds = (end_time - start_time).total_seconds()
    throughput_rps = counter.produced / elapsed_seconds if elapsed_seconds > 0 else 0.0

    return GenerationResult(
        total_rows=total_rows,
        generated=counter.produced,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_seconds,
        throughput_rows_per_sec=throughput_rps,
        output_files=output_files,
    )
