from __future__ import annotations

import argparse
import sys
from itertools import islice
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    GenerateConfig,
    apply_env_overrides,
    apply_overrides,
    default_config,
    load_config,
)
from ..config.variants import get_variant, variant_names
from ..errors import IoError, ParseError, ProcessingError
from ..logging.init import log_summary, setup_logging
from ..services.orchestrator import generate_all
from ..services.summary import render_summary_line
from ..services.transformer import transform_row
from ..services.writer import serialize_document
from ..table.reader import iter_rows, missing_columns, read_header

"""CLI entrypoint.

Flow:
- Load .env (overrides the process environment)
- Resolve config: defaults < YAML < TOKENMETA_* env < CLI flags
- Generate one metadata file per CSV row
- Print the SUMMARY line

Exit codes: 0 when every row was written, 1 on any config / I/O / parse error.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv; values win over the inherited environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="CSV -> token metadata JSON generator")
    p.add_argument("--config", help=f"YAML config file (default: {DEFAULT_CONFIG_PATH} if present)")
    p.add_argument("--input", dest="input_path", help="Input CSV file")
    p.add_argument("--output-dir", dest="output_directory", help="Directory receiving the metadata files")
    p.add_argument("--schema", choices=variant_names(), help="Input schema variant")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect", action="store_true", help="Print header & first documents then exit")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> GenerateConfig:
    if args.config:
        cfg = load_config(Path(args.config))
    elif DEFAULT_CONFIG_PATH.exists():
        cfg = load_config(DEFAULT_CONFIG_PATH)
    else:
        cfg = default_config()
    cfg = apply_env_overrides(cfg)
    return apply_overrides(
        cfg,
        input_path=args.input_path,
        output_directory=args.output_directory,
        schema=args.schema,
    )


def _inspect_data(cfg: GenerateConfig) -> int:
    variant = get_variant(cfg.schema)
    path = Path(cfg.input_path)
    read_opts = {"delimiter": cfg.delimiter, "encoding": cfg.encoding}
    try:
        columns = read_header(path, **read_opts)
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    missing = missing_columns(columns, variant)
    print(f"FILE: {path}")
    print(f"  columns={columns}")
    print(f"  schema={variant.name} missing={missing}")
    if missing:
        return EXIT_SUCCESS
    try:
        for record in islice(iter_rows(path, variant, **read_opts), INSPECT_SAMPLE_ROWS):
            print(f"  ROW {record.row_number}:")
            print(serialize_document(transform_row(record, variant)))
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # only read sys.argv when no list was passed (main([]) must not see pytest's args)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"), override=True)

    if args.debug:
        for h in logger.handlers:
            h.setLevel("DEBUG")
        logger.setLevel("DEBUG")
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    logger.debug(f"config resolved: {cfg}")

    if args.inspect:
        return _inspect_data(cfg)

    try:
        result = generate_all(cfg)
    except ParseError as e:
        logger.error(f"parse: {e}")
        return EXIT_FATAL
    except IoError as e:
        logger.error(f"io: {e}")
        return EXIT_FATAL

    log_summary(render_summary_line(result))
    return EXIT_SUCCESS
