from __future__ import annotations

import codecs
import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from .variants import variant_names

"""Config loader.

Responsibilities:
- Load YAML config (default: config/generate.yml)
- Validate against the bundled JSON schema (config_schema.json)
- Apply defaults, then environment overrides (TOKENMETA_*), then CLI overrides
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/generate.yml")

ENV_INPUT = "TOKENMETA_INPUT"
ENV_OUTPUT_DIR = "TOKENMETA_OUTPUT_DIR"
ENV_SCHEMA = "TOKENMETA_SCHEMA"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class GenerateConfig:
    input_path: str = "final.csv"
    output_directory: str = "."
    schema: str = "default"
    delimiter: str = ","
    encoding: str = "utf-8"
    indent: int = 2


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or unreadable, or the
            config data fails validation (missing required keys, wrong
            types, unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _validate_encoding(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"config validation failed: unknown encoding: {encoding}") from e


def default_config() -> GenerateConfig:
    return GenerateConfig()


def load_config(path: Path) -> GenerateConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config validation failed: top level must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)
    if "encoding" in data:
        _validate_encoding(data["encoding"])

    defaults = default_config()
    return GenerateConfig(
        input_path=data["input_path"],
        output_directory=data.get("output_directory", defaults.output_directory),
        schema=data.get("schema", defaults.schema),
        delimiter=data.get("delimiter", defaults.delimiter),
        encoding=data.get("encoding", defaults.encoding),
        indent=data.get("indent", defaults.indent),
    )


def apply_overrides(
    config: GenerateConfig,
    *,
    input_path: str | None = None,
    output_directory: str | None = None,
    schema: str | None = None,
) -> GenerateConfig:
    """Return a copy with every non-empty override applied."""
    changes: dict[str, Any] = {}
    if input_path:
        changes["input_path"] = input_path
    if output_directory:
        changes["output_directory"] = output_directory
    if schema:
        if schema not in variant_names():
            raise ConfigError(f"unknown schema variant: {schema} (known: {', '.join(variant_names())})")
        changes["schema"] = schema
    return replace(config, **changes) if changes else config


def apply_env_overrides(config: GenerateConfig, environ: Mapping[str, str] | None = None) -> GenerateConfig:
    env = os.environ if environ is None else environ
    return apply_overrides(
        config,
        input_path=env.get(ENV_INPUT),
        output_directory=env.get(ENV_OUTPUT_DIR),
        schema=env.get(ENV_SCHEMA),
    )
