from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from contact_batcher.models.config_models import ExporterConfig, FillColors

"""Config loader.

Responsibilities:
- Load YAML config (default: config/export.yml)
- Validate against config_schema.json (unknown keys rejected)
- Apply defaults for every key that is not set
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/export.yml")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the config
            data violates it (unknown keys, wrong types, bad colors...).
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


def load_config(path: Path | None = None, *, required: bool = True) -> ExporterConfig:
    """Load an ExporterConfig from YAML.

    ``path=None`` returns the built-in defaults. A missing file is an error
    unless ``required`` is False, in which case defaults are returned too.
    """
    if path is None:
        return ExporterConfig()
    if not path.exists():
        if required:
            raise ConfigError(f"config file not found: {path}")
        return ExporterConfig()
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = ExporterConfig()
    fills_raw = data.get("fills", {})
    fills = FillColors(
        ok=fills_raw.get("ok", defaults.fills.ok).upper(),
        warn=fills_raw.get("warn", defaults.fills.warn).upper(),
        bad=fills_raw.get("bad", defaults.fills.bad).upper(),
    )
    excluded = data.get("excluded_directories")
    headers = data.get("export_headers")
    return ExporterConfig(
        chunk_size=data.get("chunk_size", defaults.chunk_size),
        sheet_index=data.get("sheet_index", defaults.sheet_index),
        export_directory=data.get("export_directory", defaults.export_directory),
        status_column=data.get("status_column", defaults.status_column),
        fills=fills,
        excluded_directories=(
            frozenset(excluded) if excluded is not None else defaults.excluded_directories
        ),
        export_headers=tuple(headers) if headers is not None else defaults.export_headers,  # type: ignore[arg-type]
        export_sheet_name=data.get("export_sheet_name", defaults.export_sheet_name),
        name_placeholder=data.get("name_placeholder", defaults.name_placeholder),
    )
