"""Load generator configuration from JSON files and mappings."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping

from jsonschema import Draft7Validator

from ..domain.models import GeneratorConfig
from ..utils.constants import CONFIG_SCHEMA_PATH, FIELD_KEYS
from ..utils.errors import ConfigFileError, ConfigFileNotFound, SchemaValidationError
from ..utils.logging import get_logger

LOG = get_logger()

_ATTRIBUTE_BY_KEY = {key: name for name, key in FIELD_KEYS.items()}


def load_config_file(config_path: Path) -> Dict[str, Any]:
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigFileNotFound(f"config not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ConfigFileError(f"config is not valid JSON: {config_path} ({exc})") from exc
    LOG.info("loaded config: %s", config_path)
    return data


def load_schema_file(schema_path: Path = CONFIG_SCHEMA_PATH) -> Dict[str, Any]:
    schema_path = Path(schema_path)
    if not schema_path.exists():
        raise ConfigFileNotFound(f"schema not found: {schema_path}")
    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _format_json_path(path_iterable) -> str:
    parts: List[str] = ["root"]
    for p in path_iterable:
        if isinstance(p, int):
            parts[-1] = parts[-1] + f"[{p}]"
        else:
            parts.append(str(p))
    return ".".join(parts)


def validate_config_schema(data: Any, schema: Mapping[str, Any]) -> None:
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: (list(e.path), list(e.schema_path)))
    if not errors:
        LOG.debug("config schema validation: PASSED")
        return
    LOG.error("config schema validation: FAILED (count=%d)", len(errors))
    for i, err in enumerate(errors, start=1):
        LOG.error(
            "#%d path=%s | msg=%s | validator=%s",
            i,
            _format_json_path(err.path),
            err.message,
            err.validator,
        )
    raise SchemaValidationError(f"config schema validation failed with {len(errors)} error(s)")


def parse_config(data: Mapping[str, Any]) -> GeneratorConfig:
    """Build a :class:`GeneratorConfig` from camelCase keys; absent keys keep defaults.

    Usable without the schema step, so unknown keys are rejected here too.
    """
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        name = _ATTRIBUTE_BY_KEY.get(key)
        if name is None:
            raise SchemaValidationError(f"unknown config key: {key!r}")
        if isinstance(value, float) and value.is_integer():
            LOG.warning("%s is a float; normalized to integer: %d", key, int(value))
            value = int(value)
        kwargs[name] = value
    return GeneratorConfig(**kwargs)


def load_config_mapping(
    data: Mapping[str, Any],
    schema_path: Path = CONFIG_SCHEMA_PATH,
) -> GeneratorConfig:
    validate_config_schema(data, load_schema_file(schema_path))
    return parse_config(data)


def load_config(config_path: Path, schema_path: Path = CONFIG_SCHEMA_PATH) -> GeneratorConfig:
    return load_config_mapping(load_config_file(config_path), schema_path)


__all__ = [
    "load_config_file",
    "load_schema_file",
    "validate_config_schema",
    "parse_config",
    "load_config_mapping",
    "load_config",
]
