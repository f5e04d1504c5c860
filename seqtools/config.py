"""Load and validate .seqtools/config.yaml."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from seqtools.parse import OUTPUT_FORMATS


# Default config values
DEFAULTS: dict[str, Any] = {
    "output": {
        "format": "text",
    },
    "drop": {
        "size": 1,
    },
}

CONFIG_DIR = ".seqtools"
CONFIG_FILE = "config.yaml"

# Written by `seqtools init`
CONFIG_TEMPLATE = """\
output:
  format: text  # text | json

drop:
  size: 1  # elements removed when --size is omitted
"""


class ConfigError(Exception):
    """Raised when config is invalid."""


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_DIR / CONFIG_FILE


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base recursively. Override wins on conflicts."""
    result = base.copy()
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _validate(config: dict) -> None:
    """Validate field types and allowed values."""
    output = config.get("output")
    if not isinstance(output, dict):
        raise ConfigError("'output' must be a mapping")
    fmt = output.get("format")
    if fmt not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unsupported output format '{fmt}'. Built-in: {', '.join(OUTPUT_FORMATS)}."
        )

    drop = config.get("drop")
    if not isinstance(drop, dict):
        raise ConfigError("'drop' must be a mapping")
    size = drop.get("size")
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise ConfigError(f"'drop.size' must be a non-negative integer, got {size!r}")


def load_config(project_root: Path | None = None) -> dict:
    """Load config from .seqtools/config.yaml under project_root.

    Falls back to cwd if project_root is None. A missing file means
    defaults; callers always get a full config dict.
    """
    root = Path(project_root) if project_root else Path.cwd()
    path = config_path(root)

    if not path.exists():
        return copy.deepcopy(DEFAULTS)

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(raw).__name__}")

    config = _deep_merge(copy.deepcopy(DEFAULTS), raw)
    _validate(config)
    return config
