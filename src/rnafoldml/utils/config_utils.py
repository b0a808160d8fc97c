from __future__ import annotations
from pathlib import Path
from typing import Any, Dict

import yaml

from rnafoldml.errors import ConfigError

# Keys a CLI config file may set, with the type each value must have.
CLI_CONFIG_KEYS: Dict[str, type] = {
    "engine": str,
    "json": bool,
    "multilayer": bool,
    "verbose": int,
    "log_file": str,
}


def read_yaml(path: str | Path) -> Dict[str, Any]:
    """
    Read and parse a YAML file.
    """
    path_obj = Path(path)
    if path_obj.suffix.lower() not in {".yml", ".yaml"}:
        raise ConfigError("Only YAML files are supported.")

    try:
        return yaml.safe_load(path_obj.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse YAML config {path_obj}: {e}") from e


def load_cli_defaults(path: str | Path) -> Dict[str, Any]:
    """
    Load default CLI option values from a YAML mapping.

    Parameters
    ----------
    path : str | Path
        Path to a `.yml`/`.yaml` file holding a flat mapping.

    Returns
    -------
    Dict[str, Any]
        The validated option values, keyed like the CLI destinations.

    Raises
    ------
    ConfigError
        If the document is not a mapping, holds unknown keys, or a value has
        the wrong type.
    """
    raw = read_yaml(path)
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(raw).__name__}.")

    unknown = sorted(set(raw) - set(CLI_CONFIG_KEYS))
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    for key, value in raw.items():
        expected = CLI_CONFIG_KEYS[key]
        # bool is a subclass of int; reject it where an int count is expected.
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"Config key '{key}' must be {expected.__name__}, got {value!r}.")

    return dict(raw)
