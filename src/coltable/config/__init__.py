"""Layout file loading."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from coltable.config.schema import ColumnConfig, LayoutConfig
from coltable.errors import ConfigurationError

DEFAULT_LAYOUT_FILE = "coltable.yaml"


def load_config(path: Path) -> LayoutConfig:
    """Load and validate a layout file.

    Args:
        path: Path to the YAML file.

    Returns:
        Validated layout configuration.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or
            does not describe a valid layout.
    """
    if not path.is_file():
        raise ConfigurationError("Layout file not found", path=path)

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ConfigurationError("Layout file must contain a mapping", path=path)

    try:
        return LayoutConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid layout: {e}", path=path) from e


__all__ = [
    "DEFAULT_LAYOUT_FILE",
    "ColumnConfig",
    "LayoutConfig",
    "load_config",
]
