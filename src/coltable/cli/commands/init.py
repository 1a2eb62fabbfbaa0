"""Init command implementation."""

from __future__ import annotations

from pathlib import Path

from coltable.errors import ConfigurationError
from coltable.templates import LAYOUT_YAML_TEMPLATE


def init_layout(path: Path, *, force: bool = False) -> Path:
    """Write a sample layout file.

    Args:
        path: Destination file.
        force: Overwrite the file if it already exists.

    Returns:
        Path of the written file.

    Raises:
        ConfigurationError: If the file exists and ``force`` is not set.
    """
    if path.exists() and not force:
        raise ConfigurationError("Layout file already exists", path=path)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(LAYOUT_YAML_TEMPLATE, encoding="utf-8")
    return path
