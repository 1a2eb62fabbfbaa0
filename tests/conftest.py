"""Shared test fixtures for coltable tests."""

from __future__ import annotations

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from coltable import Column, Table


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def status_table() -> Table:
    """Two-column table with a couple of short rows."""
    table = Table([Column("Name"), Column("Status")])
    table.add_row("Ann", "OK")
    table.add_row("Bob", "FAIL")
    return table


@pytest.fixture
def sample_layout_yaml() -> str:
    """Sample coltable.yaml content."""
    return """\
columns:
  - name: Host
  - name: Role
    truncate_at: 4
  - name: Disks
  - name: Load
    justify: right

show_headers: true

rows:
  - ["db-1", "primary", ["sda", "sdb"], "0.75"]
  - ["db-2", "replica", "sda", "12.5"]
"""


@pytest.fixture
def layout_file(temp_dir: Path, sample_layout_yaml: str) -> Path:
    """Write the sample layout to disk."""
    path = temp_dir / "coltable.yaml"
    path.write_text(sample_layout_yaml)
    return path
