from __future__ import annotations

from pathlib import Path

import pytest

from pixwrap.fonts import FontMetricsTable, load

from .common import RESOURCES


@pytest.fixture(scope="session")
def table() -> FontMetricsTable:
    return load(RESOURCES / "font_widths.json")


@pytest.fixture
def config_file(tmp_path) -> Path:
    return tmp_path / "font_widths.json"
