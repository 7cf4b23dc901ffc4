"""Shared pytest fixtures for liby tests."""

from pathlib import Path
from textwrap import dedent
from typing import Callable

import pytest

SETTINGS_SOURCE = dedent(
    """\
    // Game settings
    settings {
      graphics {
        vsync 1 @locked
        refresh 59.94
      }
      title "Untitled"
      difficulty
    } @mutable
    """
)


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write Y source text into a file under ``tmp_path``."""

    def _write(name: str, source: str) -> Path:
        path = tmp_path / name
        path.write_text(dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings_file(write_source) -> Path:
    return write_source("settings.y", SETTINGS_SOURCE)
