"""
Pytest configuration and shared fixtures.

Headless Qt on Linux: set QT_QPA_PLATFORM=offscreen so the menu bridge tests
can create a QApplication in CI without a display. Otherwise run under Xvfb:

  xvfb-run -a pytest tests/test_gui.py -v
"""
import os
import sys

import pytest

# Must set before any PySide6/Qt import
if sys.platform.startswith("linux"):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from hone.config import reset_config
from hone.core.context import AppContext
from hone.core.logger import reset_logging


class FakeClock:
    """Deterministic epoch clock; each call returns the current value then advances by step."""

    def __init__(self, start=1_700_000_000, step=1):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """No user config or data dir leaks into tests."""
    for name in ("HONE_CONFIG", "HONE_DATA_DIR", "HONE_LOG_LEVEL", "HONE_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


@pytest.fixture
def data_dir(tmp_path):
    """App-data directory that does not exist yet (stores create it on demand)."""
    return tmp_path / "appdata" / "hone"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ctx(data_dir, clock):
    return AppContext.for_directory(data_dir, clock=clock)


@pytest.fixture
def make_file(tmp_path):
    """Create a text file under tmp_path/docs and return its resolved path as str."""
    docs = tmp_path / "docs"
    docs.mkdir(exist_ok=True)

    def _make(name, content="hello\n"):
        p = docs / name
        p.write_text(content, encoding="utf-8")
        return str(p.resolve())

    return _make
