"""
Shared fixtures for the folder size reporter tests.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from folder_size_reporter.config.settings import ReporterSettings, get_settings
from folder_size_reporter.utils.logger import setup_logger

CAPTURE_DATE = date(2026, 10, 18)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from FOLDER_REPORT_* variables and cached settings."""
    import os

    for key in list(os.environ):
        if key.upper().startswith("FOLDER_REPORT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    setup_logger()


@pytest.fixture
def walk_settings() -> ReporterSettings:
    """Settings that only use the in-process file walk."""
    return ReporterSettings(strategies=["walk"])


@pytest.fixture
def capture_date() -> date:
    return CAPTURE_DATE


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Root with ``alpha`` (one 100-byte file) and ``beta`` (empty),
    plus a loose file that must not be reported.
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "alpha").mkdir()
    (root / "alpha" / "data.bin").write_bytes(b"x" * 100)
    (root / "beta").mkdir()
    (root / "notes.txt").write_text("not a folder")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Directory with files at several depths totalling 1234 bytes."""
    root = tmp_path / "nested"
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "top.txt").write_bytes(b"t" * 1000)
    (root / "a" / "mid.txt").write_bytes(b"m" * 200)
    (root / "a" / "b" / "c" / "deep.txt").write_bytes(b"d" * 34)
    return root
