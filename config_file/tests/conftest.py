"""Shared fixtures for the config_file test suite."""

from pathlib import Path

import pytest

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture()
def testdata_dir():
    """Directory holding one sample document per format."""
    return TESTDATA_DIR


@pytest.fixture()
def write_config(tmp_path):
    """Return a helper that writes *content* to *name* under a temp dir."""

    def _write(name: str, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
