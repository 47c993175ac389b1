"""Pytest configuration to ensure the dumptermios package is importable."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_root_str = str(_REPO_ROOT)
if _root_str not in sys.path:
    sys.path.insert(0, _root_str)


@pytest.fixture
def termios_file(tmp_path: Path):
    def _write(data: bytes, name: str = "ttyS0.termios") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logger = logging.getLogger("dumptermios")
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
