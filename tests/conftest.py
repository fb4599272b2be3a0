"""Shared fixtures: isolated DOPPEL_* environment, clean doppel logger, JSON snapshot writer."""
import json
import logging
from pathlib import Path

import pytest

DOPPEL_ENV = ("DOPPEL_LOG_LEVEL", "DOPPEL_WORKERS", "DOPPEL_DEPENDENCY_LIMIT", "DOPPEL_TOP_FILES")


@pytest.fixture(autouse=True)
def _isolate_doppel_env(monkeypatch):
    for name in DOPPEL_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_doppel_logger():
    yield
    root = logging.getLogger("doppel")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture
def json_file(tmp_path):
    """Write a JSON payload under tmp_path and return its path."""

    def _write(name: str, payload) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
