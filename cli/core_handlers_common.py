"""Shared helpers for core CLI handlers."""

from __future__ import annotations

from pathlib import Path
from typing import Any


def _err(msg: str) -> None:
    """Log unified error message (via logger, respects --quiet)."""
    _clog().error("doppel: %s", msg)


def _clog() -> Any:
    from doppel.orchestration.logging import get_logger

    return get_logger("cli")


def _check_path(path: Path | None, must_be_file: bool = True) -> int:
    """Return 0 if path is valid (or not given), 1 and log error otherwise."""
    if path is None:
        return 0
    if not path.exists():
        _err(f"path does not exist: {path}")
        return 1
    if must_be_file and not path.is_file():
        _err(f"not a file: {path}")
        return 1
    return 0


def _emit(text: str, output: Path | None) -> None:
    """Print report text, or write it to `output`."""
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    _clog().info("doppel: report written to %s", output)
