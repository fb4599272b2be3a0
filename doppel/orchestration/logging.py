"""Logging setup for the doppel CLI. Library code only calls get_logger()."""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER = "doppel"
_HANDLER_NAME = "doppel-cli"


def _resolve_level() -> int:
    raw = os.environ.get("DOPPEL_LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(raw) if raw else logging.INFO
    return level if isinstance(level, int) else logging.INFO


def configure_cli_logging(*, quiet: bool = False, verbose: bool = False) -> None:
    """Attach one stderr handler to the doppel logger. --quiet/--verbose win over DOPPEL_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = _resolve_level()
    root = logging.getLogger(ROOT_LOGGER)
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    fmt = "%(levelname)s %(name)s: %(message)s" if verbose else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


def get_logger(name: str) -> logging.Logger:
    """doppel.<name>; level and output are inherited from the doppel logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
