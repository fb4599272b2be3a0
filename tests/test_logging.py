"""Tests for doppel.orchestration.logging."""

import logging

import pytest

from doppel.orchestration.logging import configure_cli_logging, get_logger


def test_repeated_configuration_keeps_one_handler() -> None:
    configure_cli_logging()
    configure_cli_logging(verbose=True)
    root = logging.getLogger("doppel")
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
    assert get_logger("duplicates").getEffectiveLevel() == logging.DEBUG


def test_env_level_and_flag_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOPPEL_LOG_LEVEL", "error")
    configure_cli_logging()
    assert logging.getLogger("doppel").level == logging.ERROR
    configure_cli_logging(quiet=True)
    assert logging.getLogger("doppel").level == logging.WARNING


def test_unknown_env_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOPPEL_LOG_LEVEL", "chatty")
    configure_cli_logging()
    assert logging.getLogger("doppel").level == logging.INFO
