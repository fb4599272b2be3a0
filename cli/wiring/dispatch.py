"""CLI command dispatch wiring."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from cli import handlers


def dispatch_command(parser: argparse.ArgumentParser, args: Any) -> int:
    """Dispatch parsed CLI args to the matching command handler."""
    from doppel.orchestration.logging import configure_cli_logging

    configure_cli_logging(quiet=getattr(args, "quiet", False), verbose=getattr(args, "verbose", False))

    if args.command is None:
        return handlers.handle_help(parser)

    dispatch: dict[str, Callable[[], int]] = {
        "help": lambda: handlers.handle_help(parser),
        "duplicates": lambda: handlers.handle_duplicates(args),
        "resolve": lambda: handlers.handle_resolve(args),
    }
    handler = dispatch.get(args.command)
    if handler is None:
        return 0
    return handler()
