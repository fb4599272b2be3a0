"""CLI handlers facade: keeps the public `cli.handlers.handle_*` API stable."""

from __future__ import annotations

from .core_handlers import handle_duplicates, handle_help, handle_resolve

__all__ = ["handle_duplicates", "handle_help", "handle_resolve"]
