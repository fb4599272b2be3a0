"""Runtime support shared by the pipeline and the CLI."""

from .logging import configure_cli_logging, get_logger

__all__ = ["configure_cli_logging", "get_logger"]
