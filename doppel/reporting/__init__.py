"""Reporting façade."""

from .duplicates import (  # noqa: F401
    format_duplicates_markdown,
    format_duplicates_text,
    format_resolved_markdown,
    format_resolved_text,
    render_duplicate_report,
    resolved_line,
)

__all__ = [
    "format_duplicates_markdown",
    "format_duplicates_text",
    "format_resolved_markdown",
    "format_resolved_text",
    "render_duplicate_report",
    "resolved_line",
]
