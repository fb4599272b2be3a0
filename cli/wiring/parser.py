"""Parser wiring for the doppel entrypoint."""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser(*, version: str) -> argparse.ArgumentParser:
    """Configure top-level CLI parser and subcommands."""
    parser = argparse.ArgumentParser(
        prog="doppel",
        description="doppel — duplicate export detection and canonical resolution",
        epilog="Commands: duplicates | resolve. Use doppel help for an overview.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {version}")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only warnings and errors on stderr")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    subparsers = parser.add_subparsers(dest="command")

    _add_analysis_commands(subparsers)
    subparsers.add_parser("help", help="Show doppel command overview")

    return parser


def _add_common_arguments(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("inventory", type=Path, help="Inventory snapshot JSON ({\"files\": [...]})")
    sub.add_argument("--format", "-f", choices=["text", "markdown", "json"], default="text", help="Output format (default: text)")
    sub.add_argument("--output", "-o", type=Path, default=None, metavar="FILE", help="Write the report to FILE instead of stdout")
    sub.add_argument("--config-root", type=Path, default=Path("."), metavar="DIR", help="Directory holding pyproject.toml with [tool.doppel] (default: .)")


def _add_analysis_commands(subparsers: argparse._SubParsersAction) -> None:
    dup_parser = subparsers.add_parser("duplicates", help="Group duplicate exports; list accidental duplicates and cross-stack mirrors")
    _add_common_arguments(dup_parser)

    resolve_parser = subparsers.add_parser("resolve", help="Pick the canonical location of each accidental duplicate")
    _add_common_arguments(resolve_parser)
    deps_group = resolve_parser.add_mutually_exclusive_group()
    deps_group.add_argument("--deps", type=Path, default=None, metavar="FILE", help="Dependency sample JSON (most-imported files)")
    deps_group.add_argument("--imports", type=Path, default=None, metavar="FILE", help="Import map JSON (importer -> imported files); sampled to the top N")
    resolve_parser.add_argument("--workers", type=int, default=None, metavar="N", help="Resolve groups on N threads (default: config / DOPPEL_WORKERS / 1)")
