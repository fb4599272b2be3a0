"""Core command handlers: duplicates, resolve, help."""

from __future__ import annotations

import json
from dataclasses import replace
from typing import Any

from .core_handlers_common import _check_path, _clog, _emit, _err


def handle_help(parser: Any) -> int:
    """Print high-level command overview and detailed argparse help."""
    print("doppel — duplicate export detection and canonical resolution")
    print()
    print("Commands:")
    print("  duplicates <inventory.json>              accidental duplicates + cross-stack mirrors")
    print("  resolve <inventory.json> [--deps FILE]   canonical location per duplicate, with confidence")
    print("          [--imports FILE]                 build the dependency sample from an import map")
    print()
    print("  --format text|markdown|json, --output FILE with any command.")
    print("  --help after any command for details.")
    print()
    parser.print_help()
    return 0


def _load_config(args: Any) -> Any:
    from doppel.config import load_analysis_config

    cfg = load_analysis_config(getattr(args, "config_root", None))
    workers = getattr(args, "workers", None)
    if workers is not None:
        cfg = replace(cfg, workers=max(1, workers))
    return cfg


def _run(args: Any, *, resolve: bool) -> int:
    from doppel.core.pipeline import analyze_snapshot_files
    from doppel.reporting.duplicates import render_duplicate_report
    from doppel.storage.snapshot_io import SnapshotError

    deps_path = getattr(args, "deps", None)
    imports_path = getattr(args, "imports", None)
    for path in (args.inventory, deps_path, imports_path):
        if _check_path(path) != 0:
            return 1
    cfg = _load_config(args)
    try:
        analysis = analyze_snapshot_files(
            args.inventory,
            deps_path=deps_path,
            imports_path=imports_path,
            config=cfg,
            resolve=resolve,
        )
    except SnapshotError as exc:
        _err(str(exc))
        return 1
    _clog().info(
        "doppel: %d duplicate exports, %d cross-stack mirrors",
        analysis.data.total_duplicate_names,
        len(analysis.data.cross_stack_mirrors),
    )
    if args.format == "json":
        payload = analysis.to_dict()
        if not resolve:
            payload.pop("resolved", None)
        text = json.dumps(payload, indent=2, ensure_ascii=False)
    else:
        text = render_duplicate_report(analysis, format=args.format)
    _emit(text, getattr(args, "output", None))
    return 0


def handle_duplicates(args: Any) -> int:
    return _run(args, resolve=False)


def handle_resolve(args: Any) -> int:
    return _run(args, resolve=True)
