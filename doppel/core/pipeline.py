"""Duplicate analysis pipeline.

Single entry point over an inventory + dependency sample, returning a
DuplicateAnalysis instead of printing directly. Each call recomputes
everything from the snapshots it is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from doppel.analysis.dependencies import DependencySample, build_dependency_sample
from doppel.analysis.inventory import Inventory
from doppel.config import AnalysisConfig
from doppel.duplicates.detector import detect_duplicates
from doppel.duplicates.models import DuplicateData, ResolvedDuplicate
from doppel.duplicates.resolver import resolve_canonicals
from doppel.duplicates.summary import DuplicationSummary, summarize_duplication
from doppel.orchestration.logging import get_logger
from doppel.storage.snapshot_io import load_dependency_sample, load_import_map, load_inventory

_log = get_logger("pipeline")


@dataclass(frozen=True)
class DuplicateAnalysis:
    """Result of one analysis run."""

    data: DuplicateData
    resolved: List[ResolvedDuplicate] = field(default_factory=list)
    summary: Optional[DuplicationSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.data.to_dict(),
            "resolved": [r.to_dict() for r in self.resolved],
            "summary": self.summary.to_dict() if self.summary else None,
        }


def run_duplicate_analysis(
    inventory: Inventory,
    deps: Sequence[DependencySample] = (),
    *,
    config: AnalysisConfig | None = None,
    resolve: bool = True,
) -> DuplicateAnalysis:
    """Group, categorize and (optionally) resolve duplicates for one snapshot."""
    cfg = config or AnalysisConfig()
    data = detect_duplicates(inventory)
    resolved = resolve_canonicals(data, inventory, deps, workers=cfg.workers) if resolve else []
    summary = summarize_duplication(data, top_n=cfg.top_files)
    _log.debug(
        "pipeline: %d files, %d duplicate names, %d cross-stack mirrors",
        len(inventory.files),
        data.total_duplicate_names,
        len(data.cross_stack_mirrors),
    )
    return DuplicateAnalysis(data=data, resolved=resolved, summary=summary)


def analyze_snapshot_files(
    inventory_path: Path,
    *,
    deps_path: Path | None = None,
    imports_path: Path | None = None,
    config: AnalysisConfig | None = None,
    resolve: bool = True,
) -> DuplicateAnalysis:
    """
    Load snapshots from disk and run the analysis.

    The dependency sample comes from `deps_path` when given, otherwise it is
    built from the import map at `imports_path` (top `config.dependency_limit`
    files). Raises SnapshotError on unreadable input.
    """
    cfg = config or AnalysisConfig()
    inventory = load_inventory(inventory_path, generic_names=cfg.generic_names)
    deps: List[DependencySample] = []
    if deps_path is not None:
        deps = load_dependency_sample(deps_path)
    elif imports_path is not None:
        deps = build_dependency_sample(load_import_map(imports_path), limit=cfg.dependency_limit)
    return run_duplicate_analysis(inventory, deps, config=cfg, resolve=resolve)
