"""Duplication summary for reports: totals and the files carrying most duplicates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .models import DuplicateData

TOP_FILES = 10


@dataclass(frozen=True)
class DuplicationSummary:
    total_duplicate_names: int
    cross_stack_count: int
    files_with_most_duplicates: Tuple[Tuple[str, int], ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "total_duplicate_names": self.total_duplicate_names,
            "cross_stack_count": self.cross_stack_count,
            "files_with_most_duplicates": [
                {"file": f, "count": c} for f, c in self.files_with_most_duplicates
            ],
        }


def summarize_duplication(data: DuplicateData, *, top_n: int = TOP_FILES) -> DuplicationSummary:
    """Count accidental duplicate groups per file; cross-stack mirrors are only totalled."""
    per_file: Dict[str, int] = {}
    for group in data.duplicates:
        for loc in group.locations:
            per_file[loc.file] = per_file.get(loc.file, 0) + 1
    ranked: List[Tuple[str, int]] = sorted(per_file.items(), key=lambda kv: (-kv[1], kv[0]))
    return DuplicationSummary(
        total_duplicate_names=data.total_duplicate_names,
        cross_stack_count=len(data.cross_stack_mirrors),
        files_with_most_duplicates=tuple(ranked[: max(0, top_n)]),
    )


__all__ = ["DuplicationSummary", "summarize_duplication", "TOP_FILES"]
