"""Bounded dependency sample: the most-imported files and who imports them.

This is deliberately lossy. Only the top `DEFAULT_SAMPLE_LIMIT` files are kept,
and anything outside the sample is treated as "no known importers".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .inventory import normalize_path

DEFAULT_SAMPLE_LIMIT = 30


@dataclass(frozen=True)
class DependencySample:
    file: str
    imported_by_count: int
    imported_by: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "file", normalize_path(self.file))
        object.__setattr__(self, "imported_by", frozenset(normalize_path(p) for p in self.imported_by))

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DependencySample":
        importers = raw.get("imported_by", raw.get("importedBy")) or ()
        imported_by = frozenset(str(p) for p in importers)
        count = raw.get("imported_by_count", raw.get("importedByCount"))
        return cls(
            file=str(raw.get("file", "")),
            imported_by_count=int(count) if count is not None else len(imported_by),
            imported_by=imported_by,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "imported_by_count": self.imported_by_count,
            "imported_by": sorted(self.imported_by),
        }


def build_dependency_sample(
    imports: Mapping[str, Iterable[str]],
    *,
    limit: int = DEFAULT_SAMPLE_LIMIT,
) -> list[DependencySample]:
    """
    Reduce an importer -> imported-files map to the top `limit` most-imported files.

    Self-imports are ignored and each importer is counted once per target.
    Ordering: importer count descending, then path.
    """
    importers_of: dict[str, set[str]] = {}
    for src, targets in imports.items():
        src_norm = normalize_path(src)
        for dst in targets:
            dst_norm = normalize_path(dst)
            if dst_norm == src_norm:
                continue
            importers_of.setdefault(dst_norm, set()).add(src_norm)
    entries = [
        DependencySample(file=f, imported_by_count=len(srcs), imported_by=frozenset(srcs))
        for f, srcs in importers_of.items()
    ]
    entries.sort(key=lambda e: (-e.imported_by_count, e.file))
    return entries[: max(0, limit)]


class DependencyIndex:
    """Normalized-path lookup over a dependency sample (built once per run)."""

    def __init__(self, samples: Iterable[DependencySample]):
        self._by_file: dict[str, DependencySample] = {}
        for sample in samples:
            self._by_file.setdefault(normalize_path(sample.file), sample)

    def get(self, path: str) -> DependencySample | None:
        return self._by_file.get(normalize_path(path))

    def imported_by_count(self, path: str) -> int:
        entry = self.get(path)
        return entry.imported_by_count if entry else 0

    def imports(self, importer: str, target: str) -> bool:
        """True if the sample records `importer` as importing `target`."""
        entry = self.get(target)
        if entry is None:
            return False
        return normalize_path(importer) in entry.imported_by


__all__ = [
    "DEFAULT_SAMPLE_LIMIT",
    "DependencySample",
    "DependencyIndex",
    "build_dependency_sample",
]
