"""
Canonical resolver: picks the authoritative location of each accidental duplicate.

Every location is scored by `signals.SIGNALS`; the highest score is canonical.
Ties go to the file with more importers, then the shorter file (unknown
length counts as 999 lines), then path and line order.

Confidence comes from the gap between the top two scores:

| Gap    | Confidence |
|--------|------------|
| >= 20  | high       |
| 10-19  | medium     |
| < 10   | low        |

A group with a single location has gap 100.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Sequence

from doppel.analysis.dependencies import DependencySample
from doppel.analysis.inventory import Inventory, normalize_path
from doppel.orchestration.logging import get_logger

from .models import Confidence, DuplicateData, DuplicateGroup, ResolvedDuplicate, ScoredLocation
from .signals import ResolutionIndex, score_location

HIGH_CONFIDENCE_GAP = 20
MEDIUM_CONFIDENCE_GAP = 10
SOLE_LOCATION_GAP = 100
UNKNOWN_LINE_COUNT = 999

_log = get_logger("duplicates")


def confidence_for_gap(gap: int) -> Confidence:
    if gap >= HIGH_CONFIDENCE_GAP:
        return "high"
    if gap >= MEDIUM_CONFIDENCE_GAP:
        return "medium"
    return "low"


def rank_locations(scored: Iterable[ScoredLocation], index: ResolutionIndex) -> List[ScoredLocation]:
    """Order scored locations best-first with the deterministic tie-break."""

    def _key(loc: ScoredLocation) -> tuple:
        return (
            -loc.score,
            -index.deps.imported_by_count(loc.file),
            index.line_count(loc.file, UNKNOWN_LINE_COUNT),
            normalize_path(loc.file),
            loc.line,
        )

    return sorted(scored, key=_key)


def _resolve_with_index(group: DuplicateGroup, index: ResolutionIndex) -> ResolvedDuplicate:
    assert group.category == "accidental" and group.locations, (
        f"cannot resolve {group.category} group {group.name!r} with {len(group.locations)} locations"
    )
    scored = [score_location(group.name, loc, group.locations, index) for loc in group.locations]
    ranked = rank_locations(scored, index)
    canonical, alternatives = ranked[0], tuple(ranked[1:])
    gap = canonical.score - alternatives[0].score if alternatives else SOLE_LOCATION_GAP
    return ResolvedDuplicate(
        name=group.name,
        kind=group.kind,
        canonical=canonical,
        alternatives=alternatives,
        confidence=confidence_for_gap(gap),
    )


def resolve_group(
    group: DuplicateGroup,
    inventory: Inventory,
    deps: Sequence[DependencySample],
) -> ResolvedDuplicate:
    """Resolve one accidental duplicate group."""
    return _resolve_with_index(group, ResolutionIndex(inventory, deps))


def resolve_canonicals(
    data: DuplicateData,
    inventory: Inventory,
    deps: Sequence[DependencySample],
    *,
    workers: int = 1,
) -> List[ResolvedDuplicate]:
    """
    Resolve every accidental group in `data.duplicates`, preserving their order.

    Groups are independent; with workers > 1 they are resolved on a thread pool.
    Cross-stack mirrors are never resolved.
    """
    index = ResolutionIndex(inventory, deps)
    groups = list(data.duplicates)
    if workers > 1 and len(groups) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            resolved = list(pool.map(lambda g: _resolve_with_index(g, index), groups))
    else:
        resolved = [_resolve_with_index(g, index) for g in groups]
    _log.debug(
        "resolver: %d groups (%d high, %d medium, %d low)",
        len(resolved),
        sum(1 for r in resolved if r.confidence == "high"),
        sum(1 for r in resolved if r.confidence == "medium"),
        sum(1 for r in resolved if r.confidence == "low"),
    )
    return resolved


__all__ = [
    "confidence_for_gap",
    "rank_locations",
    "resolve_canonicals",
    "resolve_group",
]
