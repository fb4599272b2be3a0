"""
Canonical-location scoring signals.

Each signal is a pure function `(SignalContext) -> (delta, reason | None)`.
A location's score is the sum of all deltas in `SIGNALS`, and its reasons are
the non-empty reasons in the same order.

| #   | Signal                 | Delta             |
|-----|------------------------|-------------------|
| S1  | file name vs export    | +40 exact / +15 per matching word |
| S2  | parent directory       | +12               |
| S3  | shared/ or common/     | +15               |
| S4a | sibling imports this   | +25               |
| S4b | this imports a sibling | -15               |
| S5  | popularity             | +3 per importer, max +18 |
| S6  | generic file name      | -25               |
| S7a | file size              | -12 / -6 / +10    |
| S7b | export count           | -12 / +8          |
| S8  | related exports        | +5 each, max +15  |
| S9a | only typed location    | +5                |
| S9b | signature differs      | -10               |

S4a and S4b are independent: a location imported by one sibling and
importing another receives both.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Callable, Iterable, Optional, Sequence, Tuple

from doppel.analysis.dependencies import DependencyIndex, DependencySample
from doppel.analysis.inventory import FileRecord, Inventory, file_stem, normalize_path
from doppel.analysis.words import split_words

from .models import Location, ScoredLocation

SignalResult = Tuple[int, Optional[str]]

EXACT_NAME_BONUS = 40
WORD_MATCH_BONUS = 15
FOLDER_MATCH_BONUS = 12
SHARED_LOCATION_BONUS = 15
DEPENDED_UPON_BONUS = 25
DEPENDS_ON_PENALTY = -15
IMPORTER_WEIGHT = 3
POPULARITY_CAP = 18
GENERIC_FILE_PENALTY = -25
CLUSTER_WEIGHT = 5
CLUSTER_CAP = 15
UNIQUE_SIGNATURE_BONUS = 5
DIVERGENT_SIGNATURE_PENALTY = -10

SHARED_SEGMENTS = ("/shared/", "/common/")


class ResolutionIndex:
    """Per-run lookup of file metadata and dependency entries by normalized path."""

    def __init__(self, inventory: Inventory, deps: Iterable[DependencySample]):
        self.files: dict[str, FileRecord] = {}
        for record in inventory.files:
            self.files.setdefault(normalize_path(record.path), record)
        self.deps = DependencyIndex(deps)

    def file(self, path: str) -> FileRecord | None:
        return self.files.get(normalize_path(path))

    def line_count(self, path: str, default: int = 999) -> int:
        record = self.file(path)
        return record.line_count if record else default


@dataclass(frozen=True)
class SignalContext:
    export_name: str
    export_words: Tuple[str, ...]
    location: Location
    siblings: Tuple[Location, ...]
    file_info: FileRecord | None
    dependency: DependencySample | None
    deps: DependencyIndex

    @property
    def path(self) -> str:
        return normalize_path(self.location.file)


def _base_name(path: str) -> str:
    return PurePosixPath(normalize_path(path)).name


def name_match(ctx: SignalContext) -> SignalResult:
    stem = file_stem(ctx.location.file)
    if stem == ctx.export_name.lower():
        return EXACT_NAME_BONUS, "exact filename match"
    compact = stem.replace(".", "")
    hits = sum(1 for w in ctx.export_words if w in stem or (compact and compact in w))
    if hits:
        return hits * WORD_MATCH_BONUS, "semantic name match"
    return 0, None


def folder_match(ctx: SignalContext) -> SignalResult:
    parts = ctx.path.split("/")
    folder = parts[-2].lower() if len(parts) > 1 else ""
    if not folder:
        return 0, None
    for word in ctx.export_words:
        if word in folder or folder in word:
            return FOLDER_MATCH_BONUS, f'folder "{folder}"'
    return 0, None


def shared_location(ctx: SignalContext) -> SignalResult:
    if any(seg in ctx.path for seg in SHARED_SEGMENTS):
        return SHARED_LOCATION_BONUS, "in shared/common"
    return 0, None


def depended_upon(ctx: SignalContext) -> SignalResult:
    if ctx.dependency is None:
        return 0, None
    for other in ctx.siblings:
        if normalize_path(other.file) in ctx.dependency.imported_by:
            return DEPENDED_UPON_BONUS, f"{_base_name(other.file)} depends on this"
    return 0, None


def depends_on_sibling(ctx: SignalContext) -> SignalResult:
    for other in ctx.siblings:
        if ctx.deps.imports(ctx.path, other.file):
            return DEPENDS_ON_PENALTY, f"imports from {_base_name(other.file)}"
    return 0, None


def popularity(ctx: SignalContext) -> SignalResult:
    count = ctx.dependency.imported_by_count if ctx.dependency else 0
    if count <= 0:
        return 0, None
    reason = f"{count} importers" if count >= 3 else None
    return min(count * IMPORTER_WEIGHT, POPULARITY_CAP), reason


def generic_file(ctx: SignalContext) -> SignalResult:
    if ctx.file_info is not None and ctx.file_info.is_generic_name:
        return GENERIC_FILE_PENALTY, "generic file"
    return 0, None


def size_focus(ctx: SignalContext) -> SignalResult:
    if ctx.file_info is None:
        return 0, None
    lines = ctx.file_info.line_count
    if lines > 500:
        return -12, f"large file ({lines} lines)"
    if lines > 300:
        return -6, f"{lines} lines"
    if lines <= 80:
        return 10, "focused file"
    return 0, None


def export_focus(ctx: SignalContext) -> SignalResult:
    if ctx.file_info is None:
        return 0, None
    count = len(ctx.file_info.exports)
    if count > 10:
        return -12, f"{count} exports"
    if count <= 3:
        return 8, None
    return 0, None


def cluster(ctx: SignalContext) -> SignalResult:
    if ctx.file_info is None or len(ctx.file_info.exports) < 2:
        return 0, None
    words = set(ctx.export_words)
    related = sum(
        1
        for exp in ctx.file_info.exports
        if exp.name != ctx.export_name and words.intersection(split_words(exp.name))
    )
    if not related:
        return 0, None
    return min(related * CLUSTER_WEIGHT, CLUSTER_CAP), f"{related + 1} related functions"


def signature(ctx: SignalContext) -> SignalResult:
    own = ctx.location.signature
    if not own:
        return 0, None
    typed = [o.signature for o in ctx.siblings if o.signature]
    if not typed:
        return UNIQUE_SIGNATURE_BONUS, "has type signature"
    if any(sig != own for sig in typed):
        return DIVERGENT_SIGNATURE_PENALTY, "signature differs"
    return 0, None


Signal = Callable[[SignalContext], SignalResult]

SIGNALS: Tuple[Signal, ...] = (
    name_match,
    folder_match,
    shared_location,
    depended_upon,
    depends_on_sibling,
    popularity,
    generic_file,
    size_focus,
    export_focus,
    cluster,
    signature,
)


def build_context(
    export_name: str,
    location: Location,
    group_locations: Sequence[Location],
    index: ResolutionIndex,
) -> SignalContext:
    path = normalize_path(location.file)
    return SignalContext(
        export_name=export_name,
        export_words=tuple(split_words(export_name)),
        location=location,
        siblings=tuple(o for o in group_locations if normalize_path(o.file) != path),
        file_info=index.file(path),
        dependency=index.deps.get(path),
        deps=index.deps,
    )


def score_location(
    export_name: str,
    location: Location,
    group_locations: Sequence[Location],
    index: ResolutionIndex,
    signals: Sequence[Signal] = SIGNALS,
) -> ScoredLocation:
    ctx = build_context(export_name, location, group_locations, index)
    score = 0
    reasons: list[str] = []
    for signal_fn in signals:
        delta, reason = signal_fn(ctx)
        score += delta
        if reason:
            reasons.append(reason)
    return ScoredLocation(
        file=location.file,
        line=location.line,
        score=score,
        reasons=tuple(reasons),
        signature=location.signature,
    )


__all__ = [
    "ResolutionIndex",
    "SIGNALS",
    "Signal",
    "SignalContext",
    "SignalResult",
    "build_context",
    "score_location",
]
