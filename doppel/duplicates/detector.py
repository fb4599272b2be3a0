"""
Duplicate export grouping and categorization.

Decision order per group (first match wins):
1. Drop barrel locations (index.*); fewer than 2 real files left -> not reported.
2. Locations span a backend (.cs) and a frontend/unknown stack -> cross-stack mirror.
3. Two or more non-empty signatures that are not all equal -> polymorphic (not reported).
4. Otherwise -> accidental duplicate.

Cross-stack is checked before signatures: mirrors of one API contract always
carry per-language signatures and must not be dropped as polymorphic.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Dict, List, Literal, Sequence, Tuple

from doppel.analysis.inventory import Inventory, coerce_kind, file_stem
from doppel.orchestration.logging import get_logger

from .models import DuplicateCategory, DuplicateData, DuplicateGroup, Location

Stack = Literal["backend", "frontend", "unknown"]

BARREL_NAMES = frozenset({"index"})
BACKEND_EXTENSIONS = frozenset({".cs"})
FRONTEND_EXTENSIONS = frozenset({".ts", ".tsx", ".js", ".jsx"})

_log = get_logger("duplicates")


def is_barrel_file(path: str) -> bool:
    return file_stem(path) in BARREL_NAMES


def stack_of(path: str) -> Stack:
    ext = PurePosixPath(path).suffix.lower()
    if ext in BACKEND_EXTENSIONS:
        return "backend"
    if ext in FRONTEND_EXTENSIONS:
        return "frontend"
    return "unknown"


def categorize(locations: Sequence[Location]) -> DuplicateCategory:
    """Categorize non-barrel locations of one export name."""
    stacks = {stack_of(loc.file) for loc in locations}
    if "backend" in stacks and ("frontend" in stacks or "unknown" in stacks):
        return "cross-stack"
    signatures = [loc.signature for loc in locations if loc.signature]
    if len(signatures) >= 2 and len(set(signatures)) > 1:
        return "polymorphic"
    return "accidental"


def _collect_occurrences(inventory: Inventory) -> Tuple[Dict[str, List[Location]], Dict[str, str]]:
    """Map export name -> occurrences in inventory order, plus the kind of the first one."""
    occurrences: Dict[str, List[Location]] = {}
    kinds: Dict[str, str] = {}
    for record in inventory.files:
        for exp in record.exports:
            if exp.name == "default":
                continue
            occurrences.setdefault(exp.name, []).append(
                Location(file=record.path, line=exp.line, signature=exp.signature or None)
            )
            kinds.setdefault(exp.name, coerce_kind(exp.kind))
    return occurrences, kinds


def detect_duplicates(inventory: Inventory) -> DuplicateData:
    """Group exports by name and route accidental duplicates and cross-stack mirrors."""
    accidental: List[DuplicateGroup] = []
    mirrors: List[DuplicateGroup] = []
    suppressed = 0
    occurrences, kinds = _collect_occurrences(inventory)
    for name, locations in occurrences.items():
        if len(locations) < 2:
            continue
        by_file: Dict[str, Location] = {}
        for loc in locations:
            by_file.setdefault(loc.file, loc)
        if len(by_file) < 2:
            continue
        real = [loc for loc in by_file.values() if not is_barrel_file(loc.file)]
        if len(real) < 2:
            suppressed += 1
            continue
        category = categorize(real)
        group = DuplicateGroup(
            name=name,
            kind=kinds.get(name, "other"),
            locations=tuple(real),
            category=category,
        )
        if category == "cross-stack":
            mirrors.append(group)
        elif category == "accidental":
            accidental.append(group)
        else:
            suppressed += 1

    accidental.sort(key=lambda g: -len(g.locations))
    mirrors.sort(key=lambda g: -len(g.locations))
    _log.debug(
        "duplicates: %d accidental, %d cross-stack, %d suppressed (barrel/polymorphic)",
        len(accidental),
        len(mirrors),
        suppressed,
    )
    return DuplicateData(duplicates=tuple(accidental), cross_stack_mirrors=tuple(mirrors))


__all__ = [
    "BARREL_NAMES",
    "categorize",
    "detect_duplicates",
    "is_barrel_file",
    "stack_of",
]
