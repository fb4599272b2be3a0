"""Duplicate detection and resolution data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

DuplicateCategory = Literal["accidental", "cross-stack", "polymorphic", "barrel-filtered"]
Confidence = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class Location:
    file: str
    line: int
    signature: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"file": self.file, "line": self.line}
        if self.signature:
            out["signature"] = self.signature
        return out


@dataclass(frozen=True)
class DuplicateGroup:
    """Same-named export found in several files (at most one location per file)."""

    name: str
    kind: str
    locations: tuple[Location, ...]
    category: DuplicateCategory

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "category": self.category,
            "locations": [loc.to_dict() for loc in self.locations],
        }


@dataclass(frozen=True)
class DuplicateData:
    duplicates: tuple[DuplicateGroup, ...] = ()
    cross_stack_mirrors: tuple[DuplicateGroup, ...] = ()

    @property
    def total_duplicate_names(self) -> int:
        return len(self.duplicates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "duplicates": [g.to_dict() for g in self.duplicates],
            "total_duplicate_names": self.total_duplicate_names,
            "cross_stack_mirrors": [g.to_dict() for g in self.cross_stack_mirrors],
        }


@dataclass(frozen=True)
class ScoredLocation:
    file: str
    line: int
    score: int
    reasons: tuple[str, ...] = ()
    signature: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "file": self.file,
            "line": self.line,
            "score": self.score,
            "reasons": list(self.reasons),
        }
        if self.signature:
            out["signature"] = self.signature
        return out


@dataclass(frozen=True)
class ResolvedDuplicate:
    name: str
    kind: str
    canonical: ScoredLocation
    alternatives: tuple[ScoredLocation, ...] = field(default_factory=tuple)
    confidence: Confidence = "low"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "confidence": self.confidence,
            "canonical": self.canonical.to_dict(),
            "alternatives": [alt.to_dict() for alt in self.alternatives],
        }


__all__ = [
    "Confidence",
    "DuplicateCategory",
    "DuplicateData",
    "DuplicateGroup",
    "Location",
    "ResolvedDuplicate",
    "ScoredLocation",
]
