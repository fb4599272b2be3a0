"""Inventory snapshot model: files and their exported symbols.

The inventory is produced upstream by the source-parsing collaborator and is
read-only here. `from_dict` accepts both the snake_case field names used by
this package and the camelCase names of the upstream JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Iterable, Literal, Mapping, get_args

ExportKind = Literal["function", "class", "type", "interface", "const", "enum", "other"]
SizeClass = Literal["ok", "medium", "high", "critical"]

EXPORT_KINDS: frozenset[str] = frozenset(get_args(ExportKind))

# Junk-drawer file names (JS/TS and C# flavours); matched as exact or prefix.
GENERIC_FILE_NAMES: tuple[str, ...] = (
    "utils",
    "helpers",
    "common",
    "shared",
    "misc",
    "tools",
    "lib",
    "functions",
    "utilities",
    "helper",
    "extensions",
    "constants",
    "globals",
    "basecontroller",
)

CRITICAL_LINES = 800
HIGH_LINES = 500
MEDIUM_LINES = 350


def normalize_path(path: str) -> str:
    return str(path).replace("\\", "/")


def file_stem(path: str) -> str:
    """Base name without extension, case-folded."""
    return PurePosixPath(normalize_path(path)).stem.lower()


def coerce_kind(raw: Any) -> ExportKind:
    value = str(raw or "").strip().lower()
    if value in EXPORT_KINDS:
        return value  # type: ignore[return-value]
    return "other"


def classify_size(line_count: int) -> SizeClass:
    if line_count > CRITICAL_LINES:
        return "critical"
    if line_count > HIGH_LINES:
        return "high"
    if line_count > MEDIUM_LINES:
        return "medium"
    return "ok"


def is_generic_file_name(path: str, generic_names: Iterable[str] = GENERIC_FILE_NAMES) -> bool:
    stem = file_stem(path)
    return any(stem == g or stem.startswith(g) for g in generic_names)


def _first(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


@dataclass(frozen=True)
class ExportRecord:
    name: str
    kind: ExportKind = "other"
    line: int = 0
    signature: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ExportRecord":
        signature = _first(raw, "signature")
        return cls(
            name=str(raw.get("name", "")),
            kind=coerce_kind(_first(raw, "kind", "type")),
            line=int(_first(raw, "line", default=0)),
            signature=str(signature) if signature else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "kind": self.kind, "line": self.line}
        if self.signature:
            out["signature"] = self.signature
        return out


@dataclass(frozen=True)
class FileRecord:
    path: str
    line_count: int
    exports: tuple[ExportRecord, ...] = ()
    size_class: SizeClass = "ok"
    is_generic_name: bool = False

    @classmethod
    def from_dict(
        cls,
        raw: Mapping[str, Any],
        *,
        generic_names: Iterable[str] = GENERIC_FILE_NAMES,
    ) -> "FileRecord":
        """Build from upstream JSON; missing size class / generic flag are derived."""
        path = normalize_path(str(raw.get("path", "")))
        line_count = int(_first(raw, "line_count", "lineCount", "lines", default=0))
        size_class = _first(raw, "size_class", "sizeClass", "classification")
        if size_class not in ("ok", "medium", "high", "critical"):
            size_class = classify_size(line_count)
        generic = _first(raw, "is_generic_name", "isGenericName", "isGeneric")
        if not isinstance(generic, bool):
            generic = is_generic_file_name(path, generic_names)
        return cls(
            path=path,
            line_count=line_count,
            exports=tuple(ExportRecord.from_dict(e) for e in raw.get("exports") or ()),
            size_class=size_class,
            is_generic_name=generic,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "line_count": self.line_count,
            "exports": [e.to_dict() for e in self.exports],
            "size_class": self.size_class,
            "is_generic_name": self.is_generic_name,
        }


@dataclass(frozen=True)
class Inventory:
    """All analyzed files, in the order the parser reported them."""

    files: tuple[FileRecord, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(
        cls,
        raw: Mapping[str, Any],
        *,
        generic_names: Iterable[str] = GENERIC_FILE_NAMES,
    ) -> "Inventory":
        names = tuple(generic_names)
        return cls(
            files=tuple(
                FileRecord.from_dict(f, generic_names=names) for f in raw.get("files") or ()
            )
        )

    def find(self, path: str) -> FileRecord | None:
        target = normalize_path(path)
        for record in self.files:
            if record.path == target:
                return record
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"files": [f.to_dict() for f in self.files]}


__all__ = [
    "ExportKind",
    "SizeClass",
    "EXPORT_KINDS",
    "GENERIC_FILE_NAMES",
    "ExportRecord",
    "FileRecord",
    "Inventory",
    "classify_size",
    "coerce_kind",
    "file_stem",
    "is_generic_file_name",
    "normalize_path",
]
