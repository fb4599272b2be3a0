"""
Snapshot I/O helpers.

Thin layer responsible for:
- reading inventory / dependency / import-map JSON produced by collaborators;
- writing analysis results as JSON.

Keeps file-system concerns out of the duplicate engine.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from doppel.analysis.dependencies import DependencySample
from doppel.analysis.inventory import GENERIC_FILE_NAMES, Inventory


class SnapshotError(ValueError):
    """Snapshot file is missing, not JSON, or not the expected shape."""


def _read_json(path: Path) -> Any:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"cannot read {path}: {exc.strerror or exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"{path} is not valid JSON (line {exc.lineno}: {exc.msg})") from exc


def load_inventory(path: Path, *, generic_names: Iterable[str] = GENERIC_FILE_NAMES) -> Inventory:
    """Load an inventory snapshot: {"files": [...]} or a bare list of file records."""
    data = _read_json(path)
    if isinstance(data, list):
        data = {"files": data}
    if not isinstance(data, dict) or not isinstance(data.get("files", []), list):
        raise SnapshotError(f"{path}: expected an object with a 'files' list")
    try:
        return Inventory.from_dict(data, generic_names=generic_names)
    except (TypeError, ValueError, AttributeError) as exc:
        raise SnapshotError(f"{path}: malformed file record ({exc})") from exc


def load_dependency_sample(path: Path) -> List[DependencySample]:
    """Load a dependency sample: a list, or an object with 'mostImported' / 'most_imported'."""
    data = _read_json(path)
    if isinstance(data, dict):
        data = data.get("most_imported", data.get("mostImported"))
    if not isinstance(data, list):
        raise SnapshotError(f"{path}: expected a list of dependency entries")
    try:
        return [DependencySample.from_dict(entry) for entry in data]
    except (TypeError, ValueError, AttributeError) as exc:
        raise SnapshotError(f"{path}: malformed dependency entry ({exc})") from exc


def load_import_map(path: Path) -> Dict[str, List[str]]:
    """Load an importer -> imported-files map ({"src/a.ts": ["src/b.ts", ...]})."""
    data = _read_json(path)
    if not isinstance(data, dict) or not all(isinstance(v, list) for v in data.values()):
        raise SnapshotError(f"{path}: expected an object mapping files to lists of files")
    return {str(k): [str(v) for v in vs] for k, vs in data.items()}


def write_json(path: Path, payload: Any) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
