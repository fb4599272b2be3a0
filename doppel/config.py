"""Analysis configuration: defaults, then pyproject [tool.doppel], then DOPPEL_* env."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from doppel.analysis.dependencies import DEFAULT_SAMPLE_LIMIT
from doppel.analysis.inventory import GENERIC_FILE_NAMES
from doppel.duplicates.summary import TOP_FILES


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    workers: int = 1
    dependency_limit: int = DEFAULT_SAMPLE_LIMIT
    top_files: int = TOP_FILES
    generic_names: tuple[str, ...] = GENERIC_FILE_NAMES


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    return default


def _tool_section(project_root: Path) -> dict:
    """[tool.doppel] from pyproject.toml; empty when absent or unreadable."""
    pyproject = Path(project_root) / "pyproject.toml"
    if not pyproject.is_file():
        return {}
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    section = (data.get("tool") or {}).get("doppel") or {}
    return section if isinstance(section, dict) else {}


def load_analysis_config(project_root: Path | None = None) -> AnalysisConfig:
    """Load configuration for one analysis run."""
    cfg = AnalysisConfig()
    if project_root is not None:
        tool = _tool_section(project_root)
        names = tool.get("generic_names")
        cfg = replace(
            cfg,
            workers=_as_int(tool.get("workers"), cfg.workers),
            dependency_limit=_as_int(tool.get("dependency_limit"), cfg.dependency_limit),
            top_files=_as_int(tool.get("top_files"), cfg.top_files),
            generic_names=(
                tuple(str(n).lower() for n in names) if isinstance(names, list) else cfg.generic_names
            ),
        )
    return replace(
        cfg,
        workers=max(1, _env_int("DOPPEL_WORKERS", cfg.workers)),
        dependency_limit=max(0, _env_int("DOPPEL_DEPENDENCY_LIMIT", cfg.dependency_limit)),
        top_files=max(0, _env_int("DOPPEL_TOP_FILES", cfg.top_files)),
    )


__all__ = ["AnalysisConfig", "load_analysis_config"]
