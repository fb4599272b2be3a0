"""Duplicate report presentation.

Rendering only: takes DuplicateData / ResolvedDuplicate results and returns
formatted strings. Analysis stays in doppel.core.pipeline.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from doppel.duplicates.models import DuplicateData, DuplicateGroup, ResolvedDuplicate
from doppel.duplicates.summary import DuplicationSummary

CONFIDENCE_ORDER = ("high", "medium", "low")


def _where(group: DuplicateGroup) -> str:
    return ", ".join(f"{loc.file}:{loc.line}" for loc in group.locations)


def _reasons_suffix(resolved: ResolvedDuplicate) -> str:
    reasons = resolved.canonical.reasons
    return f" ({', '.join(reasons)})" if reasons else ""


def resolved_line(resolved: ResolvedDuplicate) -> str:
    """One guidance line; low confidence asks for a decision instead of naming a winner."""
    if resolved.confidence == "low":
        candidates = " vs ".join(loc.file for loc in (resolved.canonical, *resolved.alternatives))
        return f"`{resolved.name}` ({resolved.kind}): ambiguous between {candidates} - ask which is canonical"
    ignore = ", ".join(alt.file for alt in resolved.alternatives) or "nothing"
    line = (
        f"`{resolved.name}` ({resolved.kind}) -> use {resolved.canonical.file}:{resolved.canonical.line}"
        f"{_reasons_suffix(resolved)}, IGNORE {ignore}"
    )
    if resolved.canonical.signature:
        line += f"\n  Signature: `{resolved.canonical.signature}`"
    return line


def format_resolved_text(resolved: Sequence[ResolvedDuplicate]) -> str:
    if not resolved:
        return "No accidental duplicates."
    lines = [f"CANONICAL RESOLUTION ({len(resolved)} duplicate exports)"]
    for level in CONFIDENCE_ORDER:
        bucket = [r for r in resolved if r.confidence == level]
        if not bucket:
            continue
        lines.append("")
        lines.append(f"{level.upper()} confidence ({len(bucket)}):")
        for r in bucket:
            lines.append(f"  - {resolved_line(r)}")
            for alt in r.alternatives:
                lines.append(f"      {alt.file}:{alt.line} score={alt.score}")
    return "\n".join(lines)


def format_resolved_markdown(resolved: Sequence[ResolvedDuplicate]) -> str:
    lines = ["## Duplicate exports", ""]
    if not resolved:
        lines.append("No accidental duplicates detected.")
        return "\n".join(lines) + "\n"
    lines.append(
        f"{len(resolved)} exports are defined in more than one file. "
        "Use the indicated canonical version; for ambiguous ones, ask the user."
    )
    lines.append("")
    for level in CONFIDENCE_ORDER:
        bucket = [r for r in resolved if r.confidence == level]
        if not bucket:
            continue
        lines.append(f"### {level.capitalize()} confidence ({len(bucket)})")
        lines.append("")
        lines.append("| Export | Canonical | Score | Alternatives |")
        lines.append("|--------|-----------|-------|--------------|")
        for r in bucket:
            alts = "<br>".join(f"{a.file}:{a.line} ({a.score})" for a in r.alternatives) or "-"
            lines.append(
                f"| `{r.name}` | {r.canonical.file}:{r.canonical.line} | {r.canonical.score} | {alts} |"
            )
        lines.append("")
    return "\n".join(lines)


def _groups_block(title: str, groups: Sequence[DuplicateGroup]) -> List[str]:
    lines = [f"{title} ({len(groups)}):"]
    for group in groups:
        lines.append(f"  - {group.name} ({group.kind}) in {_where(group)}")
    return lines


def format_duplicates_text(data: DuplicateData, summary: DuplicationSummary | None = None) -> str:
    """Plain-text listing of accidental duplicates and cross-stack mirrors."""
    if not data.duplicates and not data.cross_stack_mirrors:
        return "No duplicate exports."
    lines: List[str] = []
    if data.duplicates:
        lines.extend(_groups_block("Duplicate exports", data.duplicates))
    if data.cross_stack_mirrors:
        if lines:
            lines.append("")
        lines.extend(_groups_block("Cross-stack mirrors (keep in sync)", data.cross_stack_mirrors))
    if summary and summary.files_with_most_duplicates:
        lines.append("")
        lines.append("Files with most duplicates:")
        for file, count in summary.files_with_most_duplicates:
            lines.append(f"  - {file} ({count})")
    return "\n".join(lines)


def format_duplicates_markdown(data: DuplicateData, summary: DuplicationSummary | None = None) -> str:
    lines = ["## Duplication", "", f"**{data.total_duplicate_names}** duplicate export names", ""]
    for group in data.duplicates:
        lines.append(f"- `{group.name}` ({group.kind}) - {_where(group)}")
    if data.cross_stack_mirrors:
        lines.extend(["", "### Cross-stack mirrors", ""])
        for group in data.cross_stack_mirrors:
            lines.append(f"- `{group.name}` - {_where(group)}")
    if summary and summary.files_with_most_duplicates:
        lines.extend(["", "### Files with most duplicates", ""])
        for file, count in summary.files_with_most_duplicates:
            lines.append(f"- **{file}** - {count} duplicate exports")
    return "\n".join(lines) + "\n"


def render_duplicate_report(analysis: Any, *, format: str = "text") -> str:
    """Render a DuplicateAnalysis: groups first, then canonical guidance when resolved."""
    if format == "markdown":
        parts = [format_duplicates_markdown(analysis.data, analysis.summary)]
        if analysis.resolved:
            parts.append(format_resolved_markdown(analysis.resolved))
        return "\n".join(parts)
    parts = [format_duplicates_text(analysis.data, analysis.summary)]
    if analysis.resolved:
        parts.append(format_resolved_text(analysis.resolved))
    return "\n\n".join(parts)
