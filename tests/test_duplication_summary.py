"""Tests for doppel.duplicates.summary."""

from doppel.duplicates.models import DuplicateData, DuplicateGroup, Location
from doppel.duplicates.summary import summarize_duplication


def _group(name: str, *files: str, category: str = "accidental") -> DuplicateGroup:
    return DuplicateGroup(name, "function", tuple(Location(f, 1) for f in files), category)  # type: ignore[arg-type]


def test_files_with_most_duplicates() -> None:
    data = DuplicateData(
        duplicates=(
            _group("a", "src/utils.ts", "src/x.ts"),
            _group("b", "src/utils.ts", "src/y.ts"),
            _group("c", "src/utils.ts", "src/x.ts"),
        ),
        cross_stack_mirrors=(_group("Dto", "Api/Dto.cs", "src/dto.ts", category="cross-stack"),),
    )
    summary = summarize_duplication(data)
    assert summary.total_duplicate_names == 3
    assert summary.cross_stack_count == 1
    assert summary.files_with_most_duplicates == (("src/utils.ts", 3), ("src/x.ts", 2), ("src/y.ts", 1))


def test_top_n_limits_files() -> None:
    data = DuplicateData(duplicates=tuple(_group(f"n{i}", f"src/f{i}.ts", "src/common.ts") for i in range(15)))
    summary = summarize_duplication(data, top_n=10)
    assert len(summary.files_with_most_duplicates) == 10
    assert summary.files_with_most_duplicates[0] == ("src/common.ts", 15)


def test_empty_summary() -> None:
    summary = summarize_duplication(DuplicateData())
    assert summary.to_dict() == {
        "total_duplicate_names": 0,
        "cross_stack_count": 0,
        "files_with_most_duplicates": [],
    }
