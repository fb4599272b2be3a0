"""Tests for doppel.duplicates.detector (grouping and categorization)."""

from __future__ import annotations

from doppel.analysis.inventory import ExportRecord, FileRecord, Inventory
from doppel.duplicates.detector import categorize, detect_duplicates, is_barrel_file, stack_of
from doppel.duplicates.models import Location


def _file(path: str, *exports: tuple, lines: int = 40) -> FileRecord:
    """exports: (name,), (name, line) or (name, line, signature)."""
    records = []
    for i, exp in enumerate(exports):
        name = exp[0]
        line = exp[1] if len(exp) > 1 else i + 1
        signature = exp[2] if len(exp) > 2 else None
        records.append(ExportRecord(name=name, kind="function", line=line, signature=signature))
    return FileRecord(path=path, line_count=lines, exports=tuple(records))


def _inventory(*files: FileRecord) -> Inventory:
    return Inventory(files=tuple(files))


def _names(groups) -> list[str]:
    return [g.name for g in groups]


def test_stack_and_barrel_helpers() -> None:
    assert stack_of("Api/Models/UserDto.cs") == "backend"
    assert stack_of("web/src/user.TSX") == "frontend"
    assert stack_of("tools/gen.py") == "unknown"
    assert is_barrel_file("src/index.ts")
    assert is_barrel_file("src/INDEX.js")
    assert not is_barrel_file("src/indexer.ts")


def test_accidental_duplicate_is_reported() -> None:
    data = detect_duplicates(_inventory(_file("src/a.ts", ("formatDate",)), _file("src/b.ts", ("formatDate",))))
    assert _names(data.duplicates) == ["formatDate"]
    group = data.duplicates[0]
    assert group.category == "accidental"
    assert [loc.file for loc in group.locations] == ["src/a.ts", "src/b.ts"]
    assert data.cross_stack_mirrors == ()
    assert data.total_duplicate_names == 1


def test_default_export_is_ignored() -> None:
    data = detect_duplicates(_inventory(_file("src/a.ts", ("default",)), _file("src/b.ts", ("default",))))
    assert data.duplicates == ()


def test_dedupe_by_file_keeps_first_occurrence() -> None:
    data = detect_duplicates(
        _inventory(
            _file("src/a.ts", ("parse", 3), ("parse", 10)),
            _file("src/b.ts", ("parse", 5)),
        )
    )
    assert data.duplicates[0].locations[0] == Location("src/a.ts", 3)
    assert len(data.duplicates[0].locations) == 2


def test_same_file_only_is_not_a_duplicate() -> None:
    data = detect_duplicates(_inventory(_file("src/a.ts", ("parse", 3), ("parse", 10))))
    assert data.duplicates == ()


def test_barrel_only_group_disappears() -> None:
    data = detect_duplicates(_inventory(_file("src/a.ts", ("useUser",)), _file("src/index.ts", ("useUser",))))
    assert data.duplicates == ()
    assert data.cross_stack_mirrors == ()


def test_barrel_location_removed_from_surviving_group() -> None:
    data = detect_duplicates(
        _inventory(
            _file("src/index.ts", ("useUser",)),
            _file("src/a.ts", ("useUser",)),
            _file("src/b.ts", ("useUser",)),
        )
    )
    files = [loc.file for loc in data.duplicates[0].locations]
    assert files == ["src/a.ts", "src/b.ts"]


def test_cross_stack_wins_over_divergent_signatures() -> None:
    data = detect_duplicates(
        _inventory(
            _file("Api/Models/UserDto.cs", ("UserDto", 4, "class UserDto { string Name }")),
            _file("web/src/types/userDto.ts", ("UserDto", 2, "interface UserDto { name: string }")),
        )
    )
    assert _names(data.cross_stack_mirrors) == ["UserDto"]
    assert data.cross_stack_mirrors[0].category == "cross-stack"
    assert data.duplicates == ()


def test_backend_with_unknown_stack_is_cross_stack() -> None:
    locs = [Location("Api/Thing.cs", 1), Location("scripts/thing.py", 1)]
    assert categorize(locs) == "cross-stack"


def test_two_backend_files_are_not_cross_stack() -> None:
    locs = [Location("Api/A.cs", 1), Location("Api/B.cs", 1)]
    assert categorize(locs) == "accidental"


def test_polymorphic_group_is_suppressed() -> None:
    data = detect_duplicates(
        _inventory(
            _file("src/a.ts", ("parse", 1, "(s: string) => Date")),
            _file("src/b.ts", ("parse", 1, "(n: number) => Money")),
        )
    )
    assert data.duplicates == ()
    assert data.cross_stack_mirrors == ()


def test_matching_or_single_signature_stays_accidental() -> None:
    same = [Location("a.ts", 1, "() => void"), Location("b.ts", 1, "() => void")]
    single = [Location("a.ts", 1, "() => void"), Location("b.ts", 1)]
    assert categorize(same) == "accidental"
    assert categorize(single) == "accidental"


def test_groups_sorted_by_location_count() -> None:
    data = detect_duplicates(
        _inventory(
            _file("src/a.ts", ("pair",), ("triple",)),
            _file("src/b.ts", ("pair",), ("triple",)),
            _file("src/c.ts", ("triple",)),
        )
    )
    assert _names(data.duplicates) == ["triple", "pair"]


def test_kind_taken_from_first_occurrence() -> None:
    inv = Inventory(
        files=(
            FileRecord("src/a.ts", 10, (ExportRecord("Shape", "interface", 1),)),
            FileRecord("src/b.ts", 10, (ExportRecord("Shape", "class", 1),)),
        )
    )
    assert detect_duplicates(inv).duplicates[0].kind == "interface"


def test_every_group_lands_in_exactly_one_list() -> None:
    inv = _inventory(
        _file("src/a.ts", ("alpha",), ("beta",), ("gamma", 3, "x")),
        _file("src/b.ts", ("alpha",), ("gamma", 3, "y")),
        _file("Api/B.cs", ("beta",)),
        _file("src/index.ts", ("alpha",), ("delta",)),
        _file("src/d.ts", ("delta",)),
    )
    data = detect_duplicates(inv)
    dup_names = set(_names(data.duplicates))
    mirror_names = set(_names(data.cross_stack_mirrors))
    assert dup_names == {"alpha"}
    assert mirror_names == {"beta"}
    assert not dup_names & mirror_names
    for group in (*data.duplicates, *data.cross_stack_mirrors):
        files = [loc.file for loc in group.locations]
        assert len(files) == len(set(files)) >= 2
        assert not any(is_barrel_file(f) for f in files)


def test_detection_is_idempotent() -> None:
    inv = _inventory(
        _file("src/a.ts", ("x1",), ("x2",)),
        _file("src/b.ts", ("x1",), ("x2",)),
        _file("src/c.ts", ("x2",)),
    )
    assert detect_duplicates(inv).to_dict() == detect_duplicates(inv).to_dict()


def test_unknown_kind_on_direct_records_becomes_other() -> None:
    inv = Inventory(
        files=(
            FileRecord("src/a.ts", 10, (ExportRecord("x1y", "method", 1),)),
            FileRecord("src/b.ts", 10, (ExportRecord("x1y", "method", 1),)),
        )
    )
    assert detect_duplicates(inv).duplicates[0].kind == "other"
