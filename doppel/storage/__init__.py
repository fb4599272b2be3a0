"""Storage façade: snapshot JSON I/O."""

from .snapshot_io import (  # noqa: F401
    SnapshotError,
    load_dependency_sample,
    load_import_map,
    load_inventory,
    write_json,
)

__all__ = [
    "SnapshotError",
    "load_dependency_sample",
    "load_import_map",
    "load_inventory",
    "write_json",
]
