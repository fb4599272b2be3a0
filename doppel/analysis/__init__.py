"""Analysis layer: inventory snapshot, dependency sample, identifier words."""

from .dependencies import DependencyIndex, DependencySample, build_dependency_sample
from .inventory import (
    ExportRecord,
    FileRecord,
    Inventory,
    classify_size,
    is_generic_file_name,
)
from .words import split_words

__all__ = [
    "DependencyIndex",
    "DependencySample",
    "ExportRecord",
    "FileRecord",
    "Inventory",
    "build_dependency_sample",
    "classify_size",
    "is_generic_file_name",
    "split_words",
]
