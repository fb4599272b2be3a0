"""Duplicate export engine: grouping, categorization, canonical resolution."""

from .detector import categorize, detect_duplicates, is_barrel_file, stack_of
from .models import (
    DuplicateData,
    DuplicateGroup,
    Location,
    ResolvedDuplicate,
    ScoredLocation,
)
from .resolver import confidence_for_gap, resolve_canonicals, resolve_group
from .signals import SIGNALS, score_location
from .summary import DuplicationSummary, summarize_duplication

__all__ = [
    "DuplicateData",
    "DuplicateGroup",
    "DuplicationSummary",
    "Location",
    "ResolvedDuplicate",
    "SIGNALS",
    "ScoredLocation",
    "categorize",
    "confidence_for_gap",
    "detect_duplicates",
    "is_barrel_file",
    "resolve_canonicals",
    "resolve_group",
    "score_location",
    "stack_of",
    "summarize_duplication",
]
