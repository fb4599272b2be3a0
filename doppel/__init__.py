"""Doppel package.

Duplicate export detection and canonical resolution over a structural
snapshot of a project:

- doppel/analysis      inventory, dependency sample, identifier words
- doppel/duplicates    grouping, categorization, signal scoring, resolution
- doppel/core          single-call analysis pipeline
- doppel/reporting     text/markdown rendering
- doppel/storage       snapshot JSON I/O
- doppel/orchestration logging helpers
"""

__version__ = "0.4.0"
