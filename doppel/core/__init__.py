"""Core orchestration: one entry point for a full duplicate analysis."""

from .pipeline import DuplicateAnalysis, analyze_snapshot_files, run_duplicate_analysis

__all__ = ["DuplicateAnalysis", "analyze_snapshot_files", "run_duplicate_analysis"]
