"""Data models for documentation coverage analysis.

This module defines the core data structures used throughout DocCover:
- AnalysisTarget: Immutable configuration of one analysis
- BlockEvent: A heading, item, or text block from a documentation source
- CoverageResult: Rating plus covered/uncovered names for reporting
"""

from .analysis_target import AnalysisTarget
from .block_event import ITEM, TEXT, BlockEvent, heading_kind
from .coverage_result import CoverageResult

__all__ = [
    "AnalysisTarget",
    "BlockEvent",
    "CoverageResult",
    "ITEM",
    "TEXT",
    "heading_kind",
]
