"""DocCover Package.

This package measures how much of a Python module's API is named in its
structured documentation, including:
- Enumeration of the routines a module defines itself
- Extraction of documented names from headings and list items
- Coverage ratios with covered/uncovered queries
- A command-line report
"""

__version__ = "0.1.0"

from .analysis.coverage import DocCoverage, ExportOnlyCoverage
from .reporting import report

__all__ = ["DocCoverage", "ExportOnlyCoverage", "report"]
