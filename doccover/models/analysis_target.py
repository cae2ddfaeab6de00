"""AnalysisTarget data model describing what a coverage run inspects."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AnalysisTarget:
    """Immutable configuration for one coverage analysis.

    Attributes:
        package: Dotted name of the module to analyze.
        pod_from: Explicit path of the documentation source. When None the
            source is located by searching the import path.
        debug: Whether to emit progress diagnostics through logging.
    """

    package: str
    pod_from: Optional[str] = None
    debug: bool = False
