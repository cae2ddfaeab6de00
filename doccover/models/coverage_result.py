"""CoverageResult data model for reporting a single package's coverage."""

from dataclasses import dataclass, field, asdict
from typing import List, Optional


@dataclass
class CoverageResult:
    """Outcome of rating one package.

    Attributes:
        package: Dotted name of the analyzed module.
        rating: Fraction of eligible routines that are documented (0-1), or
            None when no rating could be computed.
        covered: Sorted names of documented routines.
        naked: Sorted names of undocumented routines.
        reason: Why the package is unrated, None when it has a rating.
    """

    package: str
    rating: Optional[float]
    covered: List[str] = field(default_factory=list)
    naked: List[str] = field(default_factory=list)
    reason: Optional[str] = None

    @property
    def has_rating(self) -> bool:
        """Whether a numeric rating was computed."""
        return self.rating is not None

    @property
    def total_items(self) -> int:
        return len(self.covered) + len(self.naked)

    def to_dict(self) -> dict:
        """Serialize CoverageResult to a JSON-compatible dictionary.

        Returns:
            Dictionary representation of the CoverageResult with all fields.
        """
        return asdict(self)
