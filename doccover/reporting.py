"""Human-readable coverage reports."""

from typing import List, Optional, Sequence

from .analysis.coverage import DocCoverage
from .models.coverage_result import CoverageResult


def format_rating(
    package: str,
    rating: Optional[float],
    naked: Sequence[str],
    reason: Optional[str] = None,
) -> List[str]:
    """Format the rating of one package.

    Args:
        package: Dotted name of the analyzed module.
        rating: Coverage rating, or None if the package is unrated.
        naked: Undocumented routine names.
        reason: Why the package is unrated, shown when rating is None.

    Returns:
        Report lines without trailing newlines.
    """
    if rating is None:
        return [f"{package} has no coverage rating ({reason or 'unknown reason'})"]

    lines = [f"{package} has a coverage rating of {rating}"]
    if len(naked) > 1:
        lines.append(f"The following are uncovered: {', '.join(naked)}")
    elif naked:
        lines.append(f"'{naked[0]}' is uncovered")
    return lines


def format_result(result: CoverageResult) -> List[str]:
    """Format a CoverageResult with format_rating."""
    return format_rating(result.package, result.rating, result.naked, result.reason)


def report(package: str, **options) -> CoverageResult:
    """Rate a package and print its report to stdout.

    Args:
        package: Dotted name of the module to analyze.
        **options: Keyword arguments accepted by DocCoverage.

    Returns:
        The CoverageResult that was printed.
    """
    result = DocCoverage(package, **options).result()
    for line in format_result(result):
        print(line)
    return result
