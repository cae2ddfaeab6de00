"""Command-line interface for the documentation coverage checker.

This module provides the main entry point for running doccover from the
command line. It uses argparse to handle subcommands and configuration.
"""

import argparse
import json
import logging
import pkgutil
import sys
from typing import List, Optional

from . import __version__
from .analysis.coverage import DocCoverage, ExportOnlyCoverage
from .loaders.doc_finder import DocSourceFinder
from .models.coverage_result import CoverageResult
from .reporting import format_result


def create_coverage(
    package: str,
    export_only: bool = False,
    finder: Optional[DocSourceFinder] = None,
    **options,
) -> DocCoverage:
    """Create a DocCoverage for a package.

    Args:
        package: Dotted name of the module to analyze.
        export_only: If True, only check names listed in ``__all__``.
        finder: Optional DocSourceFinder (dependency injection).
        **options: Remaining DocCoverage keyword arguments.

    Returns:
        DocCoverage: Configured coverage instance.
    """
    coverage_class = ExportOnlyCoverage if export_only else DocCoverage
    return coverage_class(package, finder=finder, **options)


def format_json(result: CoverageResult) -> str:
    """Format a coverage result as JSON.

    Args:
        result: CoverageResult object to format.

    Returns:
        JSON string representation.
    """
    return json.dumps(result.to_dict(), indent=2)


def format_summary(results: List[CoverageResult]) -> str:
    """Format coverage results as human-readable lines.

    Args:
        results: CoverageResult objects to format.

    Returns:
        Formatted summary string.
    """
    lines = []
    for result in results:
        lines.extend(format_result(result))
    return "\n".join(lines)


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )


def cmd_report(args: argparse.Namespace) -> int:
    """Handle the report subcommand.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 when unrated or below --fail-under).
    """
    _configure_logging(args.debug)

    coverage = create_coverage(
        args.package,
        export_only=args.export_only,
        private=args.private,
        also_private=args.also_private,
        pod_from=args.pod_from,
        debug=args.debug,
    )

    result = coverage.result()

    if args.format == "json":
        print(format_json(result))
    else:
        print(format_summary([result]))

    if not result.has_rating:
        return 1
    if args.fail_under is not None and result.rating < args.fail_under:
        print(
            f"Coverage {result.rating:.2f} is below the required {args.fail_under:.2f}",
            file=sys.stderr,
        )
        return 1
    return 0


def discover_modules(paths: List[str]) -> List[str]:
    """List the dotted names of all modules under the given directories.

    Args:
        paths: Directories to walk.

    Returns:
        Sorted, de-duplicated module names.
    """

    def onerror(name: str) -> None:
        print(f"Warning: Failed to walk package {name}", file=sys.stderr)

    names = {info.name for info in pkgutil.walk_packages(paths, onerror=onerror)}
    return sorted(names)


def cmd_check_installed(args: argparse.Namespace) -> int:
    """Handle the check-installed subcommand.

    Rates every module found under the given directories.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 if no modules were found).
    """
    _configure_logging(args.debug)

    # Modules under the walked directories must be importable by name
    saved_path = list(sys.path)
    sys.path[:0] = [path for path in args.paths if path not in sys.path]
    try:
        modules = discover_modules(args.paths)
        if not modules:
            print(
                f"Error: No modules found under {', '.join(args.paths)}",
                file=sys.stderr,
            )
            return 1

        finder = DocSourceFinder(args.paths)
        results = [
            create_coverage(name, finder=finder, debug=args.debug).result()
            for name in modules
        ]
    finally:
        sys.path[:] = saved_path

    if args.format == "json":
        print(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        print(format_summary(results))
    return 0


def main(argv: list | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        prog="doccover",
        description=(
            "Check that a module's documentation mentions every routine it defines"
        ),
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Report command
    report_parser = subparsers.add_parser(
        "report", help="Rate the documentation coverage of one module"
    )
    report_parser.add_argument("package", help="Dotted name of the module to analyze")
    report_parser.add_argument(
        "--private",
        action="append",
        default=None,
        metavar="REGEX",
        help="Pattern for private names; replaces the defaults (repeatable)",
    )
    report_parser.add_argument(
        "--also-private",
        action="append",
        default=None,
        metavar="REGEX",
        help="Pattern for private names, added to the defaults (repeatable)",
    )
    report_parser.add_argument(
        "--pod-from",
        default=None,
        metavar="PATH",
        help="Documentation file to parse instead of searching sys.path",
    )
    report_parser.add_argument(
        "--export-only",
        action="store_true",
        help="Only check names the module lists in __all__",
    )
    report_parser.add_argument(
        "--format",
        choices=["json", "summary"],
        default="summary",
        help="Output format (default: summary)",
    )
    report_parser.add_argument(
        "--fail-under",
        type=float,
        default=None,
        metavar="RATIO",
        help="Exit with status 1 if the rating is below RATIO (0-1)",
    )
    report_parser.add_argument(
        "--debug", action="store_true", help="Log progress diagnostics to stderr"
    )

    # Check-installed command
    installed_parser = subparsers.add_parser(
        "check-installed", help="Rate every module found under some directories"
    )
    installed_parser.add_argument(
        "paths", nargs="+", help="Directories containing modules to rate"
    )
    installed_parser.add_argument(
        "--format",
        choices=["json", "summary"],
        default="summary",
        help="Output format (default: summary)",
    )
    installed_parser.add_argument(
        "--debug", action="store_true", help="Log progress diagnostics to stderr"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "report":
        return cmd_report(args)
    if args.command == "check-installed":
        return cmd_check_installed(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
