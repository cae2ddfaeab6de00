"""
Error hierarchy for doccover.

The unrated conditions (module cannot be loaded, documentation missing or
unparsable, no eligible routines) are raised inside the coverage engine and
collapsed into a ``None`` rating at its public boundary.
"""

from typing import Any, Dict, Optional


class DocCoverageError(Exception):
    """Base class for all doccover exceptions."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize the DocCoverageError.

        Args:
            message: The primary error message.
            error_code: A unique code for this error type (e.g., 'DOCS_MISSING').
            context: A dictionary of contextual information related to the error.
            original_exception: The original exception that was caught and wrapped.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        """Create a string representation of the error."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}]")
        parts.append(self.message)

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"Context: ({context_str})")

        if self.original_exception:
            parts.append(
                f"--> Caused by: {type(self.original_exception).__name__}: {self.original_exception}"
            )

        return " ".join(parts)


class CoverageUnavailable(DocCoverageError):
    """No coverage rating can be computed for a package."""


class ModuleUnavailable(CoverageUnavailable):
    """The target module could not be imported."""

    def __init__(self, package: str, original_exception: Optional[Exception] = None):
        super().__init__(
            f"Cannot load module '{package}'",
            error_code="MODULE_UNAVAILABLE",
            context={"package": package},
            original_exception=original_exception,
        )


class DocumentationSourceMissing(CoverageUnavailable):
    """No documentation source was found for the target module."""

    def __init__(self, package: str):
        super().__init__(
            f"No documentation found for '{package}'",
            error_code="DOCS_MISSING",
            context={"package": package},
        )


class EmptySymbolSet(CoverageUnavailable):
    """The target module defines no eligible routines."""

    def __init__(self, package: str):
        super().__init__(
            f"'{package}' defines no public routines",
            error_code="NO_SYMBOLS",
            context={"package": package},
        )


class DocumentationSourceUnreadable(CoverageUnavailable):
    """The documentation source exists but cannot be parsed."""

    def __init__(self, package: str, original_exception: Optional[Exception] = None):
        super().__init__(
            f"Cannot parse documentation for '{package}'",
            error_code="DOCS_UNREADABLE",
            context={"package": package},
            original_exception=original_exception,
        )
