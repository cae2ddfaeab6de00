"""Documentation coverage engine with dependency injection."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..exceptions import (
    CoverageUnavailable,
    DocumentationSourceMissing,
    DocumentationSourceUnreadable,
    EmptySymbolSet,
)
from ..loaders.doc_finder import DocSourceFinder
from ..loaders.module_loader import ModuleHandle, ModuleLoader
from ..models.analysis_target import AnalysisTarget
from ..models.coverage_result import CoverageResult
from ..parsers.base_parser import BaseTokenizer
from ..parsers.block_extractor import BlockExtractor
from ..parsers.doc_tokenizer import StructuredTextTokenizer
from .privacy_policy import PatternLike, PrivacyPolicy
from .symbol_enumerator import SymbolEnumerator

logger = logging.getLogger(__name__)


class DocCoverage:
    """Rates how much of a module's API its documentation mentions.

    A routine counts as documented when its name appears in a list item or
    a level 2-4 heading of the module's documentation. Only routines the
    module defines itself and that the privacy policy does not exclude are
    counted.

    Every call to coverage() resolves the module and its documentation
    again and replaces the cached coverage map; covered() and naked() read
    that map. Instances are not safe for concurrent use from multiple
    threads without external synchronization.

    Attributes:
        target: Immutable description of the analyzed package.
        policy: PrivacyPolicy excluding names from accounting.
        loader: ModuleLoader used to import the package.
        finder: DocSourceFinder used when no pod_from path is given.
        tokenizer: Tokenizer splitting documentation into blocks.
        extractor: BlockExtractor turning blocks into documented names.
    """

    def __init__(
        self,
        package: str,
        private: Optional[Iterable[PatternLike]] = None,
        also_private: Optional[Iterable[PatternLike]] = None,
        pod_from: Optional[str] = None,
        debug: bool = False,
        *,
        loader: Optional[ModuleLoader] = None,
        finder: Optional[DocSourceFinder] = None,
        tokenizer: Optional[BaseTokenizer] = None,
        extractor: Optional[BlockExtractor] = None,
    ) -> None:
        """Initialize the analysis with injected collaborators.

        Args:
            package: Dotted name of the module to analyze.
            private: Patterns replacing the default privacy patterns.
            also_private: Patterns appended to the default privacy patterns.
                Ignored when ``private`` is given.
            pod_from: Documentation source to parse instead of searching.
            debug: If True, log progress diagnostics at DEBUG level.
            loader: Optional ModuleLoader (creates default if None).
            finder: Optional DocSourceFinder (creates default if None).
            tokenizer: Optional tokenizer (creates StructuredTextTokenizer
                if None).
            extractor: Optional BlockExtractor (creates default if None).
        """
        self.target = AnalysisTarget(
            package=package,
            pod_from=str(pod_from) if pod_from is not None else None,
            debug=debug,
        )
        self.policy = PrivacyPolicy(private=private, also_private=also_private)
        self.loader = loader or ModuleLoader()
        self.finder = finder or DocSourceFinder()
        self.tokenizer = tokenizer or StructuredTextTokenizer()
        self.extractor = extractor or BlockExtractor()

        self._symbols: Optional[Dict[str, bool]] = None
        self._unrated: Optional[CoverageUnavailable] = None

    @property
    def package(self) -> str:
        return self.target.package

    def _debug(self, message: str, *args) -> None:
        if self.target.debug:
            logger.debug(message, *args)

    def coverage(self) -> Optional[float]:
        """Compute the coverage rating from scratch.

        Returns:
            Fraction of eligible routines that are documented, in the range
            0 to 1, or None when the module cannot be loaded, has no
            usable documentation, or defines no eligible routines. why_unrated()
            tells these cases apart.
        """
        self._symbols = None
        self._unrated = None
        try:
            symbols = self._build_coverage_map()
        except CoverageUnavailable as e:
            self._unrated = e
            self._debug("no rating for %s: %s", self.package, e.message)
            return None

        self._symbols = symbols
        documented = sum(1 for is_documented in symbols.values() if is_documented)
        return documented / len(symbols)

    def _build_coverage_map(self) -> Dict[str, bool]:
        """Resolve, parse, and match; raises CoverageUnavailable."""
        self._debug("getting documentation location for '%s'", self.package)
        pod_from = self._locate_documentation()

        self._debug("parsing '%s'", pod_from)
        try:
            blocks = self.tokenizer.tokenize(pod_from)
        except (SyntaxError, ValueError) as e:
            logger.warning("Cannot parse documentation source %s: %s", pod_from, e)
            raise DocumentationSourceUnreadable(self.package, original_exception=e)
        documented = self.extractor.documented_names(blocks, package=self.package)

        self._debug("loading '%s'", self.package)
        handle = self.loader.load(self.package)

        self._debug("walking symbols")
        symbols = self._get_symbols(handle)
        if not symbols:
            raise EmptySymbolSet(self.package)

        self._debug(
            "matching %d symbols against %d documented names",
            len(symbols),
            len(documented),
        )
        return {symbol: symbol in documented for symbol in symbols}

    def _locate_documentation(self) -> Path:
        if self.target.pod_from is not None:
            path = Path(self.target.pod_from)
            if not path.is_file():
                logger.warning("Documentation source %s does not exist", path)
                raise DocumentationSourceMissing(self.package)
            return path

        path = self.finder.find(self.package)
        if path is None:
            raise DocumentationSourceMissing(self.package)
        return path

    def _get_symbols(self, handle: ModuleHandle) -> set[str]:
        """Return the routine names to check for the loaded module.

        Subclasses may override this to narrow or widen the checked set.
        """
        return SymbolEnumerator(self.policy).enumerate(handle)

    def _cached_map(self) -> Dict[str, bool]:
        if self._symbols is None:
            self.coverage()
        return self._symbols or {}

    def covered(self) -> List[str]:
        """Return the documented routines, computing coverage if needed."""
        return sorted(name for name, documented in self._cached_map().items() if documented)

    def naked(self) -> List[str]:
        """Return the undocumented routines, computing coverage if needed.

        Private names are never listed.
        """
        return sorted(name for name, documented in self._cached_map().items() if not documented)

    uncovered = naked

    def why_unrated(self) -> Optional[str]:
        """Explain why the last coverage() call returned None."""
        if self._unrated is None:
            return None
        return self._unrated.message

    def result(self) -> CoverageResult:
        """Compute coverage and bundle it with the covered and naked lists."""
        rating = self.coverage()
        return CoverageResult(
            package=self.package,
            rating=rating,
            covered=self.covered() if rating is not None else [],
            naked=self.naked() if rating is not None else [],
            reason=self.why_unrated(),
        )


class ExportOnlyCoverage(DocCoverage):
    """Coverage restricted to the names a module exports through ``__all__``.

    Modules without ``__all__`` are checked like DocCoverage does.
    """

    def _get_symbols(self, handle: ModuleHandle) -> set[str]:
        symbols = super()._get_symbols(handle)
        exported = handle.exports()
        if exported is None:
            return symbols
        return symbols & set(exported)
