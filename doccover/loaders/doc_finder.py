"""Locates the documentation source of a module on the import path."""

import ast
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


class DocSourceFinder:
    """Searches a list of directories for a module's documentation.

    Nothing is imported: the dotted module name is mapped onto relative
    paths and the candidates are probed on disk. Within one directory a
    standalone documentation file wins over the module source, and a module
    source only counts when it carries a module docstring.

    Attributes:
        search_path: Directories to search, or None to use ``sys.path`` at
            lookup time.
    """

    # Probed in order for each directory; "{base}" is the module path
    CANDIDATES = (
        "{base}.rst",
        "{base}.md",
        "{base}.py",
        "{base}/__init__.py",
    )

    def __init__(self, search_path: Optional[Iterable[str]] = None) -> None:
        self.search_path = list(search_path) if search_path is not None else None

    def _directories(self) -> List[Path]:
        entries = self.search_path if self.search_path is not None else sys.path
        # An empty entry on sys.path stands for the working directory
        return [Path(entry) if entry else Path.cwd() for entry in entries]

    def find(self, package: str) -> Optional[Path]:
        """Find the documentation source for a module.

        Args:
            package: Dotted module name, e.g. ``pkg.sub.mod``.

        Returns:
            Path of the first matching file, or None if nothing was found.
        """
        base = "/".join(package.split("."))
        for directory in self._directories():
            if not directory.is_dir():
                continue
            for pattern in self.CANDIDATES:
                candidate = directory / pattern.format(base=base)
                if candidate.is_file() and self._contains_docs(candidate):
                    logger.debug("found documentation for %s at %s", package, candidate)
                    return candidate
        return None

    @staticmethod
    def _contains_docs(candidate: Path) -> bool:
        """Check that a module source has a docstring to parse."""
        if candidate.suffix != ".py":
            return True
        try:
            tree = ast.parse(candidate.read_text(encoding="utf-8"), filename=str(candidate))
        except (SyntaxError, UnicodeDecodeError, ValueError) as e:
            logger.debug("skipping %s: %s", candidate, e)
            return False
        return ast.get_docstring(tree) is not None
