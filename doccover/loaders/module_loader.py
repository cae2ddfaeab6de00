"""Module loading and routine tables for coverage analysis."""

import importlib
import inspect
import logging
from types import ModuleType
from typing import List, Optional, Tuple

from ..exceptions import ModuleUnavailable

logger = logging.getLogger(__name__)


class ModuleHandle:
    """Wraps an imported module and exposes its routine table.

    Attributes:
        module: The imported module object.
    """

    def __init__(self, module: ModuleType) -> None:
        self.module = module

    @property
    def name(self) -> str:
        return self.module.__name__

    def routines(self) -> List[Tuple[str, Optional[str]]]:
        """List the routines reachable from the module namespace.

        Returns:
            Sorted list of (qualified_name, defining_owner) pairs. The
            qualified name is ``<module>.<attribute>``; the defining owner is
            the ``__module__`` of the routine object, which names the module
            whose source defines it even when the attribute was imported.
        """
        table = []
        for attr, obj in sorted(vars(self.module).items()):
            if not inspect.isroutine(obj):
                continue
            owner = getattr(obj, "__module__", None)
            table.append((f"{self.name}.{attr}", owner))
        return table

    def exports(self) -> Optional[List[str]]:
        """Return the module's ``__all__``, or None if it declares none."""
        exported = getattr(self.module, "__all__", None)
        if exported is None:
            return None
        return [str(name) for name in exported]


class ModuleLoader:
    """Imports modules by dotted name."""

    def load(self, name: str) -> ModuleHandle:
        """Import a module and wrap it in a ModuleHandle.

        Args:
            name: Dotted module name.

        Returns:
            ModuleHandle for the imported module.

        Raises:
            ModuleUnavailable: If the module cannot be found or raises while
                being imported.
        """
        try:
            module = importlib.import_module(name)
        except Exception as e:
            # Importing runs arbitrary module code, so any failure counts as
            # the module being unavailable
            logger.debug("import of %s failed: %s", name, e)
            raise ModuleUnavailable(name, original_exception=e) from e
        return ModuleHandle(module)
