"""Enumeration of the routines a module defines itself."""

import logging

from ..loaders.module_loader import ModuleHandle
from .privacy_policy import PrivacyPolicy

logger = logging.getLogger(__name__)


class SymbolEnumerator:
    """Lists the routines eligible for coverage accounting.

    A routine is eligible when the target module is its defining owner and
    its bare name is not excluded by the privacy policy. Routines imported
    or re-exported from elsewhere are never eligible, whatever their
    documentation says.

    Attributes:
        policy: PrivacyPolicy applied to bare names.
    """

    def __init__(self, policy: PrivacyPolicy) -> None:
        self.policy = policy

    def enumerate(self, handle: ModuleHandle) -> set[str]:
        """Return the bare names of eligible routines in a module.

        Args:
            handle: Loaded module to inspect.

        Returns:
            Set of bare routine names, possibly empty.
        """
        package = handle.name
        prefix = f"{package}."
        symbols: set[str] = set()
        for qualified_name, owner in handle.routines():
            # Imported from elsewhere
            if owner != package:
                continue

            name = qualified_name[len(prefix):] if qualified_name.startswith(prefix) else qualified_name
            if self.policy.is_private(name):
                continue

            symbols.add(name)

        logger.debug("%s defines %d eligible routines", package, len(symbols))
        return symbols
