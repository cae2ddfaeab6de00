"""Patterns deciding which routine names need no documentation."""

import re
from typing import Iterable, Optional, Pattern, Tuple, Union

PatternLike = Union[str, Pattern[str]]

DEFAULT_PRIVATE_PATTERNS = (
    r"^_",
    r"^import$",
    r"^DESTROY$",
    r"^AUTOLOAD$",
    r"^bootstrap$",
)


class PrivacyPolicy:
    """Immutable, ordered set of exclusion patterns.

    ``private`` replaces the whole set (even when empty) and makes
    ``also_private`` irrelevant; otherwise ``also_private`` is appended to
    the defaults. Patterns match anywhere in a name unless anchored.
    """

    def __init__(
        self,
        private: Optional[Iterable[PatternLike]] = None,
        also_private: Optional[Iterable[PatternLike]] = None,
    ) -> None:
        if private is not None:
            sources = list(private)
        else:
            sources = list(DEFAULT_PRIVATE_PATTERNS) + list(also_private or [])
        self._patterns: Tuple[Pattern[str], ...] = tuple(
            re.compile(pattern) for pattern in sources
        )

    @property
    def patterns(self) -> Tuple[Pattern[str], ...]:
        return self._patterns

    def is_private(self, name: str) -> bool:
        """Return True if any pattern matches the name."""
        return any(pattern.search(name) for pattern in self._patterns)

    def __repr__(self) -> str:
        return f"PrivacyPolicy({[p.pattern for p in self._patterns]!r})"
