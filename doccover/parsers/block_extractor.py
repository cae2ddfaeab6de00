"""Extraction of documented identifiers from documentation blocks."""

import re
from typing import Iterable, List, Optional

from ..models.block_event import ITEM, BlockEvent, heading_kind

# Blocks that may name a routine: list items and level 2-4 headings
DOCUMENTING_KINDS = frozenset([ITEM] + [heading_kind(level) for level in (2, 3, 4)])

# One entry can document several routines, e.g. "foo, bar | baz"
_CANDIDATE = re.compile(r"[^\s|,/]+")

# Applied in order to a working copy; every rule is tried even when an
# earlier one already rewrote the text.
NORMALIZATION_RULES = (
    # dressed up like a method call: obj->name
    re.compile(r"->(.*)"),
    # wrapped in a markup pair: B<name>
    re.compile(r"<(.*)>"),
    # inline literal, emphasis or role: `name`, **name**, :func:`name`
    re.compile(r"[`*]+([^`*]+)[`*]+"),
    # example arguments: name(args)
    re.compile(r"(\S+)\s*\("),
)


def normalize_identifier(candidate: str) -> str:
    """Reduce a raw documentation mention to a bare identifier.

    Args:
        candidate: A single token taken from a documentation block.

    Returns:
        The rewritten name, or the candidate unchanged if no rule applies.
    """
    name = candidate
    for rule in NORMALIZATION_RULES:
        match = rule.search(name)
        if match:
            name = match.group(1)
    return name


class BlockExtractor:
    """Pulls candidate identifiers out of a stream of documentation blocks."""

    def extract(self, blocks: Iterable[BlockEvent]) -> List[str]:
        """Collect raw candidate tokens from every documenting block.

        Args:
            blocks: Block events from a documentation tokenizer.

        Returns:
            Tokens from all item and level 2-4 heading blocks, in order.
        """
        candidates: List[str] = []
        for block in blocks:
            if block.kind in DOCUMENTING_KINDS:
                candidates.extend(_CANDIDATE.findall(block.text))
        return candidates

    def documented_names(
        self, blocks: Iterable[BlockEvent], package: Optional[str] = None
    ) -> set[str]:
        """Return the set of normalized names mentioned by the blocks.

        Args:
            blocks: Block events from a documentation tokenizer.
            package: Dotted module name. Mentions qualified with it, as in
                ``.. autofunction:: package.name``, are reduced to the bare
                name.
        """
        names = {normalize_identifier(candidate) for candidate in self.extract(blocks)}
        if package:
            prefix = f"{package}."
            names = {
                name[len(prefix):] if name.startswith(prefix) else name for name in names
            }
        return names
