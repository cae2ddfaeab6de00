"""BlockEvent data model for structured documentation blocks."""

from dataclasses import dataclass

ITEM = "item"
TEXT = "text"


def heading_kind(level: int) -> str:
    """Return the block kind used for a heading at the given nesting level."""
    return f"head{level}"


@dataclass(frozen=True)
class BlockEvent:
    """A single block yielded by a documentation tokenizer.

    Attributes:
        kind: Block kind tag: 'item', 'head1'..'head6', or 'text'.
        text: Raw text of the block (the title of a heading, the first line
            of a list item, the whole paragraph for text blocks).
        line_number: 1-based line where the block starts in its source.
    """

    kind: str
    text: str
    line_number: int = 0
