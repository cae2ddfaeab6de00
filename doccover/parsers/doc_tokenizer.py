"""Tokenizer for reStructuredText and Markdown documentation."""

import ast
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..models.block_event import ITEM, TEXT, BlockEvent, heading_kind
from .base_parser import BaseTokenizer

_ATX_HEADING = re.compile(r"^(#{1,6})\s+(.*?)(?:\s+#+)?\s*$")
_BULLET_ITEM = re.compile(r"^\s*[-*+]\s+(.*\S)\s*$")
_ENUMERATED_ITEM = re.compile(r"^\s*\d+[.)]\s+(.*\S)\s*$")
_OBJECT_DIRECTIVE = re.compile(
    r"^\s*\.\.\s+(?:py:)?(?:auto)?"
    r"(?:function|method|classmethod|staticmethod|decorator|class|exception|data|attribute)"
    r"::\s*(.*\S)\s*$"
)
_FENCE = re.compile(r"^\s*(```|~~~)")

# Punctuation reStructuredText accepts for section adornments
ADORNMENT_CHARS = frozenset("=-~^\"'`#*+:._")

MARKDOWN_SUFFIXES = {".md", ".markdown"}


class StructuredTextTokenizer(BaseTokenizer):
    """
    Tokenizer for lightweight markup used in Python documentation.

    Python sources contribute their module docstring, parsed as
    reStructuredText. Files ending in ``.md`` or ``.markdown`` are parsed as
    Markdown, every other file as reStructuredText.

    Headings become ``headN`` blocks, list items and Sphinx object
    directives become ``item`` blocks, and remaining paragraphs become
    ``text`` blocks. Fenced code is skipped. Bytes that are not valid UTF-8
    are replaced rather than rejected.
    """

    def tokenize(self, path: Union[str, Path]) -> list[BlockEvent]:
        """
        Tokenize a documentation source.

        Parameters
        ----------
        path : str or Path
            Python module, reStructuredText or Markdown file

        Returns
        -------
        List[BlockEvent]
            Blocks in source order

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        SyntaxError
            If a Python module contains invalid syntax
        """
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            raise FileNotFoundError(f"File not found: {path}")

        if path.suffix == ".py":
            docstring, first_line = self._module_docstring(source, str(path))
            if docstring is None:
                return []
            return self.tokenize_text(docstring, first_line=first_line)

        return self.tokenize_text(source, markdown=path.suffix in MARKDOWN_SUFFIXES)

    def _module_docstring(
        self, source: str, filename: str
    ) -> Tuple[Optional[str], int]:
        """Return the module docstring and the line it starts on."""
        try:
            tree = ast.parse(source, filename=filename)
        except SyntaxError as e:
            raise SyntaxError(f"Syntax error in {filename}: {e}")

        docstring = ast.get_docstring(tree, clean=True)
        if docstring is None:
            return None, 0
        return docstring, tree.body[0].lineno

    def tokenize_text(
        self, text: str, markdown: bool = False, first_line: int = 1
    ) -> list[BlockEvent]:
        """
        Tokenize markup held in memory.

        Parameters
        ----------
        text : str
            Document text
        markdown : bool
            Parse setext headings the Markdown way instead of assigning
            levels by order of appearance
        first_line : int
            Line number of the first line of text in its source

        Returns
        -------
        List[BlockEvent]
            Blocks in source order
        """
        lines = text.splitlines()
        blocks: List[BlockEvent] = []
        paragraph: List[Tuple[int, str]] = []
        # reST levels follow the order in which adornment styles first appear
        styles: List[Tuple[str, bool]] = []
        fence: Optional[str] = None

        def flush() -> None:
            if paragraph:
                joined = " ".join(line.strip() for _, line in paragraph)
                blocks.append(BlockEvent(TEXT, joined, paragraph[0][0]))
                paragraph.clear()

        i = 0
        while i < len(lines):
            line = lines[i]
            lineno = first_line + i
            stripped = line.strip()

            if fence:
                if stripped.startswith(fence):
                    fence = None
                i += 1
                continue

            fence_match = _FENCE.match(line)
            # In reST a "~~~" line under a pending paragraph is an underline
            if fence_match and (
                markdown or not paragraph or fence_match.group(1) == "```"
            ):
                flush()
                fence = fence_match.group(1)
                i += 1
                continue

            if not stripped:
                flush()
                i += 1
                continue

            atx = _ATX_HEADING.match(line)
            if atx:
                flush()
                level = len(atx.group(1))
                blocks.append(BlockEvent(heading_kind(level), atx.group(2), lineno))
                i += 1
                continue

            if self._is_adornment(stripped):
                if not markdown and not paragraph and self._is_overlined(lines, i):
                    level = self._style_level(styles, (stripped[0], True))
                    title = lines[i + 1].strip()
                    blocks.append(BlockEvent(heading_kind(level), title, lineno + 1))
                    i += 3
                    continue

                # A Markdown setext title may span several lines
                if markdown and paragraph and stripped[0] in "=-":
                    title_line = paragraph[0][0]
                    title = " ".join(part.strip() for _, part in paragraph)
                    level = 1 if stripped[0] == "=" else 2
                    paragraph.clear()
                    blocks.append(BlockEvent(heading_kind(level), title, title_line))
                    i += 1
                    continue

                if not markdown and len(paragraph) == 1:
                    title_line, title = paragraph[0]
                    level = self._underline_level(styles, stripped, title.strip())
                    if level is not None:
                        paragraph.clear()
                        blocks.append(
                            BlockEvent(heading_kind(level), title.strip(), title_line)
                        )
                        i += 1
                        continue

                # Transition or thematic break
                flush()
                i += 1
                continue

            item = (
                _BULLET_ITEM.match(line)
                or _ENUMERATED_ITEM.match(line)
                or _OBJECT_DIRECTIVE.match(line)
            )
            if item:
                flush()
                blocks.append(BlockEvent(ITEM, item.group(1), lineno))
                i += 1
                continue

            paragraph.append((lineno, line))
            i += 1

        flush()
        return blocks

    @staticmethod
    def _is_adornment(stripped: str) -> bool:
        return (
            len(stripped) >= 2
            and stripped[0] in ADORNMENT_CHARS
            and stripped == stripped[0] * len(stripped)
        )

    @staticmethod
    def _is_overlined(lines: List[str], i: int) -> bool:
        """Check for an over-and-underlined title starting at line i."""
        if i + 2 >= len(lines):
            return False
        return bool(lines[i + 1].strip()) and lines[i + 2].strip() == lines[i].strip()

    def _underline_level(
        self,
        styles: List[Tuple[str, bool]],
        adornment: str,
        title: str,
    ) -> Optional[int]:
        if len(adornment) < len(title):
            return None
        return self._style_level(styles, (adornment[0], False))

    @staticmethod
    def _style_level(styles: List[Tuple[str, bool]], style: Tuple[str, bool]) -> int:
        if style not in styles:
            styles.append(style)
        return styles.index(style) + 1
