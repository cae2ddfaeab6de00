"""Abstract base class for documentation tokenizers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..models.block_event import BlockEvent


class BaseTokenizer(ABC):
    """
    Abstract base class defining the interface for documentation tokenizers.

    All tokenizer implementations must inherit from this class and implement
    the tokenize method to turn a documentation source into block events.
    """

    @abstractmethod
    def tokenize(self, path: Union[str, Path]) -> list[BlockEvent]:
        """
        Split a documentation source into blocks.

        Parameters
        ----------
        path : str or Path
            Path to the documentation source (a module or a text document)

        Returns
        -------
        List[BlockEvent]
            Blocks in source order: headings, list items, and text paragraphs

        Raises
        ------
        FileNotFoundError
            If the specified file does not exist
        SyntaxError
            If a Python source cannot be parsed to reach its docstring
        """
        pass
