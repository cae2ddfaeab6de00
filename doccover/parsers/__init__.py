"""Parser modules for turning documentation into documented names."""

from .base_parser import BaseTokenizer
from .block_extractor import BlockExtractor, normalize_identifier
from .doc_tokenizer import StructuredTextTokenizer

__all__ = [
    'BaseTokenizer',
    'BlockExtractor',
    'StructuredTextTokenizer',
    'normalize_identifier',
]
