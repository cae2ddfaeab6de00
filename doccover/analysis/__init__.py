"""Analysis module for computing documentation coverage."""

from .coverage import DocCoverage, ExportOnlyCoverage
from .privacy_policy import DEFAULT_PRIVATE_PATTERNS, PrivacyPolicy
from .symbol_enumerator import SymbolEnumerator

__all__ = [
    'DocCoverage',
    'ExportOnlyCoverage',
    'PrivacyPolicy',
    'SymbolEnumerator',
    'DEFAULT_PRIVATE_PATTERNS',
]
