"""Collaborators that locate and load modules and their documentation."""

from .doc_finder import DocSourceFinder
from .module_loader import ModuleHandle, ModuleLoader

__all__ = ['DocSourceFinder', 'ModuleHandle', 'ModuleLoader']
