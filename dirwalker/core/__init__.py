"""Core abstractions for DirWalker.

This package contains the provider seam (DirectoryAdapter) and the
traversal engine (TreeIterator).
"""

from .adapter import DirEntry, DirectoryAdapter
from .traverser import IteratorState, TreeIterator, WalkCursor

__all__ = [
    "DirEntry",
    "DirectoryAdapter",
    "IteratorState",
    "TreeIterator",
    "WalkCursor",
]
