"""Directory adapters for specific providers.

Adapters implement the DirectoryAdapter interface so the traversal engine
can walk any source of directory listings.
"""

from .filesystem import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
