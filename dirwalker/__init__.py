"""DirWalker - Lazy directory tree iteration.

DirWalker linearizes a directory tree into a stream of absolute file paths
without materializing the tree first. Directories are listed only when the
walk reaches them.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dirwalker import TreeIterator

    for path in TreeIterator("/home/user/project", mode="bfs", ordered=True):
        print(path)
━━━━━━━━━━━━━━━━━━━━━━━━━━

Pruning takes regular expressions matched against base names:
``directory_prune=[r"^node_modules$"]`` skips those directories entirely,
``file_prune=[r"\\.pyc$"]`` drops matching files from the output.
"""

import logging

__version__ = "0.1.0"

from .errors import (
    DirWalkerError,
    InvalidConfiguration,
    InvalidRoot,
    FilesystemAccessError,
)
from .config import (
    WalkConfig,
    TraversalMode,
    OrderDirection,
    PruneRule,
    DEFAULT_DIRECTORY_PRUNE,
    DEFAULT_FILE_PRUNE,
)
from .core.adapter import DirEntry, DirectoryAdapter
from .core.traverser import TreeIterator, WalkCursor, IteratorState
from .adapters.filesystem import FileSystemAdapter
from .api import walk_files, list_files, count_files, relative_files

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Errors
    "DirWalkerError",
    "InvalidConfiguration",
    "InvalidRoot",
    "FilesystemAccessError",
    # Config
    "WalkConfig",
    "TraversalMode",
    "OrderDirection",
    "PruneRule",
    "DEFAULT_DIRECTORY_PRUNE",
    "DEFAULT_FILE_PRUNE",
    # Core
    "DirEntry",
    "DirectoryAdapter",
    "TreeIterator",
    "WalkCursor",
    "IteratorState",
    "FileSystemAdapter",
    # API
    "walk_files",
    "list_files",
    "count_files",
    "relative_files",
]
