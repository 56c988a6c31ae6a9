"""High-level API for DirWalker.

Simple functional wrappers around TreeIterator for the common cases.
"""

import os
from typing import Iterator, List, Optional, Union

from .core.adapter import DirectoryAdapter
from .core.traverser import TreeIterator


def walk_files(root: Union[str, os.PathLike],
               adapter: Optional[DirectoryAdapter] = None,
               **options) -> TreeIterator:
    """Lazily walk the files beneath ``root``.

    Args:
        root: Directory to walk
        adapter: Directory provider (local filesystem when None)
        **options: Walk options (mode, directory_prune, file_prune,
            ordered, order_direction, order_key)

    Returns:
        TreeIterator yielding absolute file paths

    Example:
        >>> for path in walk_files("/srv/data", mode="bfs", file_prune=[r"\\.tmp$"]):
        ...     print(path)
    """
    return TreeIterator(root, adapter=adapter, **options)


def list_files(root: Union[str, os.PathLike], **options) -> List[str]:
    """Walk ``root`` and return every file path as a list."""
    return list(walk_files(root, **options))


def count_files(root: Union[str, os.PathLike], **options) -> int:
    """Count files beneath ``root`` without materializing them."""
    count = 0
    for _ in walk_files(root, **options):
        count += 1
    return count


def relative_files(root: Union[str, os.PathLike], **options) -> Iterator[str]:
    """Like walk_files, but yield paths relative to ``root``."""
    walker = walk_files(root, **options)
    for path in walker:
        yield os.path.relpath(path, walker.root)
