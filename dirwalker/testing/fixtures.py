"""Test fixtures for DirWalker consumers.

These helpers build throwaway directory trees and observe how a walk
touches the filesystem, without reaching into iterator internals.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from ..adapters.filesystem import FileSystemAdapter
from ..core.adapter import DirEntry, DirectoryAdapter

Layout = Dict[str, Union[str, 'Layout']]


def build_tree(base: Union[str, Path], layout: Layout) -> Path:
    """Create files and directories under ``base`` from a nested dict.

    A ``dict`` value creates a directory, a ``str`` value creates a file
    with that content.

    Example:
        build_tree(tmp, {"a.txt": "", "sub": {"c.txt": "hello"}})

    Returns:
        ``base`` as a Path
    """
    base = Path(base)
    base.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        target = base / name
        if isinstance(value, dict):
            build_tree(target, value)
        else:
            target.write_text(value)
    return base


class RecordingAdapter(DirectoryAdapter):
    """Adapter wrapper that records every directory listing.

    Example:
        recorder = RecordingAdapter()
        walker = TreeIterator(root, adapter=recorder)
        next(walker)
        assert recorder.listed == [walker.root]
    """

    def __init__(self, base_adapter: Optional[DirectoryAdapter] = None):
        self.base_adapter = base_adapter or FileSystemAdapter()
        self.listed: List[str] = []

    def list_entries(self, path: str) -> List[DirEntry]:
        self.listed.append(path)
        return self.base_adapter.list_entries(path)

    def is_directory(self, path: str) -> bool:
        return self.base_adapter.is_directory(path)

    def is_readable(self, path: str) -> bool:
        return self.base_adapter.is_readable(path)

    def join(self, directory: str, name: str) -> str:
        return self.base_adapter.join(directory, name)

    def was_expanded(self, path: Union[str, Path]) -> bool:
        """Check whether a directory has been listed."""
        return str(path) in self.listed

    def reset(self) -> None:
        self.listed.clear()
