"""DirectoryAdapter abstraction for DirWalker.

The adapter is the seam between the traversal engine and whatever provides
directory listings. The engine only ever asks two questions: "what is in
this directory?" and "is this path a directory?". Everything else about the
host filesystem stays behind the adapter.
"""

import os
from abc import ABC, abstractmethod
from typing import List, NamedTuple


class DirEntry(NamedTuple):
    """One direct child of a listed directory."""
    name: str       # Base name, not qualified
    is_dir: bool    # True if the child should be descended into


class DirectoryAdapter(ABC):
    """Abstract provider of directory listings.

    Implementations must be synchronous. Failures are reported by raising
    OSError (or a subclass); the traverser decides how to surface them.
    """

    @abstractmethod
    def list_entries(self, path: str) -> List[DirEntry]:
        """List the direct contents of a directory.

        Args:
            path: Absolute path of the directory

        Returns:
            List of DirEntry for each child (not recursive)

        Raises:
            OSError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Check whether a path exists and is a directory."""
        pass

    def is_readable(self, path: str) -> bool:
        """Check whether a directory can be listed.

        Default implementation asks the OS for read and search permission.
        """
        return os.access(path, os.R_OK | os.X_OK)

    def join(self, directory: str, name: str) -> str:
        """Qualify a child name with its parent directory."""
        return os.path.join(directory, name)
