"""Filesystem adapter for DirWalker.

Provides directory listings from the local filesystem through os.scandir.
"""

import logging
import os
from typing import List

from ..core.adapter import DirEntry, DirectoryAdapter

logger = logging.getLogger(__name__)


class FileSystemAdapter(DirectoryAdapter):
    """Adapter for walking the local filesystem.

    Listings are read eagerly and the scandir handle is released before
    returning, so no OS resources are held between pulls.
    """

    def __init__(self,
                 follow_symlinks: bool = True,
                 include_hidden: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Treat symlinks to directories as directories.
                When False such links are reported as plain entries and
                never descended into.
            include_hidden: Whether to list dot-prefixed names
        """
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden

    def list_entries(self, path: str) -> List[DirEntry]:
        """List direct children of ``path``.

        An entry whose type cannot be determined (a symlink loop, or a
        link target that cannot be stat'ed) is reported as a non-directory
        rather than failing the listing; it is emitted as a file and never
        descended into.

        Raises:
            OSError: If the directory vanished or cannot be read
        """
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                if not self.include_hidden and entry.name.startswith('.'):
                    continue
                try:
                    is_dir = entry.is_dir(follow_symlinks=self.follow_symlinks)
                except OSError:
                    # Link loop or unreadable link target
                    logger.debug("Cannot stat %s, treating as a file",
                                 os.path.join(path, entry.name))
                    is_dir = False
                entries.append(DirEntry(entry.name, is_dir))
        return entries

    def is_directory(self, path: str) -> bool:
        """Check if path is an existing directory."""
        return os.path.isdir(path)

    def __repr__(self) -> str:
        return (f"FileSystemAdapter(follow_symlinks={self.follow_symlinks}, "
                f"include_hidden={self.include_hidden})")
