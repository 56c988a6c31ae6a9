"""Lazy directory tree iterator for DirWalker.

TreeIterator linearizes a directory tree into a stream of absolute file
paths. Nothing is listed until the first pull, and each later pull lists
only the directories needed to reach the next file.

The cursor is a pair of stacks (pending files, pending directories), both
consumed from the tail. Depth-first and breadth-first differ only in where
an expansion inserts its children: appended to the tail (consumed before
older siblings) or prepended to the head (consumed after them). Sorting is
done in reverse of the wanted emission order to account for tail-pops.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Union

from ..config import OrderDirection, TraversalMode, WalkConfig
from ..errors import FilesystemAccessError, InvalidRoot
from .adapter import DirectoryAdapter

logger = logging.getLogger(__name__)


class IteratorState(Enum):
    """Lifecycle of a TreeIterator."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    EXHAUSTED = "exhausted"      # Terminal, also entered after an error


@dataclass
class WalkCursor:
    """Mutable traversal state: absolute paths not yet emitted/expanded.

    Both lists are stacks; the next item is always the last one.
    """
    files: List[str] = field(default_factory=list)
    dirs: List[str] = field(default_factory=list)

    def copy(self) -> 'WalkCursor':
        return WalkCursor(list(self.files), list(self.dirs))

    def __bool__(self) -> bool:
        return bool(self.files or self.dirs)


class TreeIterator:
    """Pull-based iterator over the files beneath a root directory.

    Example:
        >>> for path in TreeIterator("/home/user/project", ordered=True):
        ...     print(path)

    The iterator is single-use. Once exhausted (or after an error) every
    further pull signals end-of-sequence; build a new iterator, or call
    ``restarted()``, to walk again.
    """

    def __init__(self,
                 root: Union[str, os.PathLike],
                 config: Optional[WalkConfig] = None,
                 adapter: Optional[DirectoryAdapter] = None,
                 **options):
        """Create an iterator. Does not touch the filesystem.

        Args:
            root: Directory to walk; made absolute immediately
            config: Base configuration (defaults when None)
            adapter: Directory provider (FileSystemAdapter when None)
            **options: WalkConfig field overrides, e.g. ``mode="bfs"``,
                ``directory_prune=[r"^build$"]``, ``ordered=True``

        Raises:
            InvalidConfiguration: If any option is unknown or invalid
        """
        if adapter is None:
            # Imported here to keep core free of concrete adapters at import time
            from ..adapters.filesystem import FileSystemAdapter
            adapter = FileSystemAdapter()

        self.root = os.path.abspath(os.fspath(root))
        self.config = WalkConfig.build(config, **options)
        self.adapter = adapter

        self._state = IteratorState.NOT_STARTED
        self._cursor: Optional[WalkCursor] = None

    # Read-only views

    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def cursor(self) -> Optional[WalkCursor]:
        """Snapshot of the pending lists, or None when not in progress."""
        if self._cursor is None:
            return None
        return self._cursor.copy()

    # Iteration protocol

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        path = self.try_next()
        if path is None:
            raise StopIteration
        return path

    def try_next(self) -> Optional[str]:
        """Produce the next file path, or None when the walk is done.

        Raises:
            InvalidRoot: On the first pull, if the root is unusable
            FilesystemAccessError: If a pending directory cannot be listed
        """
        if self._state is IteratorState.EXHAUSTED:
            return None

        try:
            if self._state is IteratorState.NOT_STARTED:
                self._start()
                if self._state is IteratorState.EXHAUSTED:
                    return None
            path = self._advance()
        except Exception:
            self._finish()
            raise

        if path is None:
            self._finish()
        return path

    def restarted(self) -> 'TreeIterator':
        """Fresh iterator over the same root, config and adapter."""
        return TreeIterator(self.root, self.config, self.adapter)

    # State machine

    def _start(self) -> None:
        """NOT_STARTED -> IN_PROGRESS (or straight to EXHAUSTED)."""
        if not self.adapter.is_directory(self.root):
            raise InvalidRoot(self.root, "does not exist or is not a directory")
        if not self.adapter.is_readable(self.root):
            raise InvalidRoot(self.root, "permission denied")

        logger.debug("Starting walk of %s (%s)", self.root, self.config.mode.name)
        self._state = IteratorState.IN_PROGRESS

        try:
            cursor = self._expand(self.root, WalkCursor())
        except FilesystemAccessError as e:
            raise InvalidRoot(self.root, e.reason) from e.__cause__

        if cursor is None:
            logger.debug("Root %s contributed nothing", self.root)
            self._finish()
            return
        self._cursor = cursor

    def _finish(self) -> None:
        if self._state is not IteratorState.EXHAUSTED:
            logger.debug("Walk of %s exhausted", self.root)
        self._state = IteratorState.EXHAUSTED
        self._cursor = None

    def _advance(self) -> Optional[str]:
        """Pop the next file, expanding pending directories as needed.

        Returns:
            Next file path, or None when both stacks are empty
        """
        cursor = self._cursor
        while True:
            if cursor.files:
                return cursor.files.pop()
            if not cursor.dirs:
                return None

            directory = cursor.dirs.pop()
            expanded = self._expand(directory, cursor)
            if expanded is not None:
                cursor = self._cursor = expanded

    def _expand(self, directory: str, cursor: WalkCursor) -> Optional[WalkCursor]:
        """Merge one directory's children into the cursor.

        The directory must already have been popped from ``cursor.dirs``.

        Returns:
            Updated cursor, or None if the directory contributed nothing

        Raises:
            FilesystemAccessError: If the directory cannot be listed
        """
        try:
            entries = self.adapter.list_entries(directory)
        except OSError as e:
            raise FilesystemAccessError(directory, e.strerror or str(e)) from e

        config = self.config
        subdirs = [e.name for e in entries if e.is_dir]
        files = [e.name for e in entries if not e.is_dir]

        if config.directory_prune:
            subdirs = [d for d in subdirs if not config.directory_prune.matches(d)]
        if config.file_prune:
            files = [f for f in files if not config.file_prune.matches(f)]

        logger.debug("Expanded %s: %d files, %d dirs kept of %d entries",
                     directory, len(files), len(subdirs), len(entries))

        if not subdirs and not files:
            return None

        if config.ordered:
            # Tail-pop emits the last element first, so sort backwards
            reverse = config.order_direction is OrderDirection.ASCENDING
            files.sort(key=config.order_key, reverse=reverse)
            subdirs.sort(key=config.order_key, reverse=reverse)

        files = [self.adapter.join(directory, f) for f in files]
        subdirs = [self.adapter.join(directory, d) for d in subdirs]

        return self._merge(cursor, files, subdirs)

    def _merge(self,
               cursor: WalkCursor,
               files: List[str],
               subdirs: List[str]) -> WalkCursor:
        if not cursor:
            return WalkCursor(files, subdirs)

        if self.config.mode is TraversalMode.DEPTH_FIRST:
            cursor.files.extend(files)
            cursor.dirs.extend(subdirs)
            return cursor

        # Breadth-first: newcomers wait behind everything already pending
        return WalkCursor(files + cursor.files, subdirs + cursor.dirs)

    # Presentation

    def __repr__(self) -> str:
        return (f"TreeIterator(root={self.root!r}, "
                f"mode={self.config.mode.name}, state={self._state.name})")

    def describe(self) -> str:
        """Multi-line summary of root and configuration."""
        return "\n".join([
            "TreeIterator:",
            f"\troot            = {self.root}",
            self.config.describe(),
            f"\tadapter         = {self.adapter!r}",
            f"\tstate           = {self._state.name}",
        ])

