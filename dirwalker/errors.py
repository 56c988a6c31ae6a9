"""Exception hierarchy for DirWalker.

Every error raised by the walker derives from DirWalkerError so callers
can catch the whole family with a single except clause.
"""

from typing import Optional


class DirWalkerError(Exception):
    """Base class for all DirWalker errors."""
    pass


class InvalidConfiguration(DirWalkerError, ValueError):
    """Raised when walk options are malformed.

    Detected at construction time, before any filesystem access.
    """
    pass


class InvalidRoot(DirWalkerError):
    """Raised on the first pull when the root is not a readable directory."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Root {path!r} is not a valid/readable directory"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FilesystemAccessError(DirWalkerError):
    """Raised when a discovered directory cannot be listed.

    The original OSError is chained as ``__cause__``.
    """

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot list directory {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
