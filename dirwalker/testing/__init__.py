"""Testing utilities for DirWalker consumers."""

from .fixtures import RecordingAdapter, build_tree

__all__ = ["RecordingAdapter", "build_tree"]
