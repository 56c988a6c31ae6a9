#!/usr/bin/env python3
"""
Walk a directory and print its files.

This example demonstrates:
- Depth-first vs breadth-first order
- Pruning directories and files with regular expressions
- Ordered sibling output
- Pulling files one at a time

Usage:
    python examples/walk_directory.py [ROOT] [--bfs] [--desc]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dirwalker import TreeIterator, WalkConfig, DirWalkerError

DEFAULT_PRUNE_DIRS = [r"^\.git$", r"^__pycache__$"]


def main() -> int:
    parser = argparse.ArgumentParser(description="List files beneath a directory")
    parser.add_argument("root", nargs="?", default=".", help="Directory to walk")
    parser.add_argument("--bfs", action="store_true", help="Breadth-first order")
    parser.add_argument("--desc", action="store_true", help="Descending sibling order")
    parser.add_argument("--prune-dir", action="append", default=None,
                        help="Regex of directory names to skip (repeatable, "
                             "replaces the default .git/__pycache__ rule)")
    parser.add_argument("--prune-file", action="append", default=[],
                        help="Regex of file names to skip (repeatable)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    prune_dirs = args.prune_dir if args.prune_dir is not None else DEFAULT_PRUNE_DIRS

    config = WalkConfig.sorted(
        direction="desc" if args.desc else "asc",
        mode="bfs" if args.bfs else "dfs",
        directory_prune=prune_dirs,
        file_prune=args.prune_file,
    )
    walker = TreeIterator(args.root, config)
    print(walker.describe())
    print("-" * 60)

    count = 0
    try:
        for path in walker:
            print(path)
            count += 1
    except DirWalkerError as e:
        print(f"[FAIL] {e}", file=sys.stderr)
        return 1

    print("-" * 60)
    print(f"{count} files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
