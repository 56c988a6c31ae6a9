"""Scale tests for TreeIterator.

Marked slow: they build trees with thousands of entries. Run with
``python run_tests.py --all``.
"""

import sys
import time
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dirwalker import TreeIterator, count_files
from dirwalker.testing import RecordingAdapter


def make_wide_tree(base: Path, dirs: int, files_per_dir: int, depth: int) -> int:
    """Create a regular tree and return the number of files in it."""
    total = 0
    level = [base]
    for _ in range(depth):
        next_level = []
        for parent in level:
            for d in range(dirs):
                child = parent / f"d{d}"
                child.mkdir()
                for f in range(files_per_dir):
                    (child / f"f{f}.txt").write_text("")
                    total += 1
                next_level.append(child)
        level = next_level
    return total


@pytest.mark.slow
def test_large_tree_count(tmp_path):
    expected = make_wide_tree(tmp_path, dirs=6, files_per_dir=5, depth=4)

    start = time.perf_counter()
    found = count_files(tmp_path, directory_prune=[])
    elapsed = time.perf_counter() - start

    print(f"\nWalked {found} files in {elapsed:.3f}s")
    assert found == expected


@pytest.mark.slow
@pytest.mark.parametrize("mode", ["dfs", "bfs"])
def test_first_file_needs_few_listings(tmp_path, mode):
    make_wide_tree(tmp_path, dirs=6, files_per_dir=5, depth=4)

    recorder = RecordingAdapter()
    walker = TreeIterator(tmp_path, adapter=recorder, mode=mode)
    next(walker)

    # Root has no files, so exactly one subdirectory had to be listed
    assert len(recorder.listed) == 2


@pytest.mark.slow
def test_depth_first_cursor_stays_small(tmp_path):
    make_wide_tree(tmp_path, dirs=6, files_per_dir=5, depth=4)

    walker = TreeIterator(tmp_path, mode="dfs")
    largest = 0
    for _ in walker:
        cursor = walker.cursor
        if cursor is not None:
            largest = max(largest, len(cursor.dirs))

    # Pending directories grow with depth * fan-out, not with tree size
    assert largest <= 4 * 6
