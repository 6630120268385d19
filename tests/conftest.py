from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared transcript fixtures used across unit and integration tests.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from shelltree.core.builder import build_tree  # noqa: E402
from shelltree.domain.tree_models import Directory  # noqa: E402

# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_TRANSCRIPT = """\
$ cd /
$ ls
dir a
14848514 b.txt
8504156 c.dat
dir d
$ cd a
$ ls
dir e
29116 f
2557 g
62596 h.lst
$ cd e
$ ls
584 i
$ cd ..
$ cd ..
$ cd d
$ ls
4060174 j
8033020 d.log
5626152 d.ext
7214296 k
"""


@pytest.fixture
def sample_lines() -> List[str]:
    """
    Return the canonical sample transcript as a list of lines.

    Resulting tree sizes: e=584, a=94853, d=24933642, /=48381165.
    """
    return SAMPLE_TRANSCRIPT.splitlines()


@pytest.fixture
def sample_tree(sample_lines: List[str]) -> Directory:
    return build_tree(sample_lines)


@pytest.fixture
def sample_transcript_file(tmp_path: Path) -> Path:
    path = tmp_path / "transcript.txt"
    path.write_text(SAMPLE_TRANSCRIPT, encoding="utf-8")
    return path
