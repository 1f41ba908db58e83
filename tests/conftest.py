from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures describing small file trees used across unit tests.
"""

import os
import sys
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fuzzyfinder.core.finder import FuzzyFileFinder  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_paths() -> List[str]:
    """
    Return a small POSIX project listing.

    Structure:
    /proj
      README.md
      /src
        /cli
          app.py
        /core
          finder.py
          matcher.py
      /tests
        test_finder.py
    """
    return [
        "/proj/tests/test_finder.py",
        "/proj/src/core/matcher.py",
        "/proj/README.md",
        "/proj/src/core/finder.py",
        "/proj/src/cli/app.py",
    ]


@pytest.fixture
def path_finder(sample_paths: List[str]) -> FuzzyFileFinder:
    """Finder over sample_paths using '/' regardless of the host platform."""
    return FuzzyFileFinder(full_file_names=sample_paths, separator="/")
