from __future__ import annotations

"""
fuzzyfinder: abbreviated-path file search with highlighted, scored results.
"""

from fuzzyfinder.core.finder import FuzzyFileFinder
from fuzzyfinder.core.patterns import (
    compile_file_pattern,
    compile_path_pattern,
    compile_pattern,
)
from fuzzyfinder.core.prefix import determine_shared_prefix
from fuzzyfinder.domain.errors import FuzzyFinderError, TooManyEntries
from fuzzyfinder.domain.match_models import MatchFileResult
from fuzzyfinder.domain.tree_models import Directory, FileEntry

__version__ = "0.1.0"

__all__ = [
    "FuzzyFileFinder",
    "MatchFileResult",
    "Directory",
    "FileEntry",
    "FuzzyFinderError",
    "TooManyEntries",
    "compile_pattern",
    "compile_file_pattern",
    "compile_path_pattern",
    "determine_shared_prefix",
]
