from __future__ import annotations

"""
Path and File Matchers.

Matches directory paths against the directory constraint of a query (memoized
per search call) and file base names against the file pattern, composing the
public result for every file that satisfies both.
"""

import re
from typing import Dict, Optional

from fuzzyfinder.core.patterns import contains_subsequence
from fuzzyfinder.core.prefix import strip_prefix
from fuzzyfinder.core.scoring import abbreviate_directory, build_match_result
from fuzzyfinder.domain.match_models import (
    MatchFileResult,
    MatchResult,
    PathConstraint,
    PathPattern,
)
from fuzzyfinder.domain.tree_models import Directory, FileEntry, join_path


class PathMatchCache:
    """
    Memoizes directory match results for the duration of one search call.

    Keyed by directory identity; never shared between calls.
    """

    def __init__(self) -> None:
        self._entries: Dict[Directory, MatchResult] = {}

    def get(self, directory: Directory) -> Optional[MatchResult]:
        return self._entries.get(directory)

    def put(self, directory: Directory, result: MatchResult) -> None:
        self._entries[directory] = result

    def __len__(self) -> int:
        return len(self._entries)


def matchable_name(directory: Directory, stripper: re.Pattern, separator: str) -> str:
    """
    Return the directory name relative to the shared prefix.

    A separator is appended before stripping so the root itself, whose name
    equals the prefix, reduces to the empty string.
    """
    stripped = strip_prefix(stripper, directory.name + separator)
    return stripped[:-1] if stripped.endswith(separator) else stripped


def match_path(
        directory: Directory,
        cache: PathMatchCache,
        constraint: PathConstraint,
        stripper: re.Pattern,
        separator: str,
) -> MatchResult:
    """
    Match a directory against the query's directory constraint.

    Args:
        directory: Directory to evaluate.
        cache: Per-search memoization store.
        constraint: Compiled constraint or Unconstrained.
        stripper: Shared-prefix removal expression.
        separator: Path separator character.

    Returns:
        MatchResult: Highlighted directory text; missed is set when the
        constraint exists and the directory fails it.
    """
    cached = cache.get(directory)
    if cached is not None:
        return cached

    name = matchable_name(directory, stripper, separator)

    if isinstance(constraint, PathPattern):
        match = None
        if contains_subsequence(name, constraint.needle):
            match = constraint.regex.match(name)
        if match:
            result = build_match_result(match, constraint.segments, separator)
        else:
            result = MatchResult(score=1.0, text=name, missed=True)
    else:
        result = MatchResult(score=1.0, text=name)

    cache.put(directory, result)
    return result


def match_file(
        entry: FileEntry,
        file_regex: re.Pattern,
        path_match: MatchResult,
        separator: str,
        needle: str = "",
) -> Optional[MatchFileResult]:
    """
    Match a file's base name and compose the full result.

    Args:
        entry: File to evaluate.
        file_regex: Compiled file-name pattern.
        path_match: Result of match_path for the file's directory.
        separator: Path separator character.
        needle: File segment of the query, used to reject names early.

    Returns:
        Optional[MatchFileResult]: The composed result, or None on no match.
    """
    if not contains_subsequence(entry.name, needle):
        return None
    match = file_regex.match(entry.name)
    if not match:
        return None

    name_match = build_match_result(match, 1, separator)
    directory_text = path_match.text

    highlighted_path = _join_rendered(directory_text, name_match.text, separator)
    abbreviated = _join_rendered(
        abbreviate_directory(directory_text, separator), name_match.text, separator
    )

    return MatchFileResult(
        path=entry.path,
        abbreviated_path=abbreviated,
        directory=entry.parent.name,
        name=entry.name,
        highlighted_directory=directory_text,
        highlighted_name=name_match.text,
        highlighted_path=highlighted_path,
        score=path_match.score * name_match.score,
    )


def _join_rendered(directory_text: str, name_text: str, separator: str) -> str:
    if not name_text:
        return directory_text
    return join_path(directory_text, name_text, separator)
