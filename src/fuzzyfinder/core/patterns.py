from __future__ import annotations

"""
Query Pattern Compiler.

Turns query segments into regular expressions built from positional capture
groups. Literal query characters always land in odd-numbered groups (counting
from zero) and filler between them in even-numbered groups, which is what lets
the scorer tell matched characters from padding.

Example for the segment "foo" on a POSIX system:

    (f)([^/]*?)(o)([^/]*?)(o)
"""

import os
import re
from typing import List, Sequence


def compile_pattern(segment: str, separator: str = os.sep) -> str:
    """
    Compile one query segment into a positional character-capture pattern.

    Each character becomes a literal capture; consecutive captures are joined
    by a lazy capture of non-separator filler, so the characters must appear
    in order within a single path component.

    Args:
        segment: Query segment without separators.
        separator: Path separator character.

    Returns:
        str: Regex source; '()' for the empty segment.
    """
    if not segment:
        return "()"
    filler = "([^" + re.escape(separator) + "]*?)"
    return filler.join("(" + re.escape(char) + ")" for char in segment)


def compile_file_pattern(segment: str, separator: str = os.sep) -> str:
    """
    Compile the file-name segment of a query.

    Args:
        segment: Last segment of the query ('' matches any name).
        separator: Path separator character.

    Returns:
        str: Regex source anchored with leading and trailing wildcards.
    """
    return "^(.*?)" + compile_pattern(segment, separator) + "(.*)$"


def compile_path_pattern(segments: Sequence[str], separator: str = os.sep) -> str:
    """
    Compile the directory segments of a query.

    Consecutive segments are joined by a capture that must contain at least
    one separator, so every segment matches a later path component than the
    previous one.

    Args:
        segments: Directory segments of the query, outermost first.
        separator: Path separator character.

    Returns:
        str: Regex source anchored with leading and trailing wildcards.
    """
    joiner = "(.*?" + re.escape(separator) + ".*?)"
    compiled: List[str] = [compile_pattern(s, separator) for s in segments]
    return "^(.*?)" + joiner.join(compiled) + "(.*?)$"


def to_regex(source: str) -> re.Pattern:
    """Compile pattern source for case-insensitive matching."""
    return re.compile(source, re.IGNORECASE)


def contains_subsequence(text: str, needle: str) -> bool:
    """
    Check that the characters of needle occur in text in order, ignoring case.

    Every compiled pattern requires this, so it rejects non-matching names
    before the backtracking regex runs.
    """
    remaining = iter(text.lower())
    return all(char in remaining for char in needle.lower())
