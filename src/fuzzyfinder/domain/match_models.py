from __future__ import annotations

"""
Match Domain Data Models.

Defines the value objects produced while matching a query against the tree:
highlight runs, per-component match results, the public file match result,
and the directory constraint variant compiled from a query.
"""

import re
from dataclasses import dataclass
from typing import Union

# -----------------------------------------------------------------------------
# HIGHLIGHT MODELS
# -----------------------------------------------------------------------------

@dataclass
class CharacterRun:
    """
    A fragment of a matched string tagged as pattern (inside) or filler.

    Attributes:
        text: The characters of the fragment.
        inside: True when the characters belong to the literal query.
    """
    text: str
    inside: bool

    def __str__(self) -> str:
        if self.inside:
            return f"({self.text})"
        return self.text


@dataclass(frozen=True)
class MatchResult:
    """
    Rendered text and quality score of one matched path component.

    Attributes:
        score: Match quality in [0, 1].
        text: Rendering with inside runs wrapped in parentheses.
        missed: True when a path constraint exists and the component failed it.
    """
    score: float
    text: str
    missed: bool = False


@dataclass(frozen=True)
class MatchFileResult:
    """
    Public result describing one file that satisfied a query.

    Attributes:
        path: Full path to the file.
        abbreviated_path: Highlighted path with unmatched directories collapsed
            to their first character.
        directory: Full path of the containing directory.
        name: Base name of the file.
        highlighted_directory: Directory relative to the shared prefix, with
            matches wrapped in parentheses.
        highlighted_name: File name with matches wrapped in parentheses.
        highlighted_path: Highlighted directory joined with highlighted name.
        score: Combined relevance in [0, 1]; 1 means an exact match.
    """
    path: str
    abbreviated_path: str
    directory: str
    name: str
    highlighted_directory: str
    highlighted_name: str
    highlighted_path: str
    score: float

    def __str__(self) -> str:
        return self.highlighted_path

# -----------------------------------------------------------------------------
# PATH CONSTRAINT VARIANT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Unconstrained:
    """Query carries no directory segments; every directory matches."""


@dataclass(frozen=True)
class PathPattern:
    """
    Compiled directory constraint of a query.

    Attributes:
        regex: Case-insensitive expression built by compile_path_pattern.
        segments: Number of non-empty directory segments expected to match.
        needle: Query characters of all segments, in order; a directory
            lacking them as a subsequence is rejected without the regex.
    """
    regex: re.Pattern
    segments: int
    needle: str = ""


PathConstraint = Union[Unconstrained, PathPattern]
