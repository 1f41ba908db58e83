from __future__ import annotations

"""
Score and Highlight Builder.

Converts a successful match against a compiled pattern into highlight runs,
a rendered string and a relevance score.

Scoring rules:
1. Fewer inside runs is better: query characters matched contiguously
   collapse into one run and beat scattered single-character hits.
2. Better coverage is better: the more of the candidate consists of literal
   query characters rather than filler, the higher the score.
"""

import re
from typing import List

from fuzzyfinder.domain.match_models import CharacterRun, MatchResult


def collect_runs(match: re.Match) -> List[CharacterRun]:
    """
    Split a match into merged inside/outside runs.

    Odd-numbered groups (from zero) hold literal query characters, even ones
    hold filler. Empty groups are skipped.

    Args:
        match: Match object of an expression from the pattern compiler.

    Returns:
        List[CharacterRun]: Runs in string order, neighbours never share a tag.
    """
    runs: List[CharacterRun] = []
    for index, capture in enumerate(match.groups()):
        if not capture:
            continue
        inside = index % 2 != 0
        if runs and runs[-1].inside == inside:
            runs[-1].text += capture
        else:
            runs.append(CharacterRun(text=capture, inside=inside))
    return runs


def build_match_result(match: re.Match, inside_segments: int, separator: str) -> MatchResult:
    """
    Compute the score and highlighted rendering of a match.

    Args:
        match: Match object of an expression from the pattern compiler.
        inside_segments: Number of query segments the expression encodes
            (1 for a file name, one per non-empty directory segment).
        separator: Path separator character, excluded from character counts.

    Returns:
        MatchResult: Score in [0, 1] and text with inside runs parenthesized.
    """
    inside_chars = 0
    total_chars = 0
    for index, capture in enumerate(match.groups()):
        if not capture:
            continue
        total_chars += len(capture.replace(separator, ""))
        if index % 2 != 0:
            inside_chars += len(capture)

    runs = collect_runs(match)
    text = "".join(str(run) for run in runs)

    inside_runs = sum(1 for run in runs if run.inside)
    if inside_runs == 0:
        return MatchResult(score=1.0, text=text)

    run_ratio = inside_segments / inside_runs
    char_ratio = inside_chars / total_chars if total_chars else 1.0
    return MatchResult(score=run_ratio * char_ratio, text=text)


def abbreviate_directory(highlighted_directory: str, separator: str) -> str:
    """
    Collapse every directory component without a highlight to one character.

    Args:
        highlighted_directory: Rendered directory text.
        separator: Path separator character.

    Returns:
        str: Abbreviated directory text, e.g. 'a/b/(sr)c' for 'app/bin/(sr)c'.
    """
    component = re.compile("[^" + re.escape(separator) + "]+")
    return component.sub(
        lambda m: m.group(0) if "(" in m.group(0) else m.group(0)[0],
        highlighted_directory,
    )
