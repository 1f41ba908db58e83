from __future__ import annotations

"""
Ignore Predicate Engine.

Translates shell-style glob ignore patterns into compiled regular expressions
and builds the predicate consulted by live scans for every bare entry name
and every prefix-stripped file path.
"""

import fnmatch
import re
from typing import Callable, Iterable, List, Optional

IgnorePredicate = Callable[[str], bool]

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_ignore_patterns() -> List[str]:
    """
    Get the patterns ignored even when the caller supplies none.

    Hidden entries (dot-prefixed names such as '.git') are never scanned.

    Returns:
        List[str]: Glob patterns applied to bare entry names.
    """
    return [".*"]

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_globs(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform glob strings into compiled Pattern objects.

    Blank entries are discarded.

    Args:
        patterns: Shell-style glob patterns ('*.pyc', 'build/*').

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        p = (p or "").strip()
        if not p:
            continue
        compiled.append(re.compile(fnmatch.translate(p)))
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a string fully matches at least one compiled glob.

    Args:
        name: Entry name or prefix-stripped path to evaluate.
        compiled_patterns: Pre-compiled glob regexes.

    Returns:
        bool: True if any pattern matches.
    """
    return any(rx.match(name) for rx in compiled_patterns)


def build_ignore_predicate(
        ignores: Optional[Iterable[str]] = None,
        *,
        include_defaults: bool = True,
) -> IgnorePredicate:
    """
    Build the predicate deciding whether an entry is excluded from scans.

    Args:
        ignores: User-supplied glob patterns.
        include_defaults: Whether to also ignore hidden entries.

    Returns:
        IgnorePredicate: Callable returning True for excluded names or paths.
    """
    patterns = list(ignores or [])
    if include_defaults:
        patterns.extend(default_ignore_patterns())
    compiled = compile_globs(patterns)

    def is_ignored(name: str) -> bool:
        return matches_any(name, compiled)

    return is_ignored
