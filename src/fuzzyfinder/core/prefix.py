from __future__ import annotations

"""
Shared-Prefix Resolver.

Computes the longest path prefix common to every root directory and compiles
the expression that strips it from candidate strings, so results read as
paths relative to the common ancestor.
"""

import re
from typing import List, Sequence

from fuzzyfinder.domain.tree_models import Directory


def determine_shared_prefix(roots: Sequence[Directory], separator: str) -> str:
    """
    Find the longest common leading path of all roots.

    A single root is its own prefix (the usual one-project case).

    Args:
        roots: Root directories of the forest.
        separator: Path separator character.

    Returns:
        str: The shared prefix, empty when there are no roots.
    """
    if not roots:
        return ""
    if len(roots) == 1:
        return roots[0].name

    split_roots = [root.name.split(separator) for root in roots]
    common: List[str] = []
    for parts in zip(*split_roots):
        if any(part != parts[0] for part in parts[1:]):
            break
        common.append(parts[0])

    return separator.join(common)


def compile_prefix_stripper(prefix: str, separator: str) -> re.Pattern:
    """
    Compile the expression removing the shared prefix and its separator.

    Args:
        prefix: Result of determine_shared_prefix.
        separator: Path separator character.

    Returns:
        re.Pattern: Anchored expression; matches nothing useful when the
        prefix is empty.
    """
    if not prefix:
        return re.compile("^")
    base = prefix[:-1] if prefix.endswith(separator) else prefix
    return re.compile("^" + re.escape(base) + re.escape(separator))


def strip_prefix(stripper: re.Pattern, value: str) -> str:
    return stripper.sub("", value, count=1)
