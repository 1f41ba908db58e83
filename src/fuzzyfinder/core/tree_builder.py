from __future__ import annotations

"""
Directory Tree Builder.

Constructs the searchable forest either from a flat list of full file paths
(no filesystem access) or by walking root directories depth-first through an
injected enumeration capability, applying the ignore predicate and the file
ceiling along the way.
"""

import logging
import os
import re
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from fuzzyfinder.core.filters import IgnorePredicate
from fuzzyfinder.core.prefix import strip_prefix
from fuzzyfinder.domain.errors import TooManyEntries
from fuzzyfinder.domain.tree_models import Directory, FileEntry, find_root, join_path
from fuzzyfinder.infra.fs import FsEntry, is_directory, normalize_path

logger = logging.getLogger(__name__)

ListDir = Callable[[str], Iterable[FsEntry]]

# -----------------------------------------------------------------------------
# PUBLIC API (FULL PATH LISTS)
# -----------------------------------------------------------------------------

def build_tree_from_paths(
        full_file_names: Iterable[str],
        separator: str,
) -> Tuple[List[Directory], List[FileEntry]]:
    """
    Parse full file paths into an implied directory forest.

    Paths are sorted first so sibling order is deterministic. Directory
    nodes are reused when a sibling with the same case-insensitive name
    already exists.

    Args:
        full_file_names: Complete file paths.
        separator: Path separator character.

    Returns:
        Tuple[List[Directory], List[FileEntry]]: (Roots, Files).
    """
    roots: List[Directory] = []
    files: List[FileEntry] = []

    for file_name in sorted(full_file_names):
        if not file_name:
            continue
        segments = file_name.split(separator)
        current: Optional[Directory] = None
        for segment in segments[:-1]:
            current = _descend(roots, current, segment, separator)
        if current is None:
            # Bare file name: lives under the current directory
            current = _descend(roots, None, "", separator)
        files.append(FileEntry(parent=current, name=segments[-1], separator=separator))

    logger.debug(f"Built tree from paths: {len(roots)} root(s), {len(files)} file(s)")
    return roots, files


def _descend(
        roots: List[Directory],
        parent: Optional[Directory],
        segment: str,
        separator: str,
) -> Directory:
    """Return the child of parent named segment, creating it if needed."""
    if parent is None:
        name = _root_name(segment, separator)
        root = find_root(roots, name)
        if root is None:
            root = Directory(name, is_root=True)
            roots.append(root)
        return root

    full_name = join_path(parent.name, segment, separator)
    child = parent.find_child(full_name)
    if child is None:
        child = Directory(full_name)
        parent.subdirectories.append(child)
    return child


def _root_name(segment: str, separator: str) -> str:
    # '' (leading separator of an absolute path) and drive letters ('C:')
    # name the filesystem root, which keeps its separator.
    if segment == "" or segment.endswith(":"):
        return segment + separator
    return segment

# -----------------------------------------------------------------------------
# PUBLIC API (LIVE SCAN)
# -----------------------------------------------------------------------------

def resolve_root_directories(directories: Sequence[str]) -> List[Directory]:
    """
    Normalize, validate and deduplicate root directories.

    A root lying inside another root is dropped, since the outer scan
    already reaches it.

    Args:
        directories: Raw directory paths.

    Returns:
        List[Directory]: One root per unique existing directory, input order.
    """
    paths: List[str] = []
    for raw in directories:
        path = normalize_path(raw)
        if path in paths:
            continue
        if not is_directory(path):
            logger.warning(f"Skipping root '{raw}': not a directory")
            continue
        paths.append(path)

    roots: List[Directory] = []
    for path in paths:
        outer = next((p for p in paths if p != path and _is_within(path, p)), None)
        if outer is not None:
            logger.debug(f"Skipping root '{path}': already under '{outer}'")
            continue
        roots.append(Directory(path, is_root=True))
    return roots


def _is_within(path: str, base: str) -> bool:
    """Check whether path lies below base, comparing whole segments."""
    base_prefix = base if base.endswith(os.sep) else base + os.sep
    return path.startswith(base_prefix)


def scan_tree(
        roots: Sequence[Directory],
        list_dir: ListDir,
        is_ignored: IgnorePredicate,
        stripper: re.Pattern,
        ceiling: int,
        separator: str,
) -> Tuple[List[Directory], List[FileEntry]]:
    """
    Walk every root depth-first and collect the files beneath it.

    The walk fills fresh copies of the roots, so callers can discard the
    whole result when the ceiling aborts it.

    Args:
        roots: Root directories to scan.
        list_dir: Enumeration capability for one directory level.
        is_ignored: Predicate applied to bare names and prefix-stripped paths.
        stripper: Shared-prefix removal expression.
        ceiling: Maximum number of files.
        separator: Path separator character.

    Returns:
        Tuple[List[Directory], List[FileEntry]]: (Scanned roots, Files).

    Raises:
        TooManyEntries: If more than ceiling files are found.
    """
    fresh_roots = [Directory(root.name, is_root=True) for root in roots]
    files: List[FileEntry] = []

    for root in fresh_roots:
        _follow_tree(root, files, list_dir, is_ignored, stripper, ceiling, separator)

    logger.debug(f"Scanned {len(fresh_roots)} root(s): {len(files)} file(s)")
    return fresh_roots, files


def _follow_tree(
        directory: Directory,
        files: List[FileEntry],
        list_dir: ListDir,
        is_ignored: IgnorePredicate,
        stripper: re.Pattern,
        ceiling: int,
        separator: str,
) -> None:
    for entry in list_dir(directory.name):
        if is_ignored(entry.name):
            continue

        if entry.is_dir:
            child = Directory(entry.path)
            directory.subdirectories.append(child)
            _follow_tree(child, files, list_dir, is_ignored, stripper, ceiling, separator)
        elif not is_ignored(strip_prefix(stripper, entry.path)):
            if len(files) >= ceiling:
                raise TooManyEntries(ceiling)
            files.append(FileEntry(parent=directory, name=entry.name, separator=separator))
