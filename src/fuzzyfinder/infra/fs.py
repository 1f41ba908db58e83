from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the directory enumeration capability consumed by live scans and the
path normalization used to resolve root directories. Acts as an abstraction
over the 'os' module so the scanning core can be driven by any enumerator.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# ENUMERATION API
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FsEntry:
    """
    An immediate child of a directory.

    Attributes:
        name: Base name of the entry.
        path: Full path of the entry.
        is_dir: Whether the entry is a directory.
    """
    name: str
    path: str
    is_dir: bool


def list_directory(path: str) -> List[FsEntry]:
    """
    Enumerate the immediate children of a directory, sorted by name.

    Unreadable directories are logged and reported as empty so that a single
    permission problem does not abort a whole scan.

    Args:
        path: Directory to enumerate.

    Returns:
        List[FsEntry]: Children of the directory.
    """
    entries: List[FsEntry] = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False
                entries.append(FsEntry(name=entry.name, path=entry.path, is_dir=is_dir))
    except OSError as e:
        logger.warning(f"Cannot read directory '{path}': {e}")
        return []

    entries.sort(key=lambda e: e.name)
    return entries

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = ".") -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)
