from __future__ import annotations

"""
Directory Tree Data Models.

Provides the node types of the searchable forest: directories own their
child directories, files keep a non-owning reference to the directory that
contains them.
"""

from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(eq=False)
class Directory:
    """
    Represents a directory node in the searchable forest.

    Nodes compare and hash by identity so they can key per-search caches.

    Attributes:
        name: Full normalized path of the directory.
        is_root: Whether the node is one of the forest roots.
        subdirectories: Ordered child directory nodes.
    """
    name: str
    is_root: bool = False
    subdirectories: List[Directory] = field(default_factory=list)

    def find_child(self, name: str) -> Optional[Directory]:
        """Return the child whose full name matches case-insensitively."""
        return _find_by_name(self.subdirectories, name)


@dataclass(frozen=True, eq=False)
class FileEntry:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        parent: Directory containing the file (non-owning reference).
        name: Base name of the file, without any separator.
        separator: Path separator used to derive the full path.
    """
    parent: Directory
    name: str
    separator: str = "/"

    @property
    def path(self) -> str:
        return join_path(self.parent.name, self.name, self.separator)

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def join_path(parent: str, name: str, separator: str) -> str:
    """
    Join a directory name and an entry name with a single separator.

    Args:
        parent: Directory path (may be empty or already end in the separator).
        name: Entry name to append.
        separator: Path separator character.

    Returns:
        str: The combined path.
    """
    if not parent:
        return name
    if parent.endswith(separator):
        return parent + name
    return parent + separator + name


def _find_by_name(directories: List[Directory], name: str) -> Optional[Directory]:
    lowered = name.lower()
    for directory in directories:
        if directory.name.lower() == lowered:
            return directory
    return None


def find_root(roots: List[Directory], name: str) -> Optional[Directory]:
    """Return the root whose name matches case-insensitively, if any."""
    return _find_by_name(roots, name)
