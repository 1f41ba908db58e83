from __future__ import annotations

"""
Fuzzy File Finder.

Orchestrates tree construction, query compilation and the matching pass.

A query is interpreted thus:

* "foo": any file with the characters 'f', 'o', 'o' in that order in its
  base name (directory names are not considered).
* "foo/bar": any file whose base name contains 'b', 'a', 'r' in order and
  with at least one directory component containing 'f', 'o', 'o' in order.
* "foo/bar/baz": as above, with two directory components matched in
  increasing depth in addition to the file name.
* "foo/": any file beneath a directory component matching "foo".

Spaces in queries are ignored and matching is case-insensitive.
"""

import logging
import os
from typing import Any, Dict, Iterator, List, Optional, Sequence

from fuzzyfinder.core.filters import IgnorePredicate, build_ignore_predicate
from fuzzyfinder.core.matcher import PathMatchCache, match_file, match_path
from fuzzyfinder.core.patterns import compile_file_pattern, compile_path_pattern, to_regex
from fuzzyfinder.core.prefix import compile_prefix_stripper, determine_shared_prefix
from fuzzyfinder.core.tree_builder import (
    ListDir,
    build_tree_from_paths,
    resolve_root_directories,
    scan_tree,
)
from fuzzyfinder.domain.config import DEFAULT_CEILING
from fuzzyfinder.domain.match_models import (
    MatchFileResult,
    PathConstraint,
    PathPattern,
    Unconstrained,
)
from fuzzyfinder.domain.tree_models import Directory, FileEntry
from fuzzyfinder.infra.fs import list_directory

logger = logging.getLogger(__name__)


class FuzzyFileFinder:
    """
    Searches a directory forest for files matching abbreviated path queries.

    The tree comes either from full_file_names (no filesystem access) or from
    a live scan of directories. When neither is given the current directory
    is scanned.

    Instances are not thread-safe: rescan() must not run while a search
    generator is being consumed.

    Attributes:
        roots: Root directories of the forest.
        files: Every known file, in tree-construction order.
        ceiling: Maximum number of files a live scan may collect.
        ignores: Glob patterns consulted by the default ignore predicate.
        separator: Path separator used for paths and queries.
        shared_prefix: Longest path prefix common to all roots.
    """

    def __init__(
            self,
            directories: Optional[Sequence[str]] = None,
            full_file_names: Optional[Sequence[str]] = None,
            ceiling: int = DEFAULT_CEILING,
            ignores: Optional[Sequence[str]] = None,
            *,
            separator: str = os.sep,
            list_dir: Optional[ListDir] = None,
            is_ignored: Optional[IgnorePredicate] = None,
    ) -> None:
        """
        Build the tree and, in live mode, perform the initial scan.

        Raises:
            TooManyEntries: If the initial live scan exceeds the ceiling.
        """
        self.ceiling = ceiling
        self.ignores: List[str] = list(ignores or [])
        self.separator = separator
        self.roots: List[Directory] = []
        self.files: List[FileEntry] = []

        self._list_dir: ListDir = list_dir or list_directory
        self._is_ignored: IgnorePredicate = is_ignored or build_ignore_predicate(self.ignores)
        self._full_file_names: List[str] = list(full_file_names or [])

        if self._full_file_names:
            self.roots, self.files = build_tree_from_paths(self._full_file_names, separator)
        else:
            if directories is None and full_file_names is None:
                directories = ["."]
            self.roots = resolve_root_directories(directories or [])

        self.shared_prefix = determine_shared_prefix(self.roots, separator)
        self._prefix_stripper = compile_prefix_stripper(self.shared_prefix, separator)

        if not self._full_file_names:
            self.rescan()

    @classmethod
    def from_config(cls, config: Dict[str, Any], **kwargs: Any) -> FuzzyFileFinder:
        """
        Build a finder from a configuration produced by validate_config.

        Args:
            config: Normalized configuration dictionary.
            **kwargs: Collaborators forwarded to the constructor
                (list_dir, is_ignored).

        Returns:
            FuzzyFileFinder: The initialized finder.
        """
        return cls(
            directories=config.get("directories") or None,
            full_file_names=config.get("full_file_names") or None,
            ceiling=config.get("ceiling", DEFAULT_CEILING),
            ignores=config.get("ignores"),
            separator=config.get("separator", os.sep),
            **kwargs,
        )

    # -------------------------------------------------------------------------
    # TREE MAINTENANCE
    # -------------------------------------------------------------------------

    def rescan(self) -> None:
        """
        Rebuild the file list.

        Live trees are walked again through the enumeration capability; trees
        built from full paths are rebuilt from the stored paths. The previous
        tree stays in place if the scan is aborted.

        Raises:
            TooManyEntries: If the scan finds more files than the ceiling.
        """
        if self._full_file_names:
            self.roots, self.files = build_tree_from_paths(self._full_file_names, self.separator)
            return

        roots, files = scan_tree(
            self.roots,
            self._list_dir,
            self._is_ignored,
            self._prefix_stripper,
            self.ceiling,
            self.separator,
        )
        self.roots, self.files = roots, files
        logger.info(f"Indexed {len(files)} file(s) under {len(roots)} root(s)")

    # -------------------------------------------------------------------------
    # SEARCH
    # -------------------------------------------------------------------------

    def search(self, query: str) -> Iterator[MatchFileResult]:
        """
        Yield every file matching the query, in tree-construction order.

        Args:
            query: Abbreviated path; see the module documentation.

        Yields:
            MatchFileResult: One result per matching file.
        """
        path_parts = query.replace(" ", "").split(self.separator)
        file_name_part = path_parts.pop()

        constraint = self._compile_constraint(path_parts)
        file_regex = to_regex(compile_file_pattern(file_name_part, self.separator))
        logger.debug(f"Search '{query}': file pattern {file_regex.pattern}")

        cache = PathMatchCache()
        try:
            for entry in self.files:
                path_match = match_path(
                    entry.parent, cache, constraint, self._prefix_stripper, self.separator
                )
                if path_match.missed:
                    continue
                result = match_file(
                    entry, file_regex, path_match, self.separator, needle=file_name_part
                )
                if result is not None:
                    yield result
        finally:
            logger.debug(f"Search '{query}': {len(cache)} directory match(es) evaluated")

    def find(self, query: str, max_results: Optional[int] = None) -> List[MatchFileResult]:
        """
        Collect matches for the query, stopping once max_results are found.

        Args:
            query: Abbreviated path; see the module documentation.
            max_results: Upper bound on returned results; None for all.

        Returns:
            List[MatchFileResult]: Results in tree-construction order.
        """
        results: List[MatchFileResult] = []
        if max_results is not None and max_results <= 0:
            return results

        matches = self.search(query)
        try:
            for match in matches:
                results.append(match)
                if max_results is not None and len(results) >= max_results:
                    break
        finally:
            matches.close()

        logger.debug(f"Find '{query}': {len(results)} result(s)")
        return results

    # -------------------------------------------------------------------------
    # INTERNAL HELPERS
    # -------------------------------------------------------------------------

    def _compile_constraint(self, directory_parts: List[str]) -> PathConstraint:
        if not directory_parts:
            return Unconstrained()
        source = compile_path_pattern(directory_parts, self.separator)
        logger.debug(f"Path pattern: {source}")
        return PathPattern(
            regex=to_regex(source),
            segments=sum(1 for part in directory_parts if part),
            needle="".join(directory_parts),
        )

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} roots={len(self.roots)} "
            f"files={len(self.files)} prefix={self.shared_prefix!r}>"
        )
