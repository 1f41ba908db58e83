from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed arguments into
configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fuzzyfinder CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fuzzyfinder",
        description="Find files by abbreviated path, e.g. 'src/fndr' for src/core/finder.py.",
    )

    p.add_argument("query", help="Abbreviated path to look for.")

    # --- Tree Sources ---
    p.add_argument(
        "-d", "--directory",
        dest="directories",
        action="append",
        default=None,
        help="Root directory to scan (repeatable). Defaults to the current directory.",
    )
    p.add_argument(
        "--files-from",
        dest="files_from",
        default=None,
        help="Read full file paths, one per line, instead of scanning ('-' for stdin).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with finder options.",
    )

    # --- Scan Constraints ---
    p.add_argument(
        "--ceiling",
        type=int,
        default=None,
        help="Abort when a scan finds more files than this.",
    )
    p.add_argument(
        "--ignore",
        dest="ignores",
        action="append",
        default=None,
        help="Glob pattern to exclude (repeatable).",
    )

    # --- Result Shaping ---
    p.add_argument(
        "-n", "--max",
        dest="max_results",
        type=int,
        default=None,
        help="Stop after this many matches.",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        help="Order results by descending score.",
    )
    p.add_argument(
        "--abbr",
        action="store_true",
        help="Print abbreviated paths.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit results as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write log records to this file (rotated at 1MB).",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options given on the command line are returned, so values from a
    config file survive unless explicitly overridden.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.directories:
        overrides["directories"] = list(args.directories)
    if args.ceiling is not None:
        overrides["ceiling"] = args.ceiling
    if args.ignores:
        overrides["ignores"] = _flatten_csv(args.ignores)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _flatten_csv(values: Optional[List[str]]) -> List[str]:
    """Split comma-separated entries of a repeatable option into one list."""
    out: List[str] = []
    for value in values or []:
        out.extend(x.strip() for x in value.split(",") if x.strip())
    return out
