from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of configuration
sources (defaults, JSON file and command-line overrides), validation, the
search itself and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional, TextIO

from fuzzyfinder.core.finder import FuzzyFileFinder
from fuzzyfinder.core.validator import validate_config
from fuzzyfinder.domain.config import load_config_file
from fuzzyfinder.domain.errors import FuzzyFinderError
from fuzzyfinder.domain.match_models import MatchFileResult
from fuzzyfinder.infra.logging import LoggingConfig, configure_logging, get_logger
from fuzzyfinder.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 unexpected failure, 2 finder error).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, stdout stays for results)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    try:
        # 3. Configuration hierarchy: file < command line
        raw_conf: Dict[str, Any] = {}
        if args.config_file:
            raw_conf.update(load_config_file(args.config_file))
        raw_conf.update(cli_args.args_to_overrides(args))
        if args.files_from:
            raw_conf["full_file_names"] = _read_file_list(args.files_from)

        clean_conf, warnings = validate_config(raw_conf, strict=False)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        # 4. Search
        finder = FuzzyFileFinder.from_config(clean_conf)
        results = finder.find(args.query, args.max_results)
        if args.sort:
            results = sorted(results, key=lambda r: r.score, reverse=True)

    except FuzzyFinderError as e:
        logger.error(str(e))
        return 2
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        return 1

    # 5. Rendering
    _render(results, sys.stdout, json_output=args.json_output, abbreviated=args.abbr)
    return 0

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _read_file_list(source: str) -> List[str]:
    """Read one path per line from a file, or from stdin for '-'."""
    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        with open(source, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    return [line.strip() for line in lines if line.strip()]


def _render(
        results: List[MatchFileResult],
        stream: TextIO,
        *,
        json_output: bool,
        abbreviated: bool,
) -> None:
    if json_output:
        stream.write(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
        stream.write("\n")
        return

    for r in results:
        text = r.abbreviated_path if abbreviated else r.highlighted_path
        stream.write(f"{r.score:.3f}  {text}\n")


if __name__ == "__main__":
    sys.exit(main())
