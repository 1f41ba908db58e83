from __future__ import annotations

"""
Configuration Validation Service.

Ensures that a finder configuration dictionary conforms to the expected
schema before it reaches the finder. Handles type coercion and default value
injection, or raises in strict mode.
"""

import logging
from typing import Any, Dict, List, Tuple

from fuzzyfinder.domain.config import DEFAULT_CEILING, get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (CLI flags, JSON files) into strictly typed
    options and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown option '{key}' ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    # 2. Field Processing & Normalization
    for field in ("directories", "full_file_names", "ignores"):
        merged[field] = _as_list_str(merged.get(field), field, warnings, strict)

    merged["ceiling"] = _as_positive_int(merged.get("ceiling"), "ceiling", warnings, strict)
    merged["separator"] = _as_separator(
        merged.get("separator"), defaults["separator"], warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_list_str(value: Any, field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return []

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using empty list.")
    return []


def _as_positive_int(value: Any, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce the ceiling into a positive integer."""
    if value is None:
        return DEFAULT_CEILING

    number = value
    if isinstance(value, str) and not strict:
        try:
            number = int(value.strip())
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")
        except ValueError:
            number = None

    if isinstance(number, bool) or not isinstance(number, int):
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using {DEFAULT_CEILING}.")
        return DEFAULT_CEILING

    if number <= 0:
        msg = f"Invalid field '{field}': must be positive, received {number}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using {DEFAULT_CEILING}.")
        return DEFAULT_CEILING

    return number


def _as_separator(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Ensure the separator is a single character."""
    if value is None:
        return fallback
    if isinstance(value, str) and len(value) == 1:
        return value

    msg = f"Invalid field 'separator': expected one character, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{fallback}'.")
    return fallback
