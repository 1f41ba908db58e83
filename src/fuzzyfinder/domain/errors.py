from __future__ import annotations

"""
Domain Exceptions.

Failures the finder reports to its callers. Queries never raise: an empty
segment matches everything and non-matching files are simply not yielded.
"""


class FuzzyFinderError(Exception):
    """Base class for every error raised by the package."""


class TooManyEntries(FuzzyFinderError):
    """
    Raised when a live scan accumulates more files than the configured ceiling.

    Attributes:
        ceiling: The limit that was exceeded.
    """

    def __init__(self, ceiling: int) -> None:
        self.ceiling = ceiling
        super().__init__(f"Scan aborted: more than {ceiling} files found")
