from __future__ import annotations

"""
Unit tests for the Query Pattern Compiler.

Verifies the positional capture layout of segment patterns, the anchoring of
file and path patterns, and that directory segments must land in distinct,
increasingly deep path components.
"""

import re

import pytest

from fuzzyfinder.core.patterns import (
    compile_file_pattern,
    compile_path_pattern,
    compile_pattern,
    contains_subsequence,
    to_regex,
)


def test_compile_pattern_interleaves_literals_and_fillers():
    """'foo' becomes three literal captures separated by two fillers."""
    assert compile_pattern("foo", "/") == "(f)([^/]*?)(o)([^/]*?)(o)"


def test_compile_pattern_uses_given_separator():
    sep = re.escape("\\")
    expected = f"(a)([^{sep}]*?)(b)"
    assert compile_pattern("ab", "\\") == expected


@pytest.mark.parametrize("segment", ["a", "ab", "main", "xyz_q"])
def test_compile_pattern_capture_count(segment):
    """n characters give n literal captures and n-1 fillers."""
    rx = re.compile(compile_pattern(segment, "/"))
    assert rx.groups == 2 * len(segment) - 1


def test_compile_pattern_escapes_regex_metacharacters():
    assert compile_pattern("a.b", "/") == r"(a)([^/]*?)(\.)([^/]*?)(b)"
    rx = to_regex(compile_pattern("a.b", "/"))
    assert rx.search("a.b")
    assert not rx.search("axb")


def test_compile_pattern_empty_segment():
    """The empty segment is a single empty capture matching anything."""
    assert compile_pattern("", "/") == "()"
    assert re.match(compile_pattern("", "/"), "anything")


def test_compile_pattern_matches_subsequence_within_one_component():
    rx = to_regex(compile_pattern("mtr", "/"))
    assert rx.search("matcher.py")
    assert rx.search("src/matcher")
    assert not rx.search("m/tr")
    assert not rx.search("rtm")


def test_compile_file_pattern_is_anchored_with_wildcards():
    source = compile_file_pattern("ab", "/")
    assert source == "^(.*?)(a)([^/]*?)(b)(.*)$"
    assert to_regex(source).match("xxaxxbxx")


def test_compile_path_pattern_structure():
    source = compile_path_pattern(["connt", "adm", "hom"], "/")

    assert source.startswith("^(.*?)")
    assert source.endswith("(.*?)$")
    assert source.count("(.*?/.*?)") == 2
    assert compile_pattern("connt", "/") in source
    assert compile_pattern("adm", "/") in source
    assert compile_pattern("hom", "/") in source


def test_compile_path_pattern_requires_increasing_components():
    rx = to_regex(compile_path_pattern(["connt", "adm", "hom"], "/"))

    assert rx.match("app/connect/admin/home")
    assert rx.match("connect/x/admin/y/home")
    # Two segments in a single component
    assert not rx.match("connect/adminhome")
    # Wrong order
    assert not rx.match("home/admin/connect")


def test_compiled_patterns_ignore_case():
    rx = to_regex(compile_file_pattern("readme", "/"))
    assert rx.match("README.md")


@pytest.mark.parametrize("text, needle, expected", [
    ("FuzzyFinder.py", "ffp", True),
    ("finder.py", "", True),
    ("finder.py", "fz", False),
    ("ab", "ba", False),
])
def test_contains_subsequence(text, needle, expected):
    assert contains_subsequence(text, needle) is expected
