from __future__ import annotations

"""
Unit tests for the domain data models and configuration persistence.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from fuzzyfinder.domain.config import load_config_file
from fuzzyfinder.domain.errors import FuzzyFinderError, TooManyEntries
from fuzzyfinder.domain.match_models import CharacterRun, MatchFileResult
from fuzzyfinder.domain.tree_models import Directory, FileEntry, join_path


def test_directory_identity_semantics():
    a = Directory("/x")
    b = Directory("/x")

    assert a != b
    assert len({a, b}) == 2


def test_directory_find_child_ignores_case():
    parent = Directory("/x")
    child = Directory("/x/Lib")
    parent.subdirectories.append(child)

    assert parent.find_child("/x/lib") is child
    assert parent.find_child("/x/other") is None


def test_file_entry_path():
    entry = FileEntry(parent=Directory("/x/y"), name="z.txt", separator="/")
    assert entry.path == "/x/y/z.txt"


def test_join_path_edge_cases():
    assert join_path("", "a.txt", "/") == "a.txt"
    assert join_path("/", "a.txt", "/") == "/a.txt"
    assert join_path("C:\\", "a.txt", "\\") == "C:\\a.txt"


def test_character_run_rendering():
    assert str(CharacterRun(text="ab", inside=True)) == "(ab)"
    assert str(CharacterRun(text="ab", inside=False)) == "ab"


def test_match_file_result_is_immutable():
    result = MatchFileResult(
        path="/a/b.py", abbreviated_path="(b).py", directory="/a", name="b.py",
        highlighted_directory="", highlighted_name="(b).py",
        highlighted_path="(b).py", score=0.25,
    )

    assert str(result) == "(b).py"
    with pytest.raises(FrozenInstanceError):
        result.score = 1.0


def test_too_many_entries_carries_ceiling():
    err = TooManyEntries(7)

    assert isinstance(err, FuzzyFinderError)
    assert err.ceiling == 7
    assert "7" in str(err)


def test_load_config_file_roundtrip(tmp_path):
    path = tmp_path / "finder.json"
    path.write_text(json.dumps({"ceiling": 20, "ignores": ["*.o"]}), encoding="utf-8")

    assert load_config_file(str(path)) == {"ceiling": 20, "ignores": ["*.o"]}


def test_load_config_file_tolerates_bad_input(tmp_path):
    corrupt = tmp_path / "corrupt.json"
    corrupt.write_text("{not json", encoding="utf-8")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]", encoding="utf-8")

    assert load_config_file(str(tmp_path / "missing.json")) == {}
    assert load_config_file(str(corrupt)) == {}
    assert load_config_file(str(listing)) == {}
