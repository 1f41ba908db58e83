from __future__ import annotations

"""
End-to-end tests for the command line front end.

Runs the CLI controller in-process against real directories and listing
files, checking exit codes and rendered output.
"""

import json
import logging
import os
from pathlib import Path

import pytest

from fuzzyfinder.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
)
from fuzzyfinder.interface.cli.app import main


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    yield
    root = logging.getLogger()
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
    setattr(root, _QUEUE_LISTENER_ATTR, None)
    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


@pytest.fixture
def listing(tmp_path: Path) -> Path:
    path = tmp_path / "files.txt"
    path.write_text(
        "\n".join([
            os.sep.join(["", "proj", "src", "core", "finder.py"]),
            os.sep.join(["", "proj", "src", "core", "matcher.py"]),
            os.sep.join(["", "proj", "tests", "test_finder.py"]),
            "",
        ]),
        encoding="utf-8",
    )
    return path


def test_cli_prints_highlighted_paths(listing: Path, capsys) -> None:
    code = main(["finder", "--files-from", str(listing)])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out[0] == "0.667  " + os.sep.join(["proj", "src", "core", "(finder).py"])
    assert len(out) == 2


def test_cli_sort_and_limit(listing: Path, capsys) -> None:
    code = main(["finder.py", "--files-from", str(listing), "--sort", "-n", "2"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out[0].startswith("1.000")
    assert len(out) == 2


def test_cli_json_output(listing: Path, capsys) -> None:
    code = main(["core" + os.sep, "--files-from", str(listing), "--json", "--abbr"])
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert [item["name"] for item in payload] == ["finder.py", "matcher.py"]
    assert payload[0]["abbreviated_path"] == os.sep.join(["p", "s", "(core)", "finder.py"])


def test_cli_scans_directories(tmp_path: Path, capsys) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "module.py").write_text("", encoding="utf-8")

    code = main(["mod", "-d", str(tmp_path), "--abbr"])
    out = capsys.readouterr().out

    assert code == 0
    assert os.sep.join(["p", "(mod)ule.py"]) in out


def test_cli_reports_ceiling_errors(tmp_path: Path, capsys) -> None:
    for i in range(3):
        (tmp_path / f"f{i}.txt").write_text("", encoding="utf-8")

    code = main(["f", "-d", str(tmp_path), "--ceiling", "2"])

    assert code == 2
    assert capsys.readouterr().out == ""


def test_cli_reads_config_file(tmp_path: Path, capsys) -> None:
    (tmp_path / "keep.py").write_text("", encoding="utf-8")
    (tmp_path / "skip.log").write_text("", encoding="utf-8")
    config = tmp_path / "finder.json"
    config.write_text(
        json.dumps({"directories": [str(tmp_path)], "ignores": ["*.log", "*.json"]}),
        encoding="utf-8",
    )

    code = main(["", "--config", str(config)])
    out = capsys.readouterr().out

    assert code == 0
    assert "keep.py" in out
    assert "skip.log" not in out


def test_cli_writes_log_file(listing: Path, tmp_path: Path, capsys) -> None:
    log_path = tmp_path / "logs" / "finder.log"

    code = main(["finder", "--files-from", str(listing), "--debug", "--log-file", str(log_path)])
    getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR).stop()

    assert code == 0
    content = log_path.read_text(encoding="utf-8")
    assert "| DEBUG | fuzzyfinder.core.finder | Find 'finder': 2 result(s)" in content
