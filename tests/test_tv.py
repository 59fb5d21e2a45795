import subprocess
from pathlib import Path
from unittest import mock

import pytest

from projswitch.domain import Category, Project, ProjectName, Repo
from projswitch.ports import PickEntry
from projswitch.tv import (
    FIELD_SEP,
    SEPARATOR,
    TvProjectPicker,
    build_meta_lines,
    build_source_lines,
    format_entry,
    strip_ansi,
    visible_len,
)


def make_project(name, category="work"):
    return Project(Repo(ProjectName(name), Path(f"/p/{name}"), Category(category)))


def test_strip_ansi_removes_csi():
    assert strip_ansi("\x1b[32mW\x1b[0m  name") == "W  name"


def test_strip_ansi_keeps_lone_escape():
    assert strip_ansi("\x1bx") == "\x1bx"


def test_visible_len():
    assert visible_len("\x1b[32mab\x1b[0m") == 2
    assert visible_len("\x1bx") == 2


@pytest.mark.parametrize(
    "s", ["plain", "\x1b[1;32mhi\x1b[0m", "\x1b\x1b", "tail\x1b", "\x1b[unterminated", "é─"]
)
def test_visible_len_matches_stripped_length(s):
    assert visible_len(s) == len(strip_ansi(s))


def test_format_entry_fields():
    entry = PickEntry("\x1b[34mW\x1b[0m  group/repo", "group-repo", "/p")
    line = format_entry(5, entry, 4242)
    fields = line.split(FIELD_SEP)
    assert len(fields) == 4
    assert visible_len(fields[0]) == 250
    assert fields[1].strip() == "5"
    assert fields[2] == "group/repo"
    assert fields[3] == "4242"


def test_format_entry_short_plain_display():
    line = format_entry(0, PickEntry("ab", "ab", "/p"), 1)
    assert line.split(FIELD_SEP)[2] == "ab"


def test_source_lines_separator_only_with_both_groups():
    a, b = PickEntry("A  a", "a", "/a"), PickEntry("B  b", "b", "/b")
    both = build_source_lines([a], [b], 7)
    assert both[1] == SEPARATOR
    assert both[2].split(FIELD_SEP)[1].strip() == "1"
    only = build_source_lines([a, b], [], 7)
    assert SEPARATOR not in only
    assert len(only) == 2


def test_meta_lines():
    a, b = PickEntry("A  a", "a", "/a"), PickEntry("B  b", "b", "/b")
    assert build_meta_lines([a], [b]) == ["a\t/a", "b\t/b"]


def test_pick_parses_index_and_removes_files():
    seen = {}

    def fake_run(args, **kwargs):
        source = Path(args[1].split(" ", 1)[1])
        seen["source"] = source
        seen["lines"] = source.read_text(encoding="utf-8").split("\n")
        seen["args"] = args
        return subprocess.CompletedProcess(args, 0, stdout=b"2\n")

    picker = TvProjectPicker(preview_cmd="prev")
    with mock.patch("projswitch.tv.subprocess.run", side_effect=fake_run):
        result = picker.pick([make_project("one")], [make_project("two")], "q")

    assert result == 2
    assert seen["args"][0] == "tv"
    assert "--input=q" in seen["args"]
    assert seen["lines"][1] == SEPARATOR
    assert not seen["source"].exists()


def test_pick_empty_output_is_none():
    done = subprocess.CompletedProcess(["tv"], 1, stdout=b"")
    with mock.patch("projswitch.tv.subprocess.run", return_value=done):
        assert TvProjectPicker().pick([make_project("one")], [], "") is None


def test_pick_missing_program_raises():
    with mock.patch("projswitch.tv.subprocess.run", side_effect=FileNotFoundError("tv")):
        with pytest.raises(FileNotFoundError):
            TvProjectPicker().pick([make_project("one")], [], "")