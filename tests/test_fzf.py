import subprocess
from pathlib import Path
from unittest import mock

import pytest

from projswitch.colors import DIM
from projswitch.domain import Category, Project, ProjectName, Repo
from projswitch.fzf import FzfProjectPicker, build_args, build_lines, parse_selection
from projswitch.ports import PickEntry


def make_project(name, category="work"):
    return Project(Repo(ProjectName(name), Path(f"/p/{name}"), Category(category)))


def test_build_lines_with_separator():
    lines = build_lines([PickEntry("a", "a", "/a")], [PickEntry("b", "b", "/b")])
    assert len(lines) == 3
    assert lines[0] == "a\t0"
    assert lines[1].startswith(DIM) and lines[1].endswith("\t")
    assert lines[2] == "b\t1"


def test_build_lines_without_separator():
    lines = build_lines([], [PickEntry("a", "a", "/a"), PickEntry("b", "b", "/b")])
    assert lines == ["a\t0", "b\t1"]


def test_build_args_with_preview():
    args = build_args("foo", "prev", "meta")
    assert "--query=foo" in args
    assert "--preview=prev --show-name meta {2}" in args
    assert "--preview-window=right:50%:border-left:wrap" in args


def test_build_args_without_preview():
    args = build_args("", None, "meta")
    assert "--query=" in args
    assert not any(a.startswith("--preview") for a in args)


@pytest.mark.parametrize(
    "output, expected",
    [
        (b"", None),
        (b"name\t3\n", 3),
        (b"sep\t\n", None),
        (b"no tab\n", None),
        ("x\ty\t12\n", 12),
    ],
)
def test_parse_selection(output, expected):
    assert parse_selection(output) == expected


def test_pick_runs_fzf_and_removes_meta():
    seen = {}

    def fake_run(args, **kwargs):
        meta = Path(args[-2].split(" ")[-2])
        seen["meta"] = meta
        seen["meta_text"] = meta.read_text(encoding="utf-8")
        seen["args"] = args
        seen["input"] = kwargs["input"].decode("utf-8")
        return subprocess.CompletedProcess(args, 0, stdout=b"whatever\t1\n")

    picker = FzfProjectPicker(preview_cmd="prev")
    with mock.patch("projswitch.fzf.subprocess.run", side_effect=fake_run):
        result = picker.pick([make_project("one")], [make_project("two")], "q")

    assert result == 1
    assert seen["args"][0] == "fzf"
    assert "--query=q" in seen["args"]
    assert seen["input"].count("\n") == 3
    assert seen["meta_text"].split("\n") == ["one\t/p/one\t1", "two\t/p/two\t0"]
    assert not seen["meta"].exists()


def test_pick_cancelled_returns_none():
    done = subprocess.CompletedProcess(["fzf"], 130, stdout=b"")
    with mock.patch("projswitch.fzf.subprocess.run", return_value=done):
        assert FzfProjectPicker().pick([make_project("one")], [], "") is None