import subprocess
from pathlib import Path
from unittest import mock

import pytest

from projswitch.domain import Category, Project, ProjectName, Repo, Session
from projswitch.ports import (
    Launcher,
    Multiplexer,
    ProjectPicker,
    ProjectSource,
    UsageReader,
    UsageRecorder,
)
from projswitch.usecases import edit_config, load_projects, open_project, pick_project


def make_repo(name, cat="work"):
    return Repo(ProjectName(name), Path("/projects") / cat / name, Category(cat))


def make_project(name, freq=0):
    return Project(make_repo(name), freq)


class FakeSource(ProjectSource):
    def __init__(self, repos):
        self.repos = repos

    def find_all(self):
        return list(self.repos)


class FakeUsage(UsageReader, UsageRecorder):
    def __init__(self, freqs=None):
        self.freqs = freqs or {}
        self.recorded = []

    def frequencies(self):
        return dict(self.freqs)

    def record(self, session_name):
        self.recorded.append(session_name)


class FakeMux(Multiplexer):
    def __init__(self, sessions=(), in_session=False):
        self.sessions = {s.name: s for s in sessions}
        self.in_session = in_session
        self.events = []

    def all(self):
        return list(self.sessions.values())

    def find(self, name):
        return self.sessions.get(name)

    def is_in_session(self):
        return self.in_session

    def switch_to(self, name):
        self.events.append(("switch", name))

    def attach_to(self, name):
        self.events.append(("attach", name))

    def on_session_started(self, name):
        self.events.append(("started", name))


class FakeLauncher(Launcher):
    def __init__(self, events, config_path=Path("/cfg/x.yaml")):
        self.events = events
        self.config_path = config_path

    def start(self, session_name, project_dir):
        self.events.append(("start", session_name, project_dir))

    def prepare_for_edit(self, session_name, project_dir):
        self.events.append(("prepare", session_name, project_dir))
        return self.config_path


class FakePicker(ProjectPicker):
    def __init__(self, result):
        self.result = result
        self.calls = []

    def pick(self, open, closed, query):
        self.calls.append((list(open), list(closed), query))
        return self.result


def test_load_projects_partitions_and_ranks():
    source = FakeSource([make_repo("b"), make_repo("a"), make_repo("c.d")])
    mux = FakeMux([Session("a")])
    usage = FakeUsage({"c--d": 3})
    open_, closed = load_projects(source, mux, usage)
    assert [p.repo.name.display for p in open_] == ["a"]
    assert [p.repo.name.display for p in closed] == ["c.d", "b"]
    assert closed[0].frequency == 3
    assert closed[1].frequency == 0


def test_load_projects_uses_session_name_for_grouped_projects():
    source = FakeSource([make_repo("group/x")])
    mux = FakeMux([Session("group-x")])
    open_, closed = load_projects(source, mux, FakeUsage())
    assert [p.repo.name.display for p in open_] == ["group/x"]
    assert closed == []


def test_pick_project_indexes_open_then_closed():
    open_ = [make_project("a")]
    closed = [make_project("b"), make_project("c")]
    picker = FakePicker(1)
    assert pick_project(open_, closed, picker, "q") == closed[0]
    assert picker.calls == [(open_, closed, "q")]


def test_pick_project_none_when_cancelled():
    assert pick_project([make_project("a")], [], FakePicker(None), "") is None


def test_pick_project_none_when_out_of_range():
    assert pick_project([make_project("a")], [], FakePicker(5), "") is None


def test_open_project_existing_session_switches():
    mux = FakeMux([Session("a")], in_session=True)
    launcher = FakeLauncher(mux.events)
    usage = FakeUsage()
    open_project(make_project("a"), usage, mux, launcher, mux)
    assert usage.recorded == ["a"]
    assert mux.events == [("switch", "a")]


def test_open_project_new_session_starts_then_attaches():
    mux = FakeMux(in_session=False)
    launcher = FakeLauncher(mux.events)
    usage = FakeUsage()
    project = make_project("x.y")
    open_project(project, usage, mux, launcher, mux)
    assert usage.recorded == ["x--y"]
    assert mux.events == [
        ("start", "x--y", project.repo.path),
        ("started", "x--y"),
        ("attach", "x--y"),
    ]


def test_open_project_propagates_start_error():
    class Failing(FakeLauncher):
        def start(self, session_name, project_dir):
            raise RuntimeError("boom")

    mux = FakeMux()
    with pytest.raises(RuntimeError, match="boom"):
        open_project(make_project("a"), FakeUsage(), mux, Failing(mux.events), mux)
    assert mux.events == []


def test_edit_config_runs_editor(monkeypatch):
    monkeypatch.setenv("EDITOR", "nano")
    events = []
    launcher = FakeLauncher(events, Path("/cfg/a.yaml"))
    with mock.patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess([], 0)
        result = edit_config(make_project("a"), launcher)
    assert result is None
    run.assert_called_once_with(["nano", str(Path("/cfg/a.yaml"))], check=False)
    assert events[0][:2] == ("prepare", "a")


def test_edit_config_defaults_to_vi(monkeypatch):
    monkeypatch.delenv("EDITOR", raising=False)
    launcher = FakeLauncher([], Path("/cfg/a.yaml"))
    with mock.patch("subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess([], 0)
        result = edit_config(make_project("a"), launcher)
    assert result is None
    assert run.call_args.args[0] == ["vi", str(Path("/cfg/a.yaml"))]