"""Application use cases: load, pick, open and edit projects."""

from __future__ import annotations

import os
import subprocess
from typing import Optional, Sequence

from .domain import Project, rank, session_name_from_project
from .ports import (
    ProjectPicker,
    ProjectSource,
    SessionConfigEditor,
    SessionNavigator,
    SessionStarter,
    SessionStore,
    UsageReader,
    UsageRecorder,
)


def load_projects(
    source: ProjectSource, sessions: SessionStore, usage: UsageReader
) -> tuple[list[Project], list[Project]]:
    """Split all projects into (open, closed), each ranked by usage then name."""
    open_names = {s.name for s in sessions.all()}
    frequencies = usage.frequencies()
    open_projects: list[Project] = []
    closed_projects: list[Project] = []
    for repo in source.find_all():
        name = session_name_from_project(repo.name.display)
        project = Project(repo, frequencies.get(name, 0))
        (open_projects if name in open_names else closed_projects).append(project)
    return rank(open_projects, closed_projects)


def pick_project(
    open: Sequence[Project],
    closed: Sequence[Project],
    picker: ProjectPicker,
    query: str,
) -> Optional[Project]:
    """Let the picker choose; None when nothing, or nothing valid, was chosen."""
    every = [*open, *closed]
    idx = picker.pick(open, closed, query)
    if idx is None or not 0 <= idx < len(every):
        return None
    return every[idx]


def _navigate(navigator: SessionNavigator, name: str) -> None:
    if navigator.is_in_session():
        navigator.switch_to(name)
    else:
        navigator.attach_to(name)


def open_project(
    project: Project,
    usage: UsageRecorder,
    sessions: SessionStore,
    starter: SessionStarter,
    navigator: SessionNavigator,
) -> None:
    """Record the use, start the session if needed, and go to it."""
    name = session_name_from_project(project.repo.name.display)
    usage.record(name)
    if sessions.find(name) is None:
        starter.start(name, project.repo.path)
        navigator.on_session_started(name)
    _navigate(navigator, name)


def edit_config(project: Project, editor: SessionConfigEditor) -> None:
    """Open the project's session config in $EDITOR (default vi)."""
    name = session_name_from_project(project.repo.name.display)
    config_path = editor.prepare_for_edit(name, project.repo.path)
    editor_cmd = os.environ.get("EDITOR", "vi")
    subprocess.run([editor_cmd, str(config_path)], check=False)