"""Project discovery on disk and language detection."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .domain import LANGS, Category, Lang, ProjectName, Repo
from .ports import ProjectSource


def _subdirs(path: Path) -> list[Path]:
    try:
        entries = list(path.iterdir())
    except OSError:
        return []
    return [p for p in entries if p.is_dir()]


def _is_repo(path: Path) -> bool:
    return (path / ".git").is_dir()


def _scan_dir(path: Path, category: str) -> Iterator[Repo]:
    dname = path.name
    if _is_repo(path):
        yield Repo(ProjectName(dname), path, Category(category))
        return
    for sub in _subdirs(path):
        if _is_repo(sub):
            yield Repo(ProjectName(f"{dname}/{sub.name}"), sub, Category(category))


@dataclass
class FilesystemProjectSource(ProjectSource):
    """Finds repos laid out as <projects_dir>/<category>/<repo> or .../<group>/<repo>."""

    projects_dir: Path

    def __post_init__(self) -> None:
        self.projects_dir = Path(self.projects_dir)

    def find_all(self) -> list[Repo]:
        return [
            repo
            for cat_dir in _subdirs(self.projects_dir)
            for project_dir in _subdirs(cat_dir)
            for repo in _scan_dir(project_dir, cat_dir.name)
        ]


def detect_langs(path: Path) -> list[Lang]:
    """Languages whose indicator files exist in path and whose exclusions do not."""
    path = Path(path)
    return [
        lang
        for lang in LANGS
        if not any((path / f).exists() for f in lang.exclude_if)
        and any((path / f).exists() for f in lang.indicators)
    ]