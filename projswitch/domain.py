"""Domain objects: projects, repositories, languages and multiplexer sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Category:
    """The top-level directory a project is filed under."""

    name: str

    def initial(self) -> str:
        """First character, ASCII-uppercased, or '?' for an empty name."""
        if not self.name:
            return "?"
        first = self.name[0]
        return first.upper() if first.isascii() else first


@dataclass(frozen=True)
class ProjectName:
    """Display name of a project, possibly 'group/name'."""

    display: str

    def __str__(self) -> str:
        return self.display


@dataclass(frozen=True)
class Repo:
    name: ProjectName
    path: Path
    category: Category


@dataclass(frozen=True)
class Project:
    repo: Repo
    frequency: int = 0


@dataclass(frozen=True)
class Lang:
    name: str
    icon: str
    indicators: tuple[str, ...]
    exclude_if: tuple[str, ...] = ()


LANGS: tuple[Lang, ...] = (
    Lang("Nix", "\uF313", ("flake.nix", "default.nix")),
    Lang("Rust", "\uE7A8", ("Cargo.toml",)),
    Lang("TypeScript", "\uE628", ("tsconfig.json",)),
    Lang("Node", "\uE718", ("package.json",), ("tsconfig.json",)),
    Lang("Python", "\uE606", ("pyproject.toml", "requirements.txt", "setup.py")),
    Lang("Go", "\uE724", ("go.mod",)),
    Lang("Java", "\uE738", ("pom.xml", "build.gradle")),
    Lang("Ruby", "\uE23E", ("Gemfile",)),
    Lang("PHP", "\uE608", ("composer.json",)),
    Lang("Docker", "\uE7B0", ("Dockerfile", "docker-compose.yml")),
)


@dataclass(frozen=True)
class Window:
    index: int
    name: str
    active: bool


@dataclass
class Session:
    name: str
    windows: list[Window] = field(default_factory=list)


def _rank_key(project: Project) -> tuple[int, str]:
    return (-project.frequency, project.repo.name.display.lower())


def rank(open: list[Project], closed: list[Project]) -> tuple[list[Project], list[Project]]:
    """Sort both lists by usage (most first), then by name case-insensitively."""
    return sorted(open, key=_rank_key), sorted(closed, key=_rank_key)


def session_name_from_project(display_name: str) -> str:
    """Session name for a project: '/' becomes '-' and '.' becomes '--'."""
    return display_name.replace("/", "-").replace(".", "--")