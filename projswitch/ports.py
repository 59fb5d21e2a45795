"""Interfaces the use cases depend on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .domain import Project, Repo, Session


class UsageReader(ABC):
    @abstractmethod
    def frequencies(self) -> dict[str, int]:
        """How often each session name was opened."""


class UsageRecorder(ABC):
    @abstractmethod
    def record(self, session_name: str) -> None:
        """Remember that a session was opened."""


class SessionStarter(ABC):
    @abstractmethod
    def start(self, session_name: str, project_dir: Path) -> None:
        """Start a detached session for a project."""


class SessionConfigEditor(ABC):
    @abstractmethod
    def prepare_for_edit(self, session_name: str, project_dir: Path) -> Path:
        """Make sure a session config exists and return its path."""


class Launcher(SessionStarter, SessionConfigEditor):
    """Starts sessions and manages their configuration."""


class ProjectSource(ABC):
    @abstractmethod
    def find_all(self) -> list[Repo]:
        """All repositories available."""


class SessionStore(ABC):
    @abstractmethod
    def all(self) -> list[Session]:
        """All running sessions."""

    @abstractmethod
    def find(self, name: str) -> Optional[Session]:
        """The running session of that name, if any."""


class SessionNavigator(ABC):
    @abstractmethod
    def is_in_session(self) -> bool:
        """Whether we run inside a multiplexer session."""

    @abstractmethod
    def switch_to(self, name: str) -> None:
        """Switch the current client to a session."""

    @abstractmethod
    def attach_to(self, name: str) -> None:
        """Attach the terminal to a session."""

    def on_session_started(self, name: str) -> None:
        """Hook called after a new session has been started."""


class Multiplexer(SessionStore, SessionNavigator):
    """A terminal multiplexer: stores and navigates sessions."""


@dataclass(frozen=True)
class PickEntry:
    display: str
    session_name: str
    path: str


class ProjectPicker(ABC):
    @abstractmethod
    def pick(
        self, open: Sequence[Project], closed: Sequence[Project], query: str
    ) -> Optional[int]:
        """Index of the chosen project in open followed by closed, or None."""


class MarkdownRenderer(ABC):
    @abstractmethod
    def render(self, path: str, width: int) -> None:
        """Render a markdown file to the terminal."""