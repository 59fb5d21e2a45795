"""Session launching through laio session files."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from .ports import Launcher

_BUILTIN_TEMPLATE = """\
name: {name}
path: {dir}

windows:
  - name: code
    panes:
      - commands:
          - command: nvim
            args:
              - .
  - name: shell
    panes:
      - commands: []
"""


class LaioError(RuntimeError):
    """laio could not start a session."""


def _yaml_quote(s: str) -> str:
    return "'" + s.replace("'", "''") + "'"


@dataclass(frozen=True)
class SessionConfig:
    """The YAML text of a laio session file."""

    content: str

    @classmethod
    def from_template(cls, template: str, name: str, path: Path) -> "SessionConfig":
        """Fill {name} and {path} placeholders of a user template."""
        return cls(
            template.replace("{name}", _yaml_quote(name)).replace(
                "{path}", _yaml_quote(str(path))
            )
        )

    @classmethod
    def builtin(cls, name: str, path: Path) -> "SessionConfig":
        """The default layout: an editor window and a shell window."""
        return cls(_BUILTIN_TEMPLATE.format(name=_yaml_quote(name), dir=_yaml_quote(str(path))))


@dataclass
class LaioSessionStarter(Launcher):
    """Starts sessions with laio, creating a session file per project on demand."""

    config_dir: Path
    template_path: Path

    def __post_init__(self) -> None:
        self.config_dir = Path(self.config_dir)
        self.template_path = Path(self.template_path)

    def config_path(self, session_name: str) -> Path:
        return self.config_dir / f"{session_name}.yaml"

    def ensure_config(self, session_name: str, project_dir: Path) -> None:
        """Write the session file unless it already exists."""
        path = self.config_path(session_name)
        if path.exists():
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        if self.template_path.exists():
            template = self.template_path.read_text(encoding="utf-8")
            cfg = SessionConfig.from_template(template, session_name, project_dir)
        else:
            cfg = SessionConfig.builtin(session_name, project_dir)
        path.write_text(cfg.content, encoding="utf-8")

    def start(self, session_name: str, project_dir: Path) -> None:
        self.ensure_config(session_name, project_dir)
        result = subprocess.run(
            ["laio", "start", "--file", str(self.config_path(session_name)), "--skip-attach"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        if result.returncode != 0:
            raise LaioError(f"laio start failed for '{session_name}'")

    def prepare_for_edit(self, session_name: str, project_dir: Path) -> Path:
        self.ensure_config(session_name, project_dir)
        return self.config_path(session_name)