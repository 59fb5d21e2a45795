"""Configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional


class ConfigError(Exception):
    """The environment lacks something the configuration needs."""


class MarkdownBackend(Enum):
    GLOW = "glow"
    BAT = "bat"


class LauncherBackend(Enum):
    LAIO = "laio"


class MultiplexerBackend(Enum):
    TMUX = "tmux"


class PickerBackend(Enum):
    FZF = "fzf"
    TV = "tv"


@dataclass(frozen=True)
class Config:
    history_path: Path
    laio_config_dir: Path
    projects_dir: Path
    template_path: Path
    markdown_backend: MarkdownBackend
    launcher_backend: LauncherBackend
    multiplexer_backend: MultiplexerBackend
    picker_backend: PickerBackend
    glow_style: str

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """Build the configuration from env (default: the process environment)."""
        if env is None:
            env = os.environ
        if "HOME" not in env:
            raise ConfigError("environment variable HOME is not set")
        home = Path(env["HOME"])

        def path_var(name: str, default: Path) -> Path:
            return Path(env[name]) if name in env else default

        data_home = path_var("XDG_DATA_HOME", home / ".local/share")
        config_home = path_var("XDG_CONFIG_HOME", home / ".config")
        projects_dir = path_var("PROJECT_DIR", home / "Projects")

        markdown = (
            MarkdownBackend.BAT
            if env.get("PROJECT_MARKDOWN_RENDERER", "glow") == "bat"
            else MarkdownBackend.GLOW
        )
        picker = (
            PickerBackend.TV if env.get("PROJECT_PICKER", "fzf") == "tv" else PickerBackend.FZF
        )

        return cls(
            history_path=data_home / "project/history",
            laio_config_dir=config_home / "laio",
            projects_dir=projects_dir,
            template_path=config_home / "project/template.yaml",
            markdown_backend=markdown,
            launcher_backend=LauncherBackend.LAIO,
            multiplexer_backend=MultiplexerBackend.TMUX,
            picker_backend=picker,
            glow_style=env.get("PROJECT_GLOW_STYLE", "auto"),
        )