"""Entry point: pick a project and open its multiplexer session."""

from __future__ import annotations

import os
import shlex
import sys
from typing import Mapping, Optional, Sequence

from .cli import parse_args
from .config import Config, ConfigError, MarkdownBackend, PickerBackend
from .filesystem import FilesystemProjectSource
from .fzf import FzfProjectPicker
from .history import FileUsageStore
from .laio import LaioError, LaioSessionStarter
from .markdown import BatRenderer, GlowRenderer
from .ports import MarkdownRenderer, ProjectPicker
from .preview_command import handle
from .tmux import TmuxAdapter, TmuxError
from .tv import TvProjectPicker
from .usecases import edit_config, load_projects, open_project, pick_project

PREVIEW_ARG = "__preview"


def _preview_command() -> Optional[str]:
    if not sys.executable:
        return None
    return f"{shlex.quote(sys.executable)} -m projswitch.app {PREVIEW_ARG}"


def _renderer(cfg: Config) -> MarkdownRenderer:
    if cfg.markdown_backend is MarkdownBackend.BAT:
        return BatRenderer()
    return GlowRenderer(style=cfg.glow_style)


def _picker(cfg: Config, preview_cmd: Optional[str]) -> ProjectPicker:
    if cfg.picker_backend is PickerBackend.TV:
        return TvProjectPicker(preview_cmd)
    return FzfProjectPicker(preview_cmd)


def run(
    argv: Optional[Sequence[str]] = None, env: Optional[Mapping[str, str]] = None
) -> None:
    """Run the program with arguments argv (without the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    env = os.environ if env is None else env
    cfg = Config.from_env(env)
    multiplexer = TmuxAdapter()

    if args and args[0] == PREVIEW_ARG:
        handle(args[1:], multiplexer, _renderer(cfg), env)
        return

    edit_mode, query = parse_args(args)
    source = FilesystemProjectSource(cfg.projects_dir)
    usage = FileUsageStore(cfg.history_path)
    starter = LaioSessionStarter(cfg.laio_config_dir, cfg.template_path)
    picker = _picker(cfg, _preview_command())

    open_projects, closed_projects = load_projects(source, multiplexer, usage)
    project = pick_project(open_projects, closed_projects, picker, query)
    if project is None:
        return
    if edit_mode:
        edit_config(project, starter)
        return
    open_project(project, usage, multiplexer, starter, multiplexer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run and report errors on stderr; returns the exit status."""
    try:
        run(argv)
    except (ConfigError, LaioError, TmuxError, OSError) as exc:
        print(f"project: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())