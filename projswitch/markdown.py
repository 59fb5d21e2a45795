"""Markdown renderers that shell out to bat or glow."""

from __future__ import annotations

import os
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import palette
from .ports import MarkdownRenderer

_STYLE_SLOTS = (1, 2, 3, 4, 5, 6, 7, 9)


def _run_quietly(args: list[str], env: Optional[dict[str, str]] = None) -> None:
    try:
        subprocess.run(args, env=env, check=False)
    except OSError:
        pass


class BatRenderer(MarkdownRenderer):
    """Renders markdown with bat's syntax highlighting."""

    def command(self, path: str, width: int) -> list[str]:
        return [
            "bat",
            "--language=markdown",
            "--color=always",
            "--style=plain",
            "--paging=never",
            f"--terminal-width={width}",
            path,
        ]

    def render(self, path: str, width: int) -> None:
        _run_quietly(self.command(path, width))


def _generate_style(template: str, colours: palette.Palette) -> str:
    for i in _STYLE_SLOTS:
        template = template.replace(f"%C{i}%", colours[i])
    return template


@dataclass
class GlowRenderer(MarkdownRenderer):
    """Renders markdown with glow.

    With style 'auto' and a style template, a style matching the terminal
    palette is generated; without a template glow chooses its own.
    """

    style: str = "auto"
    template: Optional[str] = None

    def _style_arg(self) -> str:
        if self.style != "auto" or self.template is None:
            return self.style
        json = _generate_style(self.template, palette.detect())
        style_path = Path(tempfile.gettempdir()) / f"glow-style-{os.getpid()}.json"
        try:
            style_path.write_text(json, encoding="utf-8")
        except OSError:
            pass
        return str(style_path)

    def command(self, path: str, width: int) -> list[str]:
        return ["glow", "--style", self._style_arg(), "--width", str(width), path]

    def render(self, path: str, width: int) -> None:
        _run_quietly(self.command(path, width), env={**os.environ, "CLICOLOR_FORCE": "1"})