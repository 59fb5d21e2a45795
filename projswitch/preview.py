"""The preview pane: session status, tech stack, readme or directory listing."""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .colors import BLD, BLU, DIM, GRN, MVE, PCH, RST, SKY, SUB, YEL
from .domain import Lang
from .ports import MarkdownRenderer

README_NAMES = ("README.md", "readme.md", "README")

_LANG_COLORS = {
    "Nix": SKY,
    "Go": SKY,
    "Rust": PCH,
    "Java": PCH,
    "Ruby": PCH,
    "TypeScript": BLU,
    "Docker": BLU,
    "Node": GRN,
    "Python": YEL,
    "PHP": MVE,
}


@dataclass(frozen=True)
class WindowView:
    index: int
    name: str
    active: bool


@dataclass(frozen=True)
class TechItem:
    icon: str
    name: str
    color: str


def lang_color(name: str) -> str:
    return _LANG_COLORS.get(name, DIM)


def from_langs(langs: Iterable[Lang]) -> list[TechItem]:
    return [TechItem(lang.icon, lang.name, lang_color(lang.name)) for lang in langs]


def render_session_status(
    header: Optional[str], windows: Optional[Sequence[WindowView]]
) -> None:
    """Print the session header and its windows, or a dimmed closed marker."""
    if windows is None:
        if header is not None:
            print(f"{DIM}○ {header}{RST}")
        return
    if header is not None:
        print(f"{GRN}●{RST} {BLD}{header}{RST}")
    for w in windows:
        if w.active:
            print(f"{BLU}{w.index}: {w.name} ◀{RST}")
        else:
            print(f"{SUB}{w.index}: {w.name}{RST}")


def render_tech_stack(items: Sequence[TechItem]) -> None:
    if not items:
        return
    rendered = (f"{item.color}{item.icon} {item.name}{RST}" for item in items)
    print()
    print("  " + "  ".join(rendered))


def render_readme(path: Path, renderer: MarkdownRenderer, width: int) -> bool:
    """Render the first readme found in path; False if there is none."""
    for name in README_NAMES:
        readme = Path(path) / name
        if readme.exists():
            print()
            sys.stdout.flush()
            renderer.render(str(readme), width)
            return True
    return False


def render_directory(path_str: str) -> None:
    print()
    sys.stdout.flush()
    try:
        subprocess.run(
            ["ls", "--group-directories-first", "--color=always", path_str], check=False
        )
    except OSError:
        pass


def render(
    path_str: str,
    windows: Optional[Sequence[WindowView]],
    tech_items: Sequence[TechItem],
    renderer: MarkdownRenderer,
    header: Optional[str],
    width: int,
) -> None:
    render_session_status(header, windows)
    if not path_str:
        return
    render_tech_stack(tech_items)
    if not render_readme(Path(path_str), renderer, width):
        render_directory(path_str)