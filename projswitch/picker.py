"""Shared picker pieces: coloured display lines and the metadata file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping, Optional, Sequence

from .colors import BLU, DIM, GRN, MVE, PCH, RST, SKY, YEL
from .domain import Project, session_name_from_project
from .ports import PickEntry

CATEGORY_PALETTE = (BLU, GRN, MVE, PCH, YEL, SKY)


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def build_category_colors(projects: Iterable[Project]) -> dict[str, str]:
    """Give each distinct category, in sorted order, a colour from the palette."""
    categories = sorted({p.repo.category.name for p in projects})
    return {
        cat: CATEGORY_PALETTE[i % len(CATEGORY_PALETTE)] for i, cat in enumerate(categories)
    }


def format_ansi(project: Project, cat_colors: Mapping[str, str]) -> str:
    """The coloured list line: category initial, then the name with a dimmed group."""
    col = cat_colors.get(project.repo.category.name, DIM)
    label = project.repo.category.initial()
    name = project.repo.name.display
    prefix, sep, suffix = name.partition("/")
    if sep:
        return f"{col}{label}{RST}  {DIM}{prefix}/{RST}{suffix}"
    return f"{col}{label}{RST}  {name}"


def to_pick_entry(project: Project, cat_colors: Mapping[str, str]) -> PickEntry:
    return PickEntry(
        display=format_ansi(project, cat_colors),
        session_name=session_name_from_project(project.repo.name.display),
        path=str(project.repo.path),
    )


def write_meta(path: Path, open: Sequence[PickEntry], closed: Sequence[PickEntry]) -> None:
    """Write 'session<TAB>path<TAB>open-flag' lines, open entries first."""
    lines = [f"{e.session_name}\t{e.path}\t1" for e in open]
    lines += [f"{e.session_name}\t{e.path}\t0" for e in closed]
    Path(path).write_text("\n".join(lines), encoding="utf-8")


def resolve_meta(meta_path: str, index: int) -> Optional[tuple[str, str, bool]]:
    """Read line `index` of a metadata file as (session name, path, is open)."""
    try:
        text = Path(meta_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError, ValueError):
        return None
    lines = _lines(text)
    if index < 0 or index >= len(lines):
        return None
    parts = lines[index].split("\t", 2)
    if len(parts) < 2:
        return None
    is_open = len(parts) > 2 and parts[2] == "1"
    return parts[0], parts[1], is_open