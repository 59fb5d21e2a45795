"""Project picker driven by fzf."""

from __future__ import annotations

import os
import re
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from .colors import DIM, RST
from .domain import Project
from .picker import build_category_colors, to_pick_entry, write_meta
from .ports import PickEntry, ProjectPicker

COLOR_ARG = (
    "--color=bg+:8,gutter:0,hl:1,hl+:1,pointer:15,marker:2,"
    "prompt:5,info:7,border:8,separator:8"
)
SEPARATOR = f"{DIM}{'─' * 300}{RST}"

_USIZE = re.compile(r"\+?[0-9]+")


def build_lines(
    open_entries: Sequence[PickEntry], closed_entries: Sequence[PickEntry]
) -> list[str]:
    """Lines fed to fzf: 'display<TAB>index', with a separator between the groups."""
    lines = [f"{e.display}\t{i}" for i, e in enumerate(open_entries)]
    if open_entries and closed_entries:
        lines.append(f"{SEPARATOR}\t")
    n_open = len(open_entries)
    lines += [f"{e.display}\t{n_open + i}" for i, e in enumerate(closed_entries)]
    return lines


def build_args(query: str, preview_cmd: Optional[str], meta_path: str) -> list[str]:
    args = [
        "--ansi",
        "--delimiter=\t",
        "--with-nth=1",
        f"--query={query}",
        COLOR_ARG,
        "--border=rounded",
        "--layout=reverse",
        "--info=inline",
        "--prompt=  ",
    ]
    if preview_cmd is not None:
        args.append(f"--preview={preview_cmd} --show-name {meta_path} {{2}}")
        args.append("--preview-window=right:50%:border-left:wrap")
    return args


def parse_selection(output: Union[bytes, str]) -> Optional[int]:
    """The index after the last tab of fzf's output, or None."""
    if isinstance(output, bytes):
        output = output.decode("utf-8", errors="replace")
    if not output:
        return None
    _, sep, tail = output.rstrip("\n").rpartition("\t")
    if not sep:
        return None
    tail = tail.strip()
    return int(tail) if _USIZE.fullmatch(tail) else None


@dataclass
class FzfProjectPicker(ProjectPicker):
    preview_cmd: Optional[str] = None

    def pick(
        self, open: Sequence[Project], closed: Sequence[Project], query: str
    ) -> Optional[int]:
        colors = build_category_colors([*open, *closed])
        open_entries = [to_pick_entry(p, colors) for p in open]
        closed_entries = [to_pick_entry(p, colors) for p in closed]

        meta_path = Path(tempfile.gettempdir()) / f"project-fzf-meta-{os.getpid()}"
        write_meta(meta_path, open_entries, closed_entries)
        try:
            lines = build_lines(open_entries, closed_entries)
            result = subprocess.run(
                ["fzf", *build_args(query, self.preview_cmd, str(meta_path))],
                input="".join(f"{line}\n" for line in lines).encode("utf-8"),
                stdout=subprocess.PIPE,
                check=False,
            )
        finally:
            meta_path.unlink(missing_ok=True)
        return parse_selection(result.stdout)