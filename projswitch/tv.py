"""Project picker driven by television (tv)."""

from __future__ import annotations

import os
import re
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from .domain import Project
from .picker import build_category_colors, to_pick_entry
from .ports import PickEntry, ProjectPicker

FIELD_SEP = "║"
PAD = 250
SEPARATOR = f"\x1b[2m{'─' * 300}\x1b[0m{FIELD_SEP}{' ' * PAD}{FIELD_SEP}"

_USIZE = re.compile(r"\+?[0-9]+")


def _scan(s: str, keep: bool) -> tuple[str, int]:
    out: list[str] = []
    count = 0
    state = 0
    for c in s:
        if state == 0 and c == "\x1b":
            state = 1
        elif state == 1 and c == "[":
            state = 2
        elif state == 1:
            out += ["\x1b", c]
            count += 2
            state = 0
        elif state == 2:
            if c.isascii() and c.isalpha():
                state = 0
        else:
            out.append(c)
            count += 1
    return ("".join(out) if keep else ""), count


def strip_ansi(s: str) -> str:
    """Remove CSI escape sequences."""
    return _scan(s, keep=True)[0]


def visible_len(s: str) -> int:
    """Number of characters left once CSI escape sequences are removed."""
    return _scan(s, keep=False)[1]


def _after_label(plain: str) -> str:
    raw = plain.encode("utf-8")
    if len(raw) < 3 or (len(raw) > 3 and raw[3] & 0xC0 == 0x80):
        return plain
    return raw[3:].decode("utf-8")


def format_entry(idx: int, entry: PickEntry, pid: int) -> str:
    """'display pad║index pad║plain name║pid'; the pid keeps tv's frecency per run."""
    name = _after_label(strip_ansi(entry.display))
    pre_pad = " " * max(0, PAD - visible_len(entry.display))
    post_pad = " " * PAD
    return f"{entry.display}{pre_pad}{FIELD_SEP}{idx}{post_pad}{FIELD_SEP}{name}{FIELD_SEP}{pid}"


def build_source_lines(
    open_entries: Sequence[PickEntry], closed_entries: Sequence[PickEntry], pid: int
) -> list[str]:
    lines = [format_entry(i, e, pid) for i, e in enumerate(open_entries)]
    if open_entries and closed_entries:
        lines.append(SEPARATOR)
    n_open = len(open_entries)
    lines += [format_entry(n_open + i, e, pid) for i, e in enumerate(closed_entries)]
    return lines


def build_meta_lines(
    open_entries: Sequence[PickEntry], closed_entries: Sequence[PickEntry]
) -> list[str]:
    """'session<TAB>path' per entry, with no separator line."""
    return [f"{e.session_name}\t{e.path}" for e in [*open_entries, *closed_entries]]


@dataclass
class TvProjectPicker(ProjectPicker):
    preview_cmd: Optional[str] = None

    def pick(
        self, open: Sequence[Project], closed: Sequence[Project], query: str
    ) -> Optional[int]:
        colors = build_category_colors([*open, *closed])
        open_entries = [to_pick_entry(p, colors) for p in open]
        closed_entries = [to_pick_entry(p, colors) for p in closed]

        pid = os.getpid()
        tmp_dir = Path(tempfile.gettempdir())
        source_path = tmp_dir / f"project-tv-source-{pid}"
        meta_path = tmp_dir / f"project-tv-meta-{pid}"

        try:
            source_path.write_text(
                "\n".join(build_source_lines(open_entries, closed_entries, pid)),
                encoding="utf-8",
            )
            meta_path.write_text(
                "\n".join(build_meta_lines(open_entries, closed_entries)), encoding="utf-8"
            )
            args = [
                f"--source-command=cat {source_path}",
                "--ansi",
                "--source-output={split:║:1}",
                "--preview-header={split:║:2}",
                "--input-header=project",
                "--no-status-bar",
                f"--input={query}",
            ]
            if self.preview_cmd is not None:
                args.append(f"--preview-command={self.preview_cmd} {meta_path} {{split:║:1}}")
            result = subprocess.run(["tv", *args], stdout=subprocess.PIPE, check=False)
        finally:
            source_path.unlink(missing_ok=True)
            meta_path.unlink(missing_ok=True)

        if not result.stdout:
            return None
        text = result.stdout.decode("utf-8", errors="replace").strip()
        return int(text) if _USIZE.fullmatch(text) else None