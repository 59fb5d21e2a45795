"""The hidden preview command the pickers call for the highlighted entry."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .filesystem import detect_langs
from .picker import resolve_meta
from .ports import MarkdownRenderer, SessionStore
from .preview import WindowView, from_langs, render

_UINT = re.compile(r"\+?[0-9]+")


def _parse_uint(s: str, limit: int) -> Optional[int]:
    if not _UINT.fullmatch(s):
        return None
    value = int(s)
    return value if value <= limit else None


def preview_width(env: Optional[Mapping[str, str]] = None) -> int:
    """Width from FZF_PREVIEW_COLUMNS, else COLUMNS, else 80; at most 100."""
    env = os.environ if env is None else env
    raw = env.get("FZF_PREVIEW_COLUMNS")
    if raw is None:
        raw = env.get("COLUMNS")
    width = _parse_uint(raw, 0xFFFF) if raw is not None else None
    return min(80 if width is None else width, 100)


def handle(
    args: Sequence[str],
    store: SessionStore,
    renderer: MarkdownRenderer,
    env: Optional[Mapping[str, str]] = None,
) -> None:
    """Print the preview for '[--show-name] <meta file> <index>'."""
    show_name = bool(args) and args[0] == "--show-name"
    offset = int(show_name)
    meta_path = args[offset] if len(args) > offset else ""
    index = _parse_uint(args[1 + offset], 2**64 - 1) if len(args) > 1 + offset else None
    if index is None:
        return

    resolved = resolve_meta(meta_path, index)
    if resolved is None:
        return
    session_name, path, is_open = resolved

    windows = None
    if is_open:
        session = store.find(session_name)
        if session is not None:
            windows = [WindowView(w.index, w.name, w.active) for w in session.windows]

    tech_items = from_langs(detect_langs(Path(path))) if path else []
    render(
        path,
        windows,
        tech_items,
        renderer,
        session_name if show_name else None,
        preview_width(env),
    )