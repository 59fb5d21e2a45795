"""The terminal's 16-colour palette, from the environment, kitty or a fallback."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping, Optional

Palette = tuple[str, ...]

STANDARD: Palette = (
    "#000000", "#800000", "#008000", "#808000", "#000080", "#800080", "#008080", "#c0c0c0",
    "#808080", "#ff0000", "#00ff00", "#ffff00", "#0000ff", "#ff00ff", "#00ffff", "#ffffff",
)

_KITTY_FILES = ("current-theme.conf", "kitty.conf")
_WS = re.compile(r"\s")
_INDEX = re.compile(r"\+?[0-9]+")


def normalize(s: str) -> str:
    """Trim a colour and make sure it starts with '#'."""
    s = s.strip()
    return s if s.startswith("#") else f"#{s}"


def standard() -> Palette:
    return STANDARD


def from_env(env: Optional[Mapping[str, str]] = None) -> Optional[Palette]:
    """Palette from PROJECT_PALETTE, a comma-separated list of at least 16 colours."""
    env = os.environ if env is None else env
    value = env.get("PROJECT_PALETTE")
    if value is None:
        return None
    parts = value.split(",")
    if len(parts) < 16:
        return None
    return tuple(normalize(p) for p in parts[:16])


def parse_kitty(content: str) -> Optional[Palette]:
    """Palette from kitty config lines 'colorN <hex>'; None unless all 16 are set."""
    found: list[Optional[str]] = [None] * 16
    for raw in content.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#") or not line.startswith("color"):
            continue
        parts = _WS.split(line[len("color"):], maxsplit=1)
        if len(parts) < 2 or not _INDEX.fullmatch(parts[0]):
            continue
        idx = int(parts[0])
        if idx < 16:
            found[idx] = normalize(parts[1])
    if any(c is None for c in found):
        return None
    return tuple(found)  # type: ignore[arg-type]


def detect_kitty(env: Optional[Mapping[str, str]] = None) -> Optional[Palette]:
    """Palette from kitty's theme files when running inside kitty."""
    env = os.environ if env is None else env
    if "KITTY_WINDOW_ID" not in env:
        return None
    config_home = env.get("XDG_CONFIG_HOME") or f"{env.get('HOME', '')}/.config"
    for name in _KITTY_FILES:
        try:
            content = Path(config_home, "kitty", name).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        palette = parse_kitty(content)
        if palette is not None:
            return palette
    return None


def detect(env: Optional[Mapping[str, str]] = None) -> Palette:
    """The first palette found: environment, then kitty, then the standard one."""
    return from_env(env) or detect_kitty(env) or standard()