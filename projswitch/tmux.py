"""tmux as the terminal multiplexer."""

from __future__ import annotations

import os
import re
import subprocess
from typing import Optional, Union

from .domain import Session, Window
from .ports import Multiplexer

_U32 = re.compile(r"\+?[0-9]+")


class TmuxError(RuntimeError):
    """A tmux command failed."""


def _text(output: Union[bytes, str]) -> str:
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def _parse_u32(s: str) -> Optional[int]:
    if not _U32.fullmatch(s):
        return None
    value = int(s)
    return value if value < 2**32 else None


def _window(parts: list[str]) -> Optional[Window]:
    if len(parts) < 3:
        return None
    index = _parse_u32(parts[0])
    if index is None:
        return None
    return Window(index, parts[1], parts[2] == "1")


def parse_windows(output: Union[bytes, str]) -> list[Window]:
    """Parse lines of 'index<TAB>name<TAB>active', skipping malformed ones."""
    windows = (_window(line.split("\t", 2)) for line in _lines(_text(output)))
    return [w for w in windows if w is not None]


def parse_sessions(output: Union[bytes, str]) -> list[Session]:
    """Parse lines of 'session<TAB>index<TAB>name<TAB>active' in first-seen order."""
    sessions: dict[str, list[Window]] = {}
    for line in _lines(_text(output)):
        name, *rest = line.split("\t", 3)
        windows = sessions.setdefault(name, [])
        window = _window(rest)
        if window is not None:
            windows.append(window)
    return [Session(name, windows) for name, windows in sessions.items()]


def _capture(args: list[str]) -> Optional[bytes]:
    try:
        result = subprocess.run(
            args, stdin=subprocess.DEVNULL, capture_output=True, check=False
        )
    except OSError:
        return None
    return result.stdout if result.returncode == 0 else None


class TmuxAdapter(Multiplexer):
    """Sessions and navigation through the tmux command."""

    def is_in_session(self) -> bool:
        return "TMUX" in os.environ

    def _client_command(self, command: str, name: str) -> None:
        result = subprocess.run(["tmux", command, "-t", name], check=False)
        if result.returncode != 0:
            raise TmuxError(f"tmux {command} failed for '{name}'")

    def switch_to(self, name: str) -> None:
        self._client_command("switch-client", name)

    def attach_to(self, name: str) -> None:
        self._client_command("attach-session", name)

    def on_session_started(self, name: str) -> None:
        # Visit shell then code so tmux's last-window points at the shell.
        for window in ("shell", "code"):
            try:
                subprocess.run(["tmux", "select-window", "-t", f"{name}:{window}"], check=False)
            except OSError:
                pass

    def all(self) -> list[Session]:
        out = _capture(
            ["tmux", "list-windows", "-a", "-F", "#{session_name}\t#I\t#W\t#{window_active}"]
        )
        return [] if out is None else parse_sessions(out)

    def find(self, name: str) -> Optional[Session]:
        out = _capture(["tmux", "list-windows", "-t", name, "-F", "#I\t#W\t#{window_active}"])
        if out is None:
            return None
        return Session(name, parse_windows(out))