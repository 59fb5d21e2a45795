"""Command-line argument handling."""

from __future__ import annotations

from typing import Iterable

EDIT_FLAGS = frozenset({"-e", "--edit"})


def parse_args(args: Iterable[str]) -> tuple[bool, str]:
    """Return (edit mode, query); the last non-flag argument is the query."""
    edit = False
    query = ""
    for arg in args:
        if arg in EDIT_FLAGS:
            edit = True
        else:
            query = arg
    return edit, query