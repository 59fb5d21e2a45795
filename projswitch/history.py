"""Usage history kept as a plain text file, one session name per line."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from pathlib import Path

from .ports import UsageReader, UsageRecorder

MAX_ENTRIES = 1000


@dataclass
class FileUsageStore(UsageReader, UsageRecorder):
    history_path: Path

    def __post_init__(self) -> None:
        self.history_path = Path(self.history_path)

    def record(self, session_name: str) -> None:
        """Append a session name, keeping at most MAX_ENTRIES lines."""
        self.history_path.parent.mkdir(parents=True, exist_ok=True)
        entries = self._read_entries()
        entries.append(session_name)
        if len(entries) > MAX_ENTRIES:
            kept = entries[-MAX_ENTRIES:]
            self.history_path.write_text("\n".join(kept) + "\n", encoding="utf-8")
        else:
            with self.history_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{session_name}\n")

    def frequencies(self) -> dict[str, int]:
        return dict(Counter(self._read_entries()))

    def _read_entries(self) -> list[str]:
        if not self.history_path.exists():
            return []
        entries: list[str] = []
        for raw in self.history_path.read_bytes().split(b"\n"):
            if raw.endswith(b"\r"):
                raw = raw[:-1]
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                break
            if line:
                entries.append(line)
        return entries