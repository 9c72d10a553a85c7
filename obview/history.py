"""Recently opened file list, stored one path per line."""

from __future__ import annotations

import re
from pathlib import Path

HISTORY_COUNT_MAX = 20

_LINE_BREAK_RE = re.compile(r"[\r\n]")


class FileHistory:
    """Most recently used files, newest first."""

    def __init__(self, fname=None) -> None:
        self.fname = fname
        self.entries: list[str] = []

    @property
    def count(self) -> int:
        return len(self.entries)

    def load(self) -> int:
        """Read up to the maximum number of entries; return how many were read."""
        if not self.fname:
            raise ValueError("no history file name set")
        self.entries = []
        try:
            handle = open(self.fname, encoding="utf-8", errors="surrogateescape", newline="\n")
        except OSError:
            return 0
        with handle:
            for line in handle:
                if len(self.entries) >= HISTORY_COUNT_MAX:
                    break
                self.entries.append(_LINE_BREAK_RE.split(line, maxsplit=1)[0])
        return self.count

    def prepend_save(self, newfile) -> None:
        """Put ``newfile`` first, drop its older duplicates, save and reload."""
        if not self.fname:
            return
        lines = [newfile] + [entry for entry in self.entries if entry != newfile]
        Path(self.fname).write_text(
            "".join(f"{line}\n" for line in lines),
            encoding="utf-8",
            errors="surrogateescape",
        )
        self.load()


def trim_filename(path, stops):
    """Return the tail of ``path`` holding its last ``stops`` components."""
    if not path:
        return path
    pos = len(path) - 1
    while stops and pos > 0:
        if path[pos] in "/\\":
            stops -= 1
        pos -= 1
    if not stops:
        pos += 2
    return path[pos:]