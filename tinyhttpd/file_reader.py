"""Reading whole text files."""

from __future__ import annotations

import os


def read_file(path: str | os.PathLike[str]) -> str:
    """Return a file's text up to the first NUL character, or "" if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            contents = stream.read()
    except OSError:
        return ""
    return contents.split("\0", 1)[0]