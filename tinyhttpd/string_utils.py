"""String helpers."""

from __future__ import annotations


def split_line_on_delimiter(line: str, delim: str, times: int = 0) -> list[str]:
    """Split ``line`` on ``delim`` at most ``times`` times (0 means every occurrence).

    After a split, the search for the next delimiter starts one character past
    the start of the remaining text, and an empty trailing piece is dropped.
    """
    elements: list[str] = []
    current = 0
    splits = 0
    position = line.find(delim)

    while position != -1 and (times == 0 or splits < times):
        elements.append(line[current:position])
        current = position + 1
        splits += 1
        position = line.find(delim, current + 1)

    if current < len(line):
        elements.append(line[current:])

    return elements