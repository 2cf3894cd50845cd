"""Console logging with the caller's file name and line number."""

from __future__ import annotations

import inspect
import re
import sys

_PATH_SEPARATORS = re.compile(r"[/\\]")


def _file_name_only(path: str) -> str:
    """Return the last component of a path, splitting on both slash kinds."""
    return _PATH_SEPARATORS.split(path)[-1]


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


def _emit(prefix: str, message: str, args: tuple) -> None:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame is not None and frame.f_back else None
    try:
        if caller is not None:
            location_file = _file_name_only(caller.f_code.co_filename)
            line_number = caller.f_lineno
        else:
            location_file, line_number = "?", 0
    finally:
        del frame, caller
    sys.stdout.write(prefix(location_file, line_number) + _format(message, args) + "\n")


def log_info(message: str, *args: object) -> None:
    """Print an informational line, formatting ``message`` printf-style with ``args``."""
    _emit(lambda name, line: f"[INFO] {name}:{line} ", message, args)


def log_error(message: str, *args: object) -> None:
    """Print an error line, formatting ``message`` printf-style with ``args``."""
    _emit(lambda name, line: f"[ERROR] {name}: {line} ", message, args)