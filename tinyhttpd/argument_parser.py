"""Minimal named-flag command line parser."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Sequence

from tinyhttpd.logger import log_error

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class ArgumentError(ValueError):
    """Raised when command line arguments cannot be parsed or converted."""


@dataclass
class CommandLineArgument:
    """A flag known by a short name (``-p``) and a long name (``--port``)."""

    short_name: str
    long_name: str
    data: str = field(default="")

    def matches(self, argument: str) -> bool:
        """Return True if ``argument`` names this flag in short or long form."""
        if len(argument) > 2 and argument.startswith("--") and argument[2:] == self.long_name:
            return True
        return len(argument) > 1 and argument.startswith("-") and argument[1:] == self.short_name

    def has_name(self, name: str) -> bool:
        return name in (self.short_name, self.long_name)


class ArgumentParser:
    """Parses ``flag value`` pairs into registered arguments."""

    def __init__(self) -> None:
        self._arguments: list[CommandLineArgument] = []

    def add_argument(self, short_name: str, long_name: str) -> None:
        """Register a flag by its short and long names."""
        self._arguments.append(CommandLineArgument(short_name, long_name))

    def parse_arguments(self, argv: Sequence[str]) -> None:
        """Parse flag/value pairs; ``argv`` excludes the program name."""
        argv = list(argv)
        if len(argv) % 2 != 0:
            raise ArgumentError(
                f"Uneven amount of arguments: {len(argv)} in '{' '.join(argv)}'"
            )

        pairs = iter(argv)
        for flag, value in zip(pairs, pairs):
            argument = next((a for a in self._arguments if a.matches(flag)), None)
            if argument is None:
                log_error("Unrecognized flag: %s", flag)
                raise ArgumentError(f"Unrecognized flag: {flag}")
            argument.data = value

    def _find(self, name: str) -> CommandLineArgument | None:
        return next((a for a in self._arguments if a.has_name(name)), None)

    def get_str(self, name: str) -> str:
        """Return the raw value of a flag, or "" if it is unknown or unset."""
        argument = self._find(name)
        return argument.data if argument is not None else ""

    def get_int(self, name: str) -> int:
        """Return a flag's value as an int: 0 if unset, 1 if the name is unknown."""
        argument = self._find(name)
        if argument is None:
            return 1
        if argument.data == "":
            return 0
        match = _INT_PREFIX.match(argument.data)
        value = int(match.group(1)) if match else None
        if value is None or not _INT32_MIN <= value <= _INT32_MAX:
            log_error("Cannot convert %s to int", argument.data)
            raise ArgumentError(f"Cannot convert {argument.data} to int")
        return value

    def get_float(self, name: str) -> float:
        """Return a flag's value as a float: 0.0 if unset, 1.0 if the name is unknown."""
        argument = self._find(name)
        if argument is None:
            return 1.0
        if argument.data == "":
            return 0.0
        match = _FLOAT_PREFIX.match(argument.data)
        if match is None:
            log_error("Cannot convert %s to float", argument.data)
            raise ArgumentError(f"Cannot convert {argument.data} to float")
        return float(match.group(1))