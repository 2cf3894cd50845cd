"""Parsing of HTTP/1.x request heads."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum

from tinyhttpd.string_utils import split_line_on_delimiter

# A carriage return ends a line; the character after it (normally "\n") is dropped.
_LINE_BREAK = re.compile(r"\r.?", re.DOTALL)


class HttpParseError(ValueError):
    """Raised when a request cannot be parsed."""


class HttpMethod(IntEnum):
    GET = 0
    HEAD = 1
    POST = 2
    PUT = 3
    DELETE = 4
    CONNECT = 5
    OPTIONS = 6
    TRACE = 7
    PATCH = 8


@dataclass(frozen=True)
class HttpStartLine:
    """The request line: method, target path and protocol version."""

    method: HttpMethod
    method_name: str
    path: str
    http_version: str


@dataclass(frozen=True)
class HttpHeader:
    """A single ``name: value`` header."""

    name: str
    value: str


@dataclass
class HttpRequest:
    """A parsed request: start line, headers and the body lines after the blank line."""

    start_line: HttpStartLine
    headers: list[HttpHeader] = field(default_factory=list)
    body: list[str] = field(default_factory=list)


def parse_start_line(line: str) -> HttpStartLine:
    """Parse ``METHOD PATH VERSION``."""
    elements = split_line_on_delimiter(line, " ")
    if len(elements) != 3:
        raise HttpParseError(
            f"Start line must have 3 elements, got {len(elements)}: {line!r}"
        )
    method_name, path, http_version = elements
    try:
        method = HttpMethod[method_name]
    except KeyError:
        raise HttpParseError(f"Unrecognized http method: {method_name}") from None
    return HttpStartLine(method, method_name, path, http_version)


def parse_header(line: str) -> HttpHeader:
    """Parse ``<header-name>: <header-value>``."""
    name, colon, rest = line.partition(":")
    if not colon:
        raise HttpParseError(f"Header line has no colon: {line!r}")
    return HttpHeader(name, rest[1:])


def parse_request(data: bytes | bytearray) -> HttpRequest:
    """Parse raw request bytes into a start line, headers and body lines."""
    lines = _LINE_BREAK.split(bytes(data).decode("latin-1"))
    request = HttpRequest(parse_start_line(lines[0]))

    in_body = False
    for line in lines[1:]:
        if in_body:
            request.body.append(line)
        elif line == "":
            in_body = True
        else:
            request.headers.append(parse_header(line))
    return request