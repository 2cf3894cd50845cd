"""Command line entry point: accept connections and log each request line."""

from __future__ import annotations

import sys
from typing import Sequence

from tinyhttpd.argument_parser import ArgumentParser
from tinyhttpd.http_parser import HttpParseError, HttpRequest, HttpStartLine, parse_request
from tinyhttpd.logger import log_error, log_info
from tinyhttpd.tcp_socket import TcpSocket

LISTEN_ADDRESS = "127.0.0.1"
LISTEN_PORT = 9090


def format_start_line(start_line: HttpStartLine) -> str:
    """Render a start line as a multi-line description."""
    return (
        "HttpStartLine\n"
        f"    Method: {int(start_line.method)} ({start_line.method_name})\n"
        f"    path: {start_line.path}\n"
        f"    httpVersion: {start_line.http_version}\n"
    )


def build_argument_parser() -> ArgumentParser:
    """Return a parser knowing the ``-p/--port`` and ``-fp/--file-path`` flags."""
    parser = ArgumentParser()
    parser.add_argument("p", "port")
    parser.add_argument("fp", "file-path")
    return parser


def _serve_once(tcp_socket: TcpSocket) -> HttpRequest:
    """Accept one connection, read and parse its request, and log its start line."""
    tcp_socket.accept()
    request = parse_request(tcp_socket.receive_request())
    start_line = request.start_line
    log_info(
        "Method: %s | Path: %s | Version: %s",
        start_line.method_name,
        start_line.path,
        start_line.http_version,
    )
    return request


def main(argv: Sequence[str] | None = None) -> None:
    """Parse flags, then serve requests forever."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_argument_parser()
    parser.parse_arguments(argv)

    file_path = parser.get_str("fp")
    port = parser.get_int("p")
    log_info("Running on port %d and file path: %s", port, file_path)

    with TcpSocket(LISTEN_ADDRESS, LISTEN_PORT) as tcp_socket:
        tcp_socket.bind()
        tcp_socket.listen()
        while True:
            try:
                _serve_once(tcp_socket)
            except HttpParseError as exc:
                log_error("Bad request: %s", str(exc))


if __name__ == "__main__":
    main()