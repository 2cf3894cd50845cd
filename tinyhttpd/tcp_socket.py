"""A blocking TCP listener that reads one request per connection."""

from __future__ import annotations

import socket

from tinyhttpd.logger import log_error

MAX_RECEIVE_SIZE = 65536
BACKLOG = 10
REPLY = (
    b"HTTP/1.1 200 Success\r\n"
    b"Server: Hello\r\n"
    b"Connection: close\r\n"
    b"Content-Length: 0\r\n"
)


class TcpSocket:
    """Listening IPv4 TCP socket that answers each request with a fixed reply."""

    def __init__(self, ip_address: str, port_number: int) -> None:
        self.ip_address = ip_address
        self.port_number = port_number
        self._listener: socket.socket | None = None
        self._connection: socket.socket | None = None

    def __enter__(self) -> TcpSocket:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._listener is not None:
            self.close()

    @property
    def address(self) -> tuple[str, int]:
        """The bound (host, port); useful when bound to port 0."""
        if self._listener is None:
            raise OSError("Socket is not bound")
        return self._listener.getsockname()

    def bind(self) -> None:
        """Create the socket and bind it to the configured address and port."""
        listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            listener.bind((self.ip_address, self.port_number))
        except OSError as exc:
            listener.close()
            raise OSError(exc.errno, f"Bind failed: {exc.strerror}") from exc
        self._listener = listener

    def listen(self) -> None:
        """Start listening for connections."""
        if self._listener is None:
            raise OSError("Listen failed: socket is not bound")
        try:
            self._listener.listen(BACKLOG)
        except OSError as exc:
            raise OSError(exc.errno, f"Listen failed: {exc.strerror}") from exc

    def accept(self) -> None:
        """Wait for and accept the next connection."""
        if self._listener is None:
            raise OSError("Accept failed: socket is not bound")
        try:
            self._connection, _ = self._listener.accept()
        except OSError as exc:
            raise OSError(exc.errno, f"Accept failed: {exc.strerror}") from exc

    def receive_request(self) -> bytes:
        """Read the request on the accepted connection, reply and close it."""
        if self._connection is None:
            raise OSError("Receive failed: no accepted connection")
        connection = self._connection
        received = bytearray()
        try:
            while True:
                chunk = connection.recv(MAX_RECEIVE_SIZE)
                received += chunk
                if len(chunk) != MAX_RECEIVE_SIZE:
                    break
        except OSError as exc:
            log_error("Receive failed: %s", exc.strerror or str(exc))
            return bytes(received)

        try:
            connection.sendall(REPLY)
        finally:
            connection.close()
            self._connection = None
        return bytes(received)

    def close(self) -> None:
        """Close the listening socket."""
        if self._listener is None:
            raise OSError("Close failed: socket is not open")
        try:
            self._listener.close()
        except OSError as exc:
            raise OSError(exc.errno, f"Close failed: {exc.strerror}") from exc
        finally:
            self._listener = None