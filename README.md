# tinyhttpd

A small HTTP request listener. It accepts one TCP connection at a time on
`127.0.0.1:9090`, reads the request, sends back a fixed `200 Success`
header block, closes the connection, and logs the request's method, path
and HTTP version.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
tinyhttpd --port 8080 --file-path ./www
```

The same entry point can be started with `python -m tinyhttpd.server`.

Flags come in name/value pairs and each has a short and a long form:

| Short | Long          | Value                       |
|-------|---------------|-----------------------------|
| `-p`  | `--port`      | an integer, logged at start |
| `-fp` | `--file-path` | a path, logged at start     |

An odd number of arguments, a flag that is not recognised, or a port that
is not an integer raises `ArgumentError` and the server does not start.
At start-up the server logs a line such as:

```
[INFO] server.py:NN Running on port 8080 and file path: ./www
```

and then, for every request it reads:

```
[INFO] server.py:NN Method: GET | Path: / | Version: HTTP/1.1
```

A request whose start line or headers cannot be parsed is logged as
`[ERROR] ... Bad request: ...` and the server goes on to the next
connection. Stop it with Ctrl-C.

Every connection is answered with exactly these lines before it is closed:

```
HTTP/1.1 200 Success
Server: Hello
Connection: close
Content-Length: 0
```

## What it does not do

- It does not serve files. `--file-path` is only logged.
- It does not listen on the port given with `--port`; that value is only
  logged. The listening address is always `127.0.0.1:9090`.
- The reply is always the same header block shown above, with no body
  and no closing blank line, whatever was requested.
- Connections are handled one at a time, one request per connection.

## Using the pieces as a library

- `tinyhttpd.http_parser`
  - `parse_request(data)` turns raw request bytes into an `HttpRequest`
    with `start_line` (an `HttpStartLine`), `headers` (a list of
    `HttpHeader`) and `body` (the lines after the first blank line).
  - `parse_start_line(line)` parses `METHOD PATH VERSION` into an
    `HttpStartLine` with `method` (an `HttpMethod`), `method_name`,
    `path` and `http_version`.
  - `parse_header(line)` parses `name: value` into an `HttpHeader` with
    `name` and `value`.
  - An unknown method, a start line without exactly three parts, or a
    header line without a colon raises `HttpParseError`.
- `tinyhttpd.argument_parser`: `ArgumentParser` with `add_argument(short_name,
  long_name)`, `parse_arguments(argv)` (without the program name),
  `get_str`, `get_int` and `get_float`. A flag that was registered but not
  given reads as `""`, `0` or `0.0`; a name that was never registered reads
  as `""`, `1` or `1.0`. Values that cannot be converted, and ints outside
  the signed 32-bit range, raise `ArgumentError`.
- `tinyhttpd.string_utils`: `split_line_on_delimiter(line, delim, times=0)`
  splits a line on a single character at most `times` times (`0` means no
  limit) and drops an empty trailing piece.
- `tinyhttpd.file_reader`: `read_file(path)` returns a file's text up to
  its first NUL character, or `""` if the file cannot be opened.
- `tinyhttpd.tcp_socket`: `TcpSocket(ip_address, port_number)`, a listening
  socket with `bind`, `listen`, `accept`, `receive_request` and `close`;
  it is also a context manager, and `address` gives the bound address.
- `tinyhttpd.logger`: `log_info` and `log_error` print printf-style lines
  to standard output, tagged with the calling file name and line number.
- `tinyhttpd.server`: `main`, `build_argument_parser` and
  `format_start_line`.

```python
from tinyhttpd.http_parser import parse_request
from tinyhttpd.string_utils import split_line_on_delimiter

split_line_on_delimiter("hello world lets go", " ", 1)
# ['hello', 'world lets go']

request = parse_request(b"GET / HTTP/1.1\r\nHost: localhost:8080\r\n\r\n")
request.start_line.path        # '/'
request.headers[0].value       # 'localhost:8080'
```