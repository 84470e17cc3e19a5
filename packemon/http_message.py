"""Minimal HTTP/1.1 requests and responses as carried in TCP segments."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

PORT_HTTP = 80
PORT_HTTPS = 443

CRLF = b"\r\n"

_log = logging.getLogger(__name__)

_INTEGER = re.compile(rb"[+-]?[0-9]+")


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


def _rune_bytes(value: int) -> bytes:
    """UTF-8 encoding of ``value`` as a code point; invalid ones become U+FFFD."""
    if value < 0 or value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        value = 0xFFFD
    return chr(value).encode("utf-8")


@dataclass
class HTTP:
    """An HTTP request."""

    method: str = ""
    uri: str = ""
    version: str = ""
    host: str = ""
    user_agent: str = ""
    accept: str = ""
    content_length: str = ""
    body: str = ""

    def __bytes__(self) -> bytes:
        text = (
            f"{self.method} {self.uri} {self.version}\r\n"
            f"Host: {self.host}\r\n"
            f"User-Agent: {self.user_agent}\r\n"
            f"Accept: {self.accept}\r\n"
            "\r\n"
        )
        return text.encode("utf-8")


def new_http() -> HTTP:
    """A GET request for ``/``."""
    return HTTP(
        method="GET",
        uri="/",
        version="HTTP/1.1",
        host="192.168.10.110",
        user_agent="packemon/0.0.1",
        accept="*/*",
    )


def parse_http_request(data: bytes) -> HTTP:
    """Read the request line and, if present, the Host header that follows it."""
    data = bytes(data)
    line_end = data.find(CRLF)
    if line_end == -1:
        raise ValueError("HTTP request line is not terminated by CRLF")
    parts = data[:line_end].split(b" ")
    if len(parts) < 3:
        raise ValueError("HTTP request line needs a method, a URI and a version")
    request = HTTP(method=_text(parts[0]), uri=_text(parts[1]), version=_text(parts[2]))

    rest = data[line_end + 2:]
    host_end = rest.find(CRLF)
    if host_end == -1:
        return request
    host_line = rest[:host_end]
    if host_line.startswith(b"Host:"):
        host_line = host_line[len(b"Host:"):]
    request.host = _text(host_line).strip()
    return request


@dataclass
class HTTPResponseHeader:
    """The response headers that are understood."""

    date: str = ""
    content_length: int = 0
    content_type: str = ""

    def __bytes__(self) -> bytes:
        """The date, the content length as one code point, and the content type, unseparated."""
        return (
            self.date.encode("utf-8")
            + _rune_bytes(self.content_length)
            + self.content_type.encode("utf-8")
        )


@dataclass
class HTTPResponse:
    """An HTTP response; ``len()`` gives the bytes it occupied on the wire."""

    status_line: str = ""
    header: HTTPResponseHeader = field(default_factory=HTTPResponseHeader)
    body: bytes = b""
    wire_length: int = field(default=0, repr=False)

    def __bytes__(self) -> bytes:
        return self.status_line.encode("utf-8") + bytes(self.header) + bytes(self.body)

    def __len__(self) -> int:
        return self.wire_length


def parse_http_response(data: bytes) -> HTTPResponse:
    """Parse a response, ignoring trailing bytes after the declared body.

    The computed length counts every CRLF, the status line, the recognised
    header lines and the body, so padding after the message is left out.
    """
    data = bytes(data)
    header = HTTPResponseHeader()
    status_line = ""
    length = data.count(CRLF) * 2

    for index, line in enumerate(data.split(CRLF)):
        if index == 0:
            status_line = _text(line)
            length += len(line)
            continue
        if b"Date: " in line:
            length += len(line)
            header.date = _text(line.removeprefix(b"Date: "))
            continue
        if b"Content-Length: " in line:
            length += len(line)
            value = line.removeprefix(b"Content-Length: ")
            if _INTEGER.fullmatch(value):
                header.content_length = int(value)
            else:
                _log.warning("invalid Content-Length: %r", value)
                header.content_length = 0
            continue
        if b"Content-Type: " in line:
            length += len(line)
            header.content_type = _text(line.removeprefix(b"Content-Type: "))
            continue

    separator = CRLF + CRLF
    body_start = data.rfind(separator)
    tail = data if body_start == -1 else data[body_start + len(separator):]
    if header.content_length < 0 or header.content_length > len(tail):
        raise ValueError(
            f"HTTP body has {len(tail)} bytes, Content-Length says {header.content_length}"
        )
    body = tail[:header.content_length]
    length += header.content_length

    return HTTPResponse(status_line=status_line, header=header, body=body, wire_length=length)