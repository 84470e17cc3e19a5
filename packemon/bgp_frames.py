"""Ready-made BGP messages kept as raw byte fields, as seen on the wire."""

from __future__ import annotations

from dataclasses import dataclass, field

from packemon.bgp import (
    BGP_DEFAULT_MARKER,
    BGP_TYPE_KEEPALIVE,
    BGP_TYPE_NOTIFICATION,
    BGP_TYPE_OPEN,
    BGP_TYPE_UPDATE,
    BGP_VERSION,
)

BGP_PORT = 179

BGP_TYPE_ROUTE_REFRESH = 0x05

# A marker of all ones means the session is not authenticated.
BGP_MARKER = BGP_DEFAULT_MARKER

BGP_MAJOR_ERROR_MESSAGE_HEADER_ERROR = 0x01
BGP_MINOR_ERROR_CONNECTION_NOT_SYNCHRONIZED = 0x01

# Optional parameters of an OPEN as sent by an FRR router, capabilities included.
FRR_OPEN_OPTIONAL_PARAMETERS = bytes(
    [
        0x02, 0x06, 0x01, 0x04, 0x00, 0x01, 0x00, 0x01, 0x02, 0x02, 0x80, 0x00, 0x02, 0x02, 0x02, 0x00,
        0x02, 0x02, 0x46, 0x00, 0x02, 0x06, 0x41, 0x04, 0x00, 0x00, 0x00, 0x01, 0x02, 0x02, 0x06, 0x00,
        0x02, 0x06, 0x45, 0x04, 0x00, 0x01, 0x01, 0x01, 0x02, 0x0E, 0x49, 0x0C, 0x0A, 0x42, 0x47, 0x50,
        0x52, 0x6F, 0x75, 0x74, 0x65, 0x72, 0x31, 0x00, 0x02, 0x04, 0x40, 0x02, 0xC0, 0x78, 0x02, 0x09,
        0x47, 0x07, 0x00, 0x01, 0x01, 0x80, 0x00, 0x00, 0x00,
    ]
)


@dataclass
class RawBGP:
    """An OPEN or KEEPALIVE message; a KEEPALIVE carries only the header."""

    marker: bytes = BGP_MARKER
    length: bytes = b"\x00\x00"
    typ: int = 0
    version: int = 0
    my_as: bytes = b""
    hold_time: bytes = b""
    identifier: bytes = b""
    optional_parameters_length: int = 0
    optional_parameters: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        header = bytes(self.marker) + bytes(self.length) + bytes([self.typ])
        if self.typ == BGP_TYPE_KEEPALIVE:
            return header
        return (
            header
            + bytes([self.version])
            + bytes(self.my_as)
            + bytes(self.hold_time)
            + bytes(self.identifier)
            + bytes([self.optional_parameters_length])
            + bytes(self.optional_parameters)
        )


@dataclass
class RawBGPUpdate:
    """An UPDATE message header with its two length fields."""

    marker: bytes = BGP_MARKER
    length: bytes = b"\x00\x00"
    typ: int = BGP_TYPE_UPDATE
    withdrawn_routes_length: bytes = b"\x00\x00"
    total_path_attribute_length: bytes = b"\x00\x00"

    def __bytes__(self) -> bytes:
        return (
            bytes(self.marker)
            + bytes(self.length)
            + bytes([self.typ])
            + bytes(self.withdrawn_routes_length)
            + bytes(self.total_path_attribute_length)
        )


@dataclass
class RawBGPNotification:
    """A NOTIFICATION message with major and minor error codes."""

    marker: bytes = BGP_MARKER
    length: bytes = b"\x00\x00"
    typ: int = BGP_TYPE_NOTIFICATION
    major_error_code: int = 0
    minor_error_code: int = 0

    def __bytes__(self) -> bytes:
        return (
            bytes(self.marker)
            + bytes(self.length)
            + bytes([self.typ, self.major_error_code, self.minor_error_code])
        )


def new_raw_bgp_open() -> RawBGP:
    """An OPEN from AS 1, hold time 180, identifier 172.17.0.4."""
    return RawBGP(
        marker=BGP_MARKER,
        length=b"\x00\x66",
        typ=BGP_TYPE_OPEN,
        version=BGP_VERSION,
        my_as=b"\x00\x01",
        hold_time=b"\x00\xb4",
        identifier=b"\xac\x11\x00\x04",
        optional_parameters_length=len(FRR_OPEN_OPTIONAL_PARAMETERS),
        optional_parameters=FRR_OPEN_OPTIONAL_PARAMETERS,
    )


def new_raw_bgp_keepalive() -> RawBGP:
    return RawBGP(marker=BGP_MARKER, length=b"\x00\x13", typ=BGP_TYPE_KEEPALIVE)


def new_raw_bgp_update() -> RawBGPUpdate:
    """An UPDATE that withdraws nothing and carries no attributes."""
    return RawBGPUpdate(
        marker=BGP_MARKER,
        length=b"\x00\x17",
        typ=BGP_TYPE_UPDATE,
        withdrawn_routes_length=b"\x00\x00",
        total_path_attribute_length=b"\x00\x00",
    )


def new_raw_bgp_notification() -> RawBGPNotification:
    """A message-header error: connection not synchronised."""
    return RawBGPNotification(
        marker=BGP_MARKER,
        length=b"\x00\x15",
        typ=BGP_TYPE_NOTIFICATION,
        major_error_code=BGP_MAJOR_ERROR_MESSAGE_HEADER_ERROR,
        minor_error_code=BGP_MINOR_ERROR_CONNECTION_NOT_SYNCHRONIZED,
    )