"""ICMPv6 messages (RFC 4443) and the Internet checksum."""

from __future__ import annotations

import ipaddress
import struct
import time
from dataclasses import dataclass, field
from typing import Union

ICMPV6_TYPE_DESTINATION_UNREACHABLE = 1
ICMPV6_TYPE_PACKET_TOO_BIG = 2
ICMPV6_TYPE_TIME_EXCEEDED = 3
ICMPV6_TYPE_PARAMETER_PROBLEM = 4

ICMPV6_TYPE_ECHO_REQUEST = 128
ICMPV6_TYPE_ECHO_REPLY = 129

ICMPV6_TYPE_ROUTER_SOLICITATION = 133
ICMPV6_TYPE_ROUTER_ADVERTISEMENT = 134
ICMPV6_TYPE_NEIGHBOR_SOLICITATION = 135
ICMPV6_TYPE_NEIGHBOR_ADVERTISEMENT = 136
ICMPV6_TYPE_REDIRECT = 137

IPV6_NEXT_HEADER_ICMPV6 = 58

_HEADER = struct.Struct("!BBH")
_ECHO = struct.Struct("!HH")

IPAddressLike = Union[str, bytes, bytearray, ipaddress.IPv4Address, ipaddress.IPv6Address]


def _to16(ip: IPAddressLike) -> bytes:
    """Sixteen-byte form of an address; IPv4 becomes IPv4-mapped IPv6."""
    if isinstance(ip, (bytes, bytearray)):
        raw = bytes(ip)
        if len(raw) == 16:
            return raw
        if len(raw) == 4:
            return b"\x00" * 10 + b"\xff\xff" + raw
        raise ValueError(f"IP address must be 4 or 16 bytes, got {len(raw)}")
    addr = ip if isinstance(ip, (ipaddress.IPv4Address, ipaddress.IPv6Address)) else (
        ipaddress.ip_address(ip)
    )
    if isinstance(addr, ipaddress.IPv4Address):
        return b"\x00" * 10 + b"\xff\xff" + addr.packed
    return addr.packed


def internet_checksum(data: bytes) -> int:
    """RFC 1071 Internet checksum, words read big-endian."""
    data = bytes(data)
    even = len(data) - len(data) % 2
    total = sum(word for (word,) in struct.iter_unpack("!H", data[:even]))
    if len(data) % 2:
        total += data[-1] << 8
    while total > 0xFFFF:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


def ipv6_pseudo_header(src_ip: IPAddressLike, dst_ip: IPAddressLike, length: int) -> bytes:
    """The IPv6 pseudo-header used for ICMPv6 checksums."""
    return (
        _to16(src_ip)
        + _to16(dst_ip)
        + struct.pack("!I", length)
        + b"\x00\x00\x00"
        + bytes([IPV6_NEXT_HEADER_ICMPV6])
    )


@dataclass
class ICMPv6:
    """An ICMPv6 message: type, code, checksum and body."""

    typ: int
    code: int
    checksum: int = 0
    message_body: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        return _HEADER.pack(self.typ, self.code, self.checksum) + bytes(self.message_body)

    @classmethod
    def from_bytes(cls, data: bytes) -> ICMPv6:
        data = bytes(data)
        if len(data) < _HEADER.size:
            raise ValueError(f"ICMPv6 message needs at least 4 bytes, got {len(data)}")
        typ, code, checksum = _HEADER.unpack_from(data)
        return cls(typ=typ, code=code, checksum=checksum, message_body=data[_HEADER.size:])

    def bytes_with_zero_checksum(self) -> bytes:
        return _HEADER.pack(self.typ, self.code, 0) + bytes(self.message_body)

    def calculate_checksum(self, src_ip: IPAddressLike, dst_ip: IPAddressLike) -> int:
        """Checksum over the pseudo-header and the message with a zero checksum."""
        body = self.bytes_with_zero_checksum()
        return internet_checksum(ipv6_pseudo_header(src_ip, dst_ip, len(body)) + body)


@dataclass
class ICMPv6Echo:
    """The body of an echo request or reply."""

    identifier: int
    sequence_number: int
    data: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        return _ECHO.pack(self.identifier, self.sequence_number) + bytes(self.data)

    @classmethod
    def from_icmpv6(cls, icmpv6: ICMPv6) -> ICMPv6Echo:
        if icmpv6 is None:
            raise ValueError("no ICMPv6 message given")
        body = bytes(icmpv6.message_body)
        if len(body) < _ECHO.size:
            raise ValueError(f"echo body needs at least 4 bytes, got {len(body)}")
        identifier, sequence = _ECHO.unpack_from(body)
        return cls(identifier=identifier, sequence_number=sequence, data=body[_ECHO.size:])


def new_icmpv6_echo_request(timestamp: int | None = None) -> ICMPv6:
    """An echo request with a ping-style timestamp; the checksum is left zero."""
    if timestamp is None:
        timestamp = int(time.time())
    echo = ICMPv6Echo(
        identifier=0x1234,
        sequence_number=0x0001,
        data=struct.pack("<II", timestamp & 0xFFFFFFFF, 0),
    )
    return ICMPv6(typ=ICMPV6_TYPE_ECHO_REQUEST, code=0, checksum=0, message_body=bytes(echo))