"""ICMP (IPv4) echo messages."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass, field

ICMP_TYPE_REQUEST = 0x08

ICMP_HEADER_LENGTH = 8

_HEADER = struct.Struct("!BBHHH")


@dataclass
class ICMP:
    """An ICMP message with identifier and sequence fields."""

    typ: int
    code: int
    checksum: int = 0
    identifier: int = 0
    sequence: int = 0
    data: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        return (
            _HEADER.pack(self.typ, self.code, self.checksum, self.identifier, self.sequence)
            + bytes(self.data)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> ICMP:
        data = bytes(data)
        if len(data) < ICMP_HEADER_LENGTH:
            raise ValueError(
                f"ICMP message needs at least {ICMP_HEADER_LENGTH} bytes, got {len(data)}"
            )
        typ, code, checksum, identifier, sequence = _HEADER.unpack_from(data)
        return cls(
            typ=typ,
            code=code,
            checksum=checksum,
            identifier=identifier,
            sequence=sequence,
            data=data[ICMP_HEADER_LENGTH:],
        )

    def calculate_checksum(self) -> int:
        """Ones' complement sum over the message, words read little-endian.

        The current checksum field is included; a message carrying a correct
        checksum yields zero.
        """
        raw = bytes(self)
        even = len(raw) - len(raw) % 2
        total = sum(word for (word,) in struct.iter_unpack("<H", raw[:even]))
        if len(raw) % 2:
            total += raw[-1]
        total = (total >> 16) + (total & 0xFFFF)
        total += total >> 16
        return ~total & 0xFFFF


def new_icmp(timestamp: int | None = None) -> ICMP:
    """An echo request carrying a ping-style timestamp and a valid checksum."""
    if timestamp is None:
        timestamp = int(time.time())
    icmp = ICMP(
        typ=ICMP_TYPE_REQUEST,
        code=0,
        identifier=0x34A1,
        sequence=0x0001,
        data=struct.pack("<II", timestamp & 0xFFFFFFFF, 0),
    )
    # The sum is little-endian; swap it so the wire order matches.
    icmp.checksum = int.from_bytes(icmp.calculate_checksum().to_bytes(2, "little"), "big")
    return icmp