"""Ethernet II frames and hardware (MAC) addresses."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

ETHER_TYPE_IPV4 = 0x0800
ETHER_TYPE_IPV6 = 0x86DD
ETHER_TYPE_ARP = 0x0806

HARDWARE_ADDR_LENGTH = 6
ETHERNET_HEADER_LENGTH = 14

_HEADER = struct.Struct("!6s6sH")


@dataclass(frozen=True)
class HardwareAddr:
    """A six-octet hardware address."""

    octets: bytes

    def __post_init__(self) -> None:
        octets = bytes(self.octets)
        if len(octets) != HARDWARE_ADDR_LENGTH:
            raise ValueError(
                f"hardware address must be {HARDWARE_ADDR_LENGTH} bytes, got {len(octets)}"
            )
        object.__setattr__(self, "octets", octets)

    def __str__(self) -> str:
        return ":".join(f"{octet:02x}" for octet in self.octets)

    def __bytes__(self) -> bytes:
        return self.octets


@dataclass
class EthernetHeader:
    """Destination, source and EtherType of a frame."""

    dst: HardwareAddr
    src: HardwareAddr
    typ: int


@dataclass
class EthernetFrame:
    """An Ethernet II frame: header plus payload."""

    header: EthernetHeader
    data: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        return (
            _HEADER.pack(bytes(self.header.dst), bytes(self.header.src), self.header.typ)
            + bytes(self.data)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> EthernetFrame:
        """Parse a frame; a tagged VLAN header is not recognised."""
        data = bytes(data)
        if len(data) < ETHERNET_HEADER_LENGTH:
            raise ValueError(
                f"ethernet frame needs at least {ETHERNET_HEADER_LENGTH} bytes, got {len(data)}"
            )
        dst, src, typ = _HEADER.unpack_from(data)
        header = EthernetHeader(dst=HardwareAddr(dst), src=HardwareAddr(src), typ=typ)
        return cls(header=header, data=data[ETHERNET_HEADER_LENGTH:])


def new_ethernet_frame(
    dst: HardwareAddr, src: HardwareAddr, typ: int, payload: bytes
) -> EthernetFrame:
    """Build a frame carrying ``payload``."""
    return EthernetFrame(header=EthernetHeader(dst=dst, src=src, typ=typ), data=bytes(payload))