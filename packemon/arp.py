"""Address Resolution Protocol packets for Ethernet and IPv4."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from packemon.ethernet import HardwareAddr

ARP_HARDWARE_TYPE_ETHERNET = 0x0001
ARP_PROTO_TYPE_IPV4 = 0x0800

ARP_OPERATION_CODE_REQUEST = 0x0001
ARP_OPERATION_CODE_REPLY = 0x0002

ARP_LENGTH = 28

_FIXED = struct.Struct("!HHBBH")
_ADDRESS_PAIR = struct.Struct("!6sI")


@dataclass
class ARP:
    """An ARP packet."""

    hardware_type: int
    protocol_type: int
    hardware_addr_length: int
    protocol_length: int
    operation: int
    sender_hardware_addr: HardwareAddr
    sender_ip_addr: int
    target_hardware_addr: HardwareAddr
    target_ip_addr: int

    def __bytes__(self) -> bytes:
        return (
            _FIXED.pack(
                self.hardware_type,
                self.protocol_type,
                self.hardware_addr_length,
                self.protocol_length,
                self.operation,
            )
            + _ADDRESS_PAIR.pack(bytes(self.sender_hardware_addr), self.sender_ip_addr)
            + _ADDRESS_PAIR.pack(bytes(self.target_hardware_addr), self.target_ip_addr)
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> ARP:
        data = bytes(data)
        if len(data) < ARP_LENGTH:
            raise ValueError(f"ARP packet needs {ARP_LENGTH} bytes, got {len(data)}")
        hw_type, proto_type, hw_len, proto_len, operation = _FIXED.unpack_from(data, 0)
        sender_mac, sender_ip = _ADDRESS_PAIR.unpack_from(data, 8)
        target_mac, target_ip = _ADDRESS_PAIR.unpack_from(data, 18)
        return cls(
            hardware_type=hw_type,
            protocol_type=proto_type,
            hardware_addr_length=hw_len,
            protocol_length=proto_len,
            operation=operation,
            sender_hardware_addr=HardwareAddr(sender_mac),
            sender_ip_addr=sender_ip,
            target_hardware_addr=HardwareAddr(target_mac),
            target_ip_addr=target_ip,
        )

    @classmethod
    def _ethernet_ipv4(
        cls,
        operation: int,
        sender_mac: HardwareAddr,
        sender_ip: int,
        target_mac: HardwareAddr,
        target_ip: int,
    ) -> ARP:
        return cls(
            hardware_type=ARP_HARDWARE_TYPE_ETHERNET,
            protocol_type=ARP_PROTO_TYPE_IPV4,
            hardware_addr_length=6,
            protocol_length=4,
            operation=operation,
            sender_hardware_addr=sender_mac,
            sender_ip_addr=sender_ip,
            target_hardware_addr=target_mac,
            target_ip_addr=target_ip,
        )

    @classmethod
    def request(
        cls, sender_mac: HardwareAddr, sender_ip: int, target_mac: HardwareAddr, target_ip: int
    ) -> ARP:
        """An Ethernet/IPv4 ARP request."""
        return cls._ethernet_ipv4(
            ARP_OPERATION_CODE_REQUEST, sender_mac, sender_ip, target_mac, target_ip
        )

    @classmethod
    def reply(
        cls, sender_mac: HardwareAddr, sender_ip: int, target_mac: HardwareAddr, target_ip: int
    ) -> ARP:
        """An Ethernet/IPv4 ARP reply."""
        return cls._ethernet_ipv4(
            ARP_OPERATION_CODE_REPLY, sender_mac, sender_ip, target_mac, target_ip
        )