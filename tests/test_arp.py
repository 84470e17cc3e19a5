import pytest

from packemon.arp import (
    ARP,
    ARP_HARDWARE_TYPE_ETHERNET,
    ARP_LENGTH,
    ARP_OPERATION_CODE_REPLY,
    ARP_OPERATION_CODE_REQUEST,
    ARP_PROTO_TYPE_IPV4,
)
from packemon.ethernet import HardwareAddr

SENDER_MAC = HardwareAddr(b"\x02\x00\x00\x00\x00\x01")
ZERO_MAC = HardwareAddr(b"\x00" * 6)
SENDER_IP = 0xC0000201
TARGET_IP = 0xC0000202


def test_request_fields():
    arp = ARP.request(SENDER_MAC, SENDER_IP, ZERO_MAC, TARGET_IP)
    assert arp.operation == ARP_OPERATION_CODE_REQUEST
    assert arp.hardware_type == ARP_HARDWARE_TYPE_ETHERNET
    assert arp.protocol_type == ARP_PROTO_TYPE_IPV4
    assert arp.hardware_addr_length == 6
    assert arp.protocol_length == 4


def test_reply_operation():
    arp = ARP.reply(SENDER_MAC, SENDER_IP, ZERO_MAC, TARGET_IP)
    assert arp.operation == ARP_OPERATION_CODE_REPLY


def test_wire_layout():
    raw = bytes(ARP.request(SENDER_MAC, SENDER_IP, ZERO_MAC, TARGET_IP))
    assert len(raw) == ARP_LENGTH
    assert raw[0:2] == ARP_HARDWARE_TYPE_ETHERNET.to_bytes(2, "big")
    assert raw[8:14] == bytes(SENDER_MAC)
    assert raw[14:18] == SENDER_IP.to_bytes(4, "big")
    assert raw[24:28] == TARGET_IP.to_bytes(4, "big")


@pytest.mark.parametrize("factory", [ARP.request, ARP.reply])
def test_round_trip(factory):
    arp = factory(SENDER_MAC, SENDER_IP, ZERO_MAC, TARGET_IP)
    assert ARP.from_bytes(bytes(arp)) == arp


def test_trailing_bytes_are_ignored():
    arp = ARP.request(SENDER_MAC, SENDER_IP, ZERO_MAC, TARGET_IP)
    assert ARP.from_bytes(bytes(arp) + b"\x00" * 18) == arp


def test_too_short_raises():
    with pytest.raises(ValueError):
        ARP.from_bytes(b"\x00" * (ARP_LENGTH - 1))