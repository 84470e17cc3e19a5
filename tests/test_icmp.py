import pytest

from packemon.icmp import ICMP, ICMP_TYPE_REQUEST, new_icmp


def test_new_icmp_header_fields():
    icmp = new_icmp(timestamp=1)
    assert icmp.typ == ICMP_TYPE_REQUEST
    assert icmp.code == 0
    assert icmp.identifier == 0x34A1
    assert icmp.sequence == 0x0001


def test_new_icmp_timestamp_is_little_endian():
    icmp = new_icmp(timestamp=0x01020304)
    assert icmp.data == b"\x04\x03\x02\x01\x00\x00\x00\x00"


@pytest.mark.parametrize("timestamp", [0, 1, 0x01020304, 0x7FFFFFFF, 0xFFFFFFFF])
def test_new_icmp_checksum_verifies(timestamp):
    icmp = new_icmp(timestamp=timestamp)
    assert icmp.calculate_checksum() == 0


def test_new_icmp_uses_current_time_by_default():
    icmp = new_icmp()
    assert len(icmp.data) == 8
    assert icmp.calculate_checksum() == 0


def test_odd_length_checksum_verifies():
    icmp = ICMP(typ=ICMP_TYPE_REQUEST, code=0, identifier=7, sequence=9, data=b"abc")
    computed = icmp.calculate_checksum()
    icmp.checksum = int.from_bytes(computed.to_bytes(2, "little"), "big")
    assert icmp.calculate_checksum() == 0


def test_round_trip():
    icmp = new_icmp(timestamp=42)
    assert ICMP.from_bytes(bytes(icmp)) == icmp


def test_wire_layout():
    icmp = new_icmp(timestamp=42)
    raw = bytes(icmp)
    assert raw[0] == ICMP_TYPE_REQUEST
    assert raw[2:4] == icmp.checksum.to_bytes(2, "big")
    assert raw[8:] == icmp.data


def test_too_short_raises():
    with pytest.raises(ValueError):
        ICMP.from_bytes(b"\x08\x00\x00")