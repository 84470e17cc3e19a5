"""Recognising BGP messages in TCP payloads and decoding them into raw fields."""

from __future__ import annotations

from packemon.bgp import (
    BGP_HEADER_LENGTH,
    BGP_TYPE_KEEPALIVE,
    BGP_TYPE_NOTIFICATION,
    BGP_TYPE_OPEN,
    BGP_TYPE_UPDATE,
)
from packemon.bgp_frames import BGP_MARKER, RawBGP, RawBGPUpdate

_TYPE_OFFSET = 18
_OPEN_FIXED_LENGTH = 29
_UPDATE_FIXED_LENGTH = 23


def is_bgp(payload: bytes) -> bool:
    """True if ``payload`` holds a whole BGP header with an all-ones marker."""
    payload = bytes(payload)
    if len(payload) < BGP_HEADER_LENGTH:
        return False
    return payload[:16] == BGP_MARKER


def _has_type(payload: bytes, message_type: int) -> bool:
    payload = bytes(payload)
    return is_bgp(payload) and payload[_TYPE_OFFSET] == message_type


def is_bgp_open(payload: bytes) -> bool:
    return _has_type(payload, BGP_TYPE_OPEN)


def is_bgp_update(payload: bytes) -> bool:
    return _has_type(payload, BGP_TYPE_UPDATE)


def is_bgp_keepalive(payload: bytes) -> bool:
    return _has_type(payload, BGP_TYPE_KEEPALIVE)


def is_bgp_notification(payload: bytes) -> bool:
    return _has_type(payload, BGP_TYPE_NOTIFICATION)


def parse_raw_bgp_open(payload: bytes) -> RawBGP:
    """Split an OPEN message into its raw fields.

    Optional parameters are kept only when the payload holds all of them.
    """
    payload = bytes(payload)
    if len(payload) < _OPEN_FIXED_LENGTH:
        raise ValueError(
            f"BGP OPEN needs at least {_OPEN_FIXED_LENGTH} bytes, got {len(payload)}"
        )
    opt_len = payload[28]
    optional = b""
    if opt_len and len(payload) >= _OPEN_FIXED_LENGTH + opt_len:
        optional = payload[_OPEN_FIXED_LENGTH:_OPEN_FIXED_LENGTH + opt_len]
    return RawBGP(
        marker=payload[0:16],
        length=payload[16:18],
        typ=payload[18],
        version=payload[19],
        my_as=payload[20:22],
        hold_time=payload[22:24],
        identifier=payload[24:28],
        optional_parameters_length=opt_len,
        optional_parameters=optional,
    )


def parse_raw_bgp_update(payload: bytes) -> RawBGPUpdate:
    """Split the header of an UPDATE message into its raw fields."""
    payload = bytes(payload)
    if len(payload) < _UPDATE_FIXED_LENGTH:
        raise ValueError(
            f"BGP UPDATE needs at least {_UPDATE_FIXED_LENGTH} bytes, got {len(payload)}"
        )
    return RawBGPUpdate(
        marker=payload[0:16],
        length=payload[16:18],
        typ=payload[18],
        withdrawn_routes_length=payload[19:21],
        total_path_attribute_length=payload[21:23],
    )