"""BGP-4 messages (RFC 4271): header, OPEN, UPDATE, NOTIFICATION and KEEPALIVE."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

BGP_TYPE_OPEN = 1
BGP_TYPE_UPDATE = 2
BGP_TYPE_NOTIFICATION = 3
BGP_TYPE_KEEPALIVE = 4

BGP_VERSION = 4
BGP_HEADER_LENGTH = 19

BGP_DEFAULT_MARKER = b"\xff" * 16

_LENGTH_AND_TYPE = struct.Struct("!HB")
_OPEN_FIXED = struct.Struct("!BHHIB")
_UINT16 = struct.Struct("!H")


@dataclass
class BGP:
    """A BGP message: 16-byte marker, total length, type and body."""

    marker: bytes = BGP_DEFAULT_MARKER
    length: int = BGP_HEADER_LENGTH
    type: int = 0
    message_body: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        return (
            bytes(self.marker)
            + _LENGTH_AND_TYPE.pack(self.length, self.type)
            + bytes(self.message_body)
        )


@dataclass
class BGPOpen:
    """The body of an OPEN message."""

    version: int = BGP_VERSION
    my_autonomous_system: int = 0
    hold_time: int = 0
    bgp_identifier: int = 0
    optional_parameters_length: int = 0
    optional_parameters: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        fixed = _OPEN_FIXED.pack(
            self.version,
            self.my_autonomous_system,
            self.hold_time,
            self.bgp_identifier,
            self.optional_parameters_length,
        )
        if self.optional_parameters_length > 0:
            return fixed + bytes(self.optional_parameters)
        return fixed

    @classmethod
    def from_bgp(cls, bgp: BGP) -> BGPOpen:
        """Decode the body of an OPEN message."""
        if bgp is None or bgp.type != BGP_TYPE_OPEN:
            raise ValueError("not a BGP OPEN message")
        body = bytes(bgp.message_body)
        if len(body) < _OPEN_FIXED.size:
            raise ValueError(
                f"BGP OPEN body needs at least {_OPEN_FIXED.size} bytes, got {len(body)}"
            )
        version, my_as, hold_time, identifier, opt_len = _OPEN_FIXED.unpack_from(body)
        optional = b""
        if opt_len > 0 and len(body) >= _OPEN_FIXED.size + opt_len:
            optional = body[_OPEN_FIXED.size:_OPEN_FIXED.size + opt_len]
        return cls(
            version=version,
            my_autonomous_system=my_as,
            hold_time=hold_time,
            bgp_identifier=identifier,
            optional_parameters_length=opt_len,
            optional_parameters=optional,
        )


@dataclass
class BGPUpdate:
    """The body of an UPDATE message."""

    withdrawn_routes_length: int = 0
    withdrawn_routes: bytes = field(default=b"")
    path_attributes_length: int = 0
    path_attributes: bytes = field(default=b"")
    network_layer_reachability_info: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        parts = [_UINT16.pack(self.withdrawn_routes_length)]
        if self.withdrawn_routes_length > 0:
            parts.append(bytes(self.withdrawn_routes))
        parts.append(_UINT16.pack(self.path_attributes_length))
        if self.path_attributes_length > 0:
            parts.append(bytes(self.path_attributes))
        parts.append(bytes(self.network_layer_reachability_info))
        return b"".join(parts)

    @classmethod
    def from_bgp(cls, bgp: BGP) -> BGPUpdate:
        """Decode the body of an UPDATE message."""
        if bgp is None or bgp.type != BGP_TYPE_UPDATE:
            raise ValueError("not a BGP UPDATE message")
        body = bytes(bgp.message_body)
        if len(body) < 4:
            raise ValueError(f"BGP UPDATE body needs at least 4 bytes, got {len(body)}")
        (withdrawn_len,) = _UINT16.unpack_from(body, 0)
        attr_len_pos = 2 + withdrawn_len
        if len(body) < attr_len_pos + 2:
            raise ValueError("BGP UPDATE withdrawn routes are truncated")
        (attr_len,) = _UINT16.unpack_from(body, attr_len_pos)
        attr_start = attr_len_pos + 2
        if len(body) < attr_start + attr_len:
            raise ValueError("BGP UPDATE path attributes are truncated")
        return cls(
            withdrawn_routes_length=withdrawn_len,
            withdrawn_routes=body[2:attr_len_pos],
            path_attributes_length=attr_len,
            path_attributes=body[attr_start:attr_start + attr_len],
            network_layer_reachability_info=body[attr_start + attr_len:],
        )


@dataclass
class BGPNotification:
    """The body of a NOTIFICATION message."""

    error_code: int = 0
    error_subcode: int = 0
    data: bytes = field(default=b"")

    def __bytes__(self) -> bytes:
        return bytes([self.error_code, self.error_subcode]) + bytes(self.data)

    @classmethod
    def from_bgp(cls, bgp: BGP) -> BGPNotification:
        """Decode the body of a NOTIFICATION message."""
        if bgp is None or bgp.type != BGP_TYPE_NOTIFICATION:
            raise ValueError("not a BGP NOTIFICATION message")
        body = bytes(bgp.message_body)
        if len(body) < 2:
            raise ValueError(f"BGP NOTIFICATION body needs at least 2 bytes, got {len(body)}")
        return cls(error_code=body[0], error_subcode=body[1], data=body[2:])


def new_bgp(message_type: int, message_body: bytes) -> BGP:
    """A message with the default marker and a length covering header and body."""
    body = bytes(message_body)
    return BGP(
        marker=BGP_DEFAULT_MARKER,
        length=(BGP_HEADER_LENGTH + len(body)) & 0xFFFF,
        type=message_type,
        message_body=body,
    )


def new_bgp_open(
    as_number: int, hold_time: int, router_id: int, optional_params: bytes
) -> BGP:
    optional = bytes(optional_params)
    open_body = BGPOpen(
        version=BGP_VERSION,
        my_autonomous_system=as_number,
        hold_time=hold_time,
        bgp_identifier=router_id,
        optional_parameters_length=len(optional) & 0xFF,
        optional_parameters=optional,
    )
    return new_bgp(BGP_TYPE_OPEN, bytes(open_body))


def new_bgp_keepalive() -> BGP:
    return new_bgp(BGP_TYPE_KEEPALIVE, b"")


def new_bgp_update(withdrawn_routes: bytes, path_attributes: bytes, nlri: bytes) -> BGP:
    withdrawn = bytes(withdrawn_routes)
    attributes = bytes(path_attributes)
    update = BGPUpdate(
        withdrawn_routes_length=len(withdrawn) & 0xFFFF,
        withdrawn_routes=withdrawn,
        path_attributes_length=len(attributes) & 0xFFFF,
        path_attributes=attributes,
        network_layer_reachability_info=bytes(nlri),
    )
    return new_bgp(BGP_TYPE_UPDATE, bytes(update))


def new_bgp_notification(error_code: int, error_subcode: int, data: bytes) -> BGP:
    notification = BGPNotification(
        error_code=error_code, error_subcode=error_subcode, data=bytes(data)
    )
    return new_bgp(BGP_TYPE_NOTIFICATION, bytes(notification))


def parse_bgp(data: bytes) -> BGP:
    """Split a message into marker, length, type and body."""
    if data is None:
        raise ValueError("no BGP data given")
    data = bytes(data)
    if len(data) < BGP_HEADER_LENGTH:
        raise ValueError(
            f"BGP message needs at least {BGP_HEADER_LENGTH} bytes, got {len(data)}"
        )
    length, typ = _LENGTH_AND_TYPE.unpack_from(data, 16)
    return BGP(
        marker=data[0:16],
        length=length,
        type=typ,
        message_body=data[BGP_HEADER_LENGTH:],
    )