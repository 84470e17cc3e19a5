"""DNS messages with a single question and A-record answers."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

PORT_DNS = 53

DNS_QR_REQUEST = 0
DNS_QR_RESPONSE = 1 << 15

DNS_QUERY_TYPE_A = 0x0001
DNS_QUERY_TYPE_AAAA = 0x001C

DNS_QUERY_CLASS_IN = 0x0001

_HEADER = struct.Struct("!6H")
_QUESTION_TAIL = struct.Struct("!HH")
_ANSWER = struct.Struct("!HHHIHI")


def is_dns_response(flags: int) -> bool:
    return flags & DNS_QR_RESPONSE == DNS_QR_RESPONSE


def is_dns_request(flags: int) -> bool:
    return not is_dns_response(flags)


def encode_domain(domain: str) -> bytes:
    """Encode a dotted name as length-prefixed labels ending in a zero byte."""
    try:
        labels = [label.encode("ascii") for label in domain.split(".")]
    except UnicodeEncodeError as exc:
        raise ValueError(f"domain must be ASCII: {domain!r}") from exc
    if any(len(label) > 0xFF for label in labels):
        raise ValueError(f"domain label too long: {domain!r}")
    return b"".join(bytes([len(label)]) + label for label in labels) + b"\x00"


@dataclass
class Query:
    """The question section; ttl and data_length are not sent."""

    domain: bytes = b""
    typ: int = 0
    class_: int = 0
    ttl: int = 0
    data_length: int = 0


@dataclass
class Answer:
    """An answer record with a compressed name and an IPv4 address."""

    name: int
    typ: int
    class_: int
    ttl: int
    data_length: int
    address: int


@dataclass
class DNS:
    """A DNS message."""

    transaction_id: int = 0
    flags: int = 0
    questions: int = 0
    answer_rrs: int = 0
    authority_rrs: int = 0
    additional_rrs: int = 0
    queries: Query = field(default_factory=Query)
    answers: list[Answer] = field(default_factory=list)

    @classmethod
    def _parse_head(cls, data: bytes) -> tuple[DNS, int]:
        data = bytes(data)
        if len(data) < _HEADER.size:
            raise ValueError(f"DNS message needs at least {_HEADER.size} bytes, got {len(data)}")
        tid, flags, qd, an, ns, ar = _HEADER.unpack_from(data)
        end = data.find(b"\x00", _HEADER.size)
        if end == -1:
            raise ValueError("DNS question name is not terminated")
        offset = end + 1
        if len(data) < offset + _QUESTION_TAIL.size:
            raise ValueError("DNS question is truncated")
        typ, class_ = _QUESTION_TAIL.unpack_from(data, offset)
        message = cls(
            transaction_id=tid,
            flags=flags,
            questions=qd,
            answer_rrs=an,
            authority_rrs=ns,
            additional_rrs=ar,
            queries=Query(domain=data[_HEADER.size:offset], typ=typ, class_=class_),
        )
        return message, offset + _QUESTION_TAIL.size

    @classmethod
    def parse_request(cls, data: bytes) -> DNS:
        """Parse a message assumed to hold exactly one question."""
        message, _ = cls._parse_head(data)
        return message

    @classmethod
    def parse_response(cls, data: bytes) -> DNS:
        """Parse one question and ``answer_rrs`` fixed-size A answers."""
        data = bytes(data)
        message, offset = cls._parse_head(data)
        needed = offset + _ANSWER.size * message.answer_rrs
        if len(data) < needed:
            raise ValueError(f"DNS answers are truncated: need {needed} bytes, got {len(data)}")
        message.answers = [
            Answer(*fields)
            for fields in _ANSWER.iter_unpack(data[offset:needed])
        ]
        return message

    def set_domain(self, domain: str) -> None:
        if self.queries is None:
            self.queries = Query()
        self.queries.domain = encode_domain(domain)

    def __bytes__(self) -> bytes:
        parts = [
            _HEADER.pack(
                self.transaction_id,
                self.flags,
                self.questions,
                self.answer_rrs,
                self.authority_rrs,
                self.additional_rrs,
            ),
            bytes(self.queries.domain),
            _QUESTION_TAIL.pack(self.queries.typ, self.queries.class_),
        ]
        parts.extend(
            _ANSWER.pack(a.name, a.typ, a.class_, a.ttl, a.data_length, a.address)
            for a in self.answers
        )
        return b"".join(parts)