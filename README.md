# packemon

Build and parse network packets as plain bytes: Ethernet frames, ARP, ICMP,
ICMPv6, DNS, a small part of HTTP, and BGP messages. Every packet type turns
into wire bytes with `bytes(...)`, and the parsers read them back. Malformed
or truncated input raises `ValueError`.

The package uses only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

An ARP request inside an Ethernet broadcast frame:

```python
from packemon.arp import ARP
from packemon.ethernet import ETHER_TYPE_ARP, HardwareAddr, new_ethernet_frame

src = HardwareAddr(bytes.fromhex("020000000001"))
broadcast = HardwareAddr(b"\xff" * 6)
arp = ARP.request(src, 0x0A000001, HardwareAddr(bytes(6)), 0x0A000002)
frame = new_ethernet_frame(broadcast, src, ETHER_TYPE_ARP, bytes(arp))
wire = bytes(frame)
```

An ICMP echo request (its checksum is filled in) and an ICMPv6 echo request,
whose checksum needs the source and destination addresses:

```python
from packemon.icmp import new_icmp
from packemon.icmpv6 import new_icmpv6_echo_request

ping = new_icmp(timestamp=0)

echo = new_icmpv6_echo_request(timestamp=0)
echo.checksum = echo.calculate_checksum("2001:db8::1", "2001:db8::2")
```

A BGP OPEN message, serialised and parsed back:

```python
from packemon.bgp import BGPOpen, new_bgp_open, parse_bgp

message = new_bgp_open(65001, 180, 0xC0A80101, b"")
parsed = BGPOpen.from_bgp(parse_bgp(bytes(message)))
assert parsed.my_autonomous_system == 65001
```

A DNS query for an A record:

```python
from packemon.dns import DNS, DNS_QUERY_CLASS_IN, DNS_QUERY_TYPE_A, Query

dns = DNS(
    transaction_id=0x1234,
    flags=0x0100,
    questions=1,
    queries=Query(typ=DNS_QUERY_TYPE_A, class_=DNS_QUERY_CLASS_IN),
)
dns.set_domain("example.com")
payload = bytes(dns)
```

An HTTP GET request and a parsed response:

```python
from packemon.http_message import new_http, parse_http_response

request = bytes(new_http())
response = parse_http_response(
    b"HTTP/1.1 200 OK\r\nContent-Length: 2\r\nContent-Type: text/plain\r\n\r\nhi"
)
assert response.body == b"hi"
```

## Modules

- `packemon.ethernet`: `HardwareAddr`, `EthernetHeader`, `EthernetFrame`, `new_ethernet_frame`
- `packemon.arp`: `ARP` with `from_bytes`, `request` and `reply`
- `packemon.icmp`: `ICMP`, `new_icmp`
- `packemon.icmpv6`: `ICMPv6`, `ICMPv6Echo`, `new_icmpv6_echo_request`, `internet_checksum`, `ipv6_pseudo_header`
- `packemon.dns`: `DNS` (`parse_request`, `parse_response`, `set_domain`), `Query`, `Answer`, `encode_domain`, `is_dns_request`, `is_dns_response`
- `packemon.http_message`: `HTTP`, `HTTPResponse`, `HTTPResponseHeader`, `new_http`, `parse_http_request`, `parse_http_response`
- `packemon.bgp`: `BGP`, `BGPOpen`, `BGPUpdate`, `BGPNotification`, `parse_bgp` and the `new_bgp_*` constructors
- `packemon.bgp_frames`: fixed OPEN, KEEPALIVE, UPDATE and NOTIFICATION messages kept as raw byte fields (`new_raw_bgp_open` and friends)
- `packemon.bgp_detect`: `is_bgp`, `is_bgp_open`, `is_bgp_update`, `is_bgp_keepalive`, `is_bgp_notification`, `parse_raw_bgp_open`, `parse_raw_bgp_update`
- `packemon.buffer_pool`: `BufferPool`, `BytesPool` and pooled buffers in small (128), medium (1500) and large (9000) byte sizes
- `packemon.config`: `Config` stored as `config.json`, with packet templates, UI settings and keyboard shortcuts; `load_config` writes the defaults on first use, and `get_config_dir` creates `~/.packemon` when no directory is given

## What it does not do

- It opens no sockets: it neither sends packets nor captures them from a
  network interface. Sending the bytes is up to you.
- It has no command-line program and no interactive screen; it is a library.
- It has no IPv4, IPv6, TCP or UDP headers and no TLS; those layers have to
  be built elsewhere around the payloads it produces.