"""Build and parse Ethernet, ARP, ICMP, ICMPv6, DNS, HTTP and BGP packets as bytes."""

__version__ = "0.1.0"