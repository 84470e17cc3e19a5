[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packemon"
version = "0.1.0"
description = "Build and parse Ethernet, ARP, ICMP, ICMPv6, DNS, HTTP and BGP packets as raw bytes"
requires-python = ">=3.10"
dependencies = []
keywords = ["packet", "ethernet", "arp", "icmp", "icmpv6", "dns", "bgp", "http", "network"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["packemon"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
