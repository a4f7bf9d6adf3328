"""Sets of IP addresses built from single addresses, ranges and CIDRs."""

from __future__ import annotations

import ipaddress
from typing import Iterable, Union

_Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _to_address(value: object) -> _Address:
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return value
    return ipaddress.ip_address(str(value))


class IPSet:
    """A set of IPv4 and IPv6 addresses stored as inclusive ranges."""

    def __init__(self) -> None:
        self._ranges: dict[int, list[tuple[int, int]]] = {4: [], 6: []}

    def add_address(self, address: object) -> None:
        ip = _to_address(address)
        self._ranges[ip.version].append((int(ip), int(ip)))

    def add_range(self, first: object, last: object) -> None:
        start, end = _to_address(first), _to_address(last)
        if start.version != end.version:
            raise ValueError(f"range {start} to {end} mixes address families")
        if int(end) < int(start):
            raise ValueError(f"range {start} to {end} not valid")
        self._ranges[start.version].append((int(start), int(end)))

    def add_network(self, network: object) -> None:
        net = ipaddress.ip_network(str(network), strict=False)
        self._ranges[net.version].append(
            (int(net.network_address), int(net.broadcast_address))
        )

    def __contains__(self, address: object) -> bool:
        try:
            ip = _to_address(address)
        except ValueError:
            return False
        value = int(ip)
        return any(lo <= value <= hi for lo, hi in self._ranges[ip.version])


def parse_ip_range(text: str) -> tuple[_Address, _Address]:
    """Parse ``first-last`` into two addresses of one family, in order."""
    first, sep, last = text.partition("-")
    if not sep:
        raise ValueError(f"no hyphen in range {text!r}")
    start = ipaddress.ip_address(first)
    end = ipaddress.ip_address(last)
    if start.version != end.version:
        raise ValueError(f"range {text!r} mixes address families")
    if int(end) < int(start):
        raise ValueError(f"range {start} to {end} not valid")
    return start, end


def build_set_from_addresses(addresses: Iterable[str]) -> IPSet:
    """Build a set from addresses, ``a-b`` ranges and CIDRs; raise ValueError on bad input."""
    result = IPSet()
    for address in addresses:
        if "-" in address:
            result.add_range(*parse_ip_range(address))
        elif "/" in address:
            result.add_network(address)
        else:
            result.add_address(ipaddress.ip_address(address))
    return result