"""Address information derived from a DHCP lease for a container interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from ipaddress import (
    IPv4Address,
    IPv4Interface,
    IPv6Address,
    IPv6Interface,
    ip_address,
    ip_interface,
)

from varknet.lease import Lease, ProxyError


def _parse_v4(value: str) -> IPv4Address:
    try:
        return IPv4Address(value)
    except ValueError as err:
        raise ProxyError(str(err)) from err


def get_prefix_length_v4(netmask: str) -> int:
    """Return the prefix length of a dotted subnet mask by counting its one bits."""
    return int(_parse_v4(netmask)).bit_count()


def handle_gws(gateways: list[str], netmask: str) -> list[IPv4Interface]:
    """Turn gateway addresses and a subnet mask into gateway networks."""
    result = []
    for route in gateways:
        prefix = get_prefix_length_v4(netmask)
        gateway = _parse_v4(route)
        result.append(IPv4Interface(f"{gateway}/{prefix}"))
    return result


@dataclass
class MacVlanAddress:
    """Address, gateways and prefix to configure on a container interface."""

    address: IPv4Address | IPv6Address
    interface: str
    prefix_length: int
    gateways: list[IPv4Interface] = field(default_factory=list)

    @classmethod
    def from_lease(cls, lease: Lease, interface: str) -> MacVlanAddress:
        """Build the interface configuration from a lease."""
        try:
            address = ip_address(lease.yiaddr)
        except ValueError as err:
            raise ProxyError(f"bad address: {err}") from err
        try:
            gateways = handle_gws(list(lease.gateways), lease.subnet_mask)
        except ProxyError as err:
            raise ProxyError(f"bad gateways: {err}") from err
        prefix_length = get_prefix_length_v4(lease.subnet_mask)
        return cls(
            address=address,
            interface=interface,
            prefix_length=prefix_length,
            gateways=gateways,
        )

    def interface_address(self) -> IPv4Interface | IPv6Interface:
        """Return the address with its prefix, as assigned to the interface."""
        max_prefix = self.address.max_prefixlen
        if not 0 <= self.prefix_length <= max_prefix:
            raise ProxyError("invalid IP prefix length")
        return ip_interface(f"{self.address}/{self.prefix_length}")