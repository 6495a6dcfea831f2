"""DHCP lease and network configuration records exchanged with the proxy."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from ipaddress import AddressValueError, IPv4Address
from pathlib import Path
from typing import Any, Iterable

_UNSPECIFIED = IPv4Address("0.0.0.0")
_U16_MAX = 0xFFFF


class ProxyError(Exception):
    """An error raised while handling DHCP proxy data."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


@dataclass
class DhcpV4Lease:
    """A DHCPv4 lease as handed out by a DHCP server."""

    siaddr: IPv4Address = _UNSPECIFIED
    yiaddr: IPv4Address = _UNSPECIFIED
    t1: int = 0
    t2: int = 0
    lease_time: int = 0
    srv_id: IPv4Address = _UNSPECIFIED
    subnet_mask: IPv4Address = _UNSPECIFIED
    broadcast_addr: IPv4Address | None = None
    dns_srvs: list[IPv4Address] | None = None
    gateways: list[IPv4Address] | None = None
    ntp_srvs: list[IPv4Address] | None = None
    mtu: int | None = None
    host_name: str | None = None
    domain_name: str | None = None


def handle_ip_vectors(ips: Iterable[IPv4Address] | None) -> list[str]:
    """Render an optional list of addresses as strings; None gives an empty list."""
    if ips is None:
        return []
    return [str(ip) for ip in ips]


def to_v4_addrs(addrs: list[str]) -> list[IPv4Address] | None:
    """Parse address strings; an empty list gives None.

    Raises AddressValueError on the first address that does not parse.
    """
    if not addrs:
        return None
    return [IPv4Address(addr) for addr in addrs]


def _parse_v4(value: str) -> IPv4Address:
    try:
        return IPv4Address(value)
    except AddressValueError as err:
        raise ProxyError(str(err)) from err


def _required(data: dict[str, Any], name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise ProxyError(f"missing field `{name}`") from None


@dataclass
class Lease:
    """A lease in the form the proxy stores and returns to clients."""

    t1: int = 0
    t2: int = 0
    lease_time: int = 0
    mtu: int = 0
    domain_name: str = ""
    mac_address: str = ""
    siaddr: str = ""
    yiaddr: str = ""
    srv_id: str = ""
    subnet_mask: str = ""
    broadcast_addr: str = ""
    dns_servers: list[str] = field(default_factory=list)
    gateways: list[str] = field(default_factory=list)
    ntp_servers: list[str] = field(default_factory=list)
    host_name: str = ""
    is_v6: bool = False

    def add_mac_address(self, mac_addr: str) -> None:
        """Set the MAC address of the lease."""
        self.mac_address = str(mac_addr)

    def add_domain_name(self, domain_name: str) -> None:
        """Set the domain name of the lease."""
        self.domain_name = str(domain_name)

    def to_dict(self) -> dict[str, Any]:
        """Return the lease as a JSON-ready dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Lease:
        """Build a lease from a dictionary holding every field."""
        values = {f.name: _required(data, f.name) for f in fields(cls)}
        for name in ("dns_servers", "gateways", "ntp_servers"):
            values[name] = [str(item) for item in values[name]]
        return cls(**values)

    @classmethod
    def from_v4(cls, v4: DhcpV4Lease) -> Lease:
        """Convert a DHCPv4 lease; optional values fall back to empty ones."""
        return cls(
            t1=v4.t1,
            t2=v4.t2,
            lease_time=v4.lease_time,
            mtu=v4.mtu if v4.mtu is not None else 0,
            domain_name=v4.domain_name if v4.domain_name is not None else "",
            mac_address="",
            siaddr=str(v4.siaddr),
            yiaddr=str(v4.yiaddr),
            srv_id=str(v4.srv_id),
            subnet_mask=str(v4.subnet_mask),
            broadcast_addr="",
            dns_servers=handle_ip_vectors(v4.dns_srvs),
            gateways=handle_ip_vectors(v4.gateways),
            ntp_servers=handle_ip_vectors(v4.ntp_srvs),
            host_name=v4.host_name if v4.host_name is not None else "",
            is_v6=False,
        )

    def to_v4(self) -> DhcpV4Lease:
        """Convert back to a DHCPv4 lease, raising ProxyError on bad values."""
        broadcast = _parse_v4(self.broadcast_addr) if self.broadcast_addr else None
        if not 0 <= self.mtu <= _U16_MAX:
            raise ProxyError("out of range integral type conversion attempted")
        try:
            dns_srvs = to_v4_addrs(self.dns_servers)
            gateways = to_v4_addrs(self.gateways)
            ntp_srvs = to_v4_addrs(self.ntp_servers)
        except AddressValueError as err:
            raise ProxyError(str(err)) from err
        return DhcpV4Lease(
            siaddr=_parse_v4(self.siaddr),
            yiaddr=_parse_v4(self.yiaddr),
            t1=self.t1,
            t2=self.t2,
            lease_time=self.lease_time,
            srv_id=_parse_v4(self.srv_id),
            subnet_mask=_parse_v4(self.subnet_mask),
            broadcast_addr=broadcast,
            dns_srvs=dns_srvs,
            gateways=gateways,
            ntp_srvs=ntp_srvs,
            mtu=self.mtu,
            host_name=self.host_name or None,
            domain_name=self.domain_name or None,
        )


@dataclass
class NetworkConfig:
    """What a client sends to the proxy to request or release a lease."""

    host_iface: str = ""
    container_mac_addr: str = ""
    domain_name: str = ""
    host_name: str = ""
    version: int = 0
    ns_path: str = ""
    container_iface: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a JSON-ready dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NetworkConfig:
        """Build a configuration from a dictionary holding every field."""
        return cls(**{f.name: _required(data, f.name) for f in fields(cls)})

    @classmethod
    def load(cls, path: str | Path) -> NetworkConfig:
        """Read a configuration from a JSON file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_dict(json.load(handle))