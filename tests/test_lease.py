import json
from ipaddress import AddressValueError, IPv4Address

import pytest

from varknet.lease import (
    DhcpV4Lease,
    Lease,
    NetworkConfig,
    ProxyError,
    handle_ip_vectors,
    to_v4_addrs,
)


def _sample_v4() -> DhcpV4Lease:
    return DhcpV4Lease(
        siaddr=IPv4Address("10.0.0.1"),
        yiaddr=IPv4Address("10.0.0.50"),
        t1=1800,
        t2=3150,
        lease_time=3600,
        srv_id=IPv4Address("10.0.0.1"),
        subnet_mask=IPv4Address("255.255.255.0"),
        dns_srvs=[IPv4Address("10.0.0.2"), IPv4Address("10.0.0.3")],
        gateways=[IPv4Address("10.0.0.1")],
        ntp_srvs=None,
        mtu=1500,
        host_name="host",
        domain_name="example.com",
    )


def test_handle_gw():
    ips = [IPv4Address(f"10.1.{i}.1") for i in range(5)]
    response = handle_ip_vectors(ips)
    assert len(response) == 5
    assert response[0] == "10.1.0.1"


def test_handle_ip_vectors_none_is_empty():
    assert handle_ip_vectors(None) == []


def test_to_v4_addrs_empty_is_none():
    assert to_v4_addrs([]) is None


def test_to_v4_addrs_parses():
    assert to_v4_addrs(["1.2.3.4", "5.6.7.8"]) == [
        IPv4Address("1.2.3.4"),
        IPv4Address("5.6.7.8"),
    ]


def test_to_v4_addrs_bad_address():
    with pytest.raises(AddressValueError):
        to_v4_addrs(["1.2.3.4", "10.10.10"])


def test_from_v4_fields():
    lease = Lease.from_v4(_sample_v4())
    assert lease.yiaddr == "10.0.0.50"
    assert lease.subnet_mask == "255.255.255.0"
    assert lease.dns_servers == ["10.0.0.2", "10.0.0.3"]
    assert lease.ntp_servers == []
    assert lease.mtu == 1500
    assert lease.mac_address == ""
    assert lease.broadcast_addr == ""
    assert lease.is_v6 is False


def test_from_v4_defaults_for_missing_options():
    lease = Lease.from_v4(DhcpV4Lease())
    assert lease.mtu == 0
    assert lease.domain_name == ""
    assert lease.host_name == ""
    assert lease.yiaddr == "0.0.0.0"


def test_v4_round_trip():
    original = _sample_v4()
    back = Lease.from_v4(original).to_v4()
    assert back == original


def test_to_v4_empty_strings_become_none():
    lease = Lease.from_v4(_sample_v4())
    lease.host_name = ""
    lease.domain_name = ""
    v4 = lease.to_v4()
    assert v4.host_name is None
    assert v4.domain_name is None
    assert v4.broadcast_addr is None
    assert v4.ntp_srvs is None


def test_to_v4_broadcast_parsed():
    lease = Lease.from_v4(_sample_v4())
    lease.broadcast_addr = "10.0.0.255"
    assert lease.to_v4().broadcast_addr == IPv4Address("10.0.0.255")


def test_to_v4_mtu_out_of_range():
    lease = Lease.from_v4(_sample_v4())
    lease.mtu = 70000
    with pytest.raises(ProxyError):
        lease.to_v4()


def test_to_v4_bad_yiaddr():
    lease = Lease.from_v4(_sample_v4())
    lease.yiaddr = "10.0.0"
    with pytest.raises(ProxyError):
        lease.to_v4()


def test_to_v4_bad_gateway():
    lease = Lease.from_v4(_sample_v4())
    lease.gateways = ["nope"]
    with pytest.raises(ProxyError):
        lease.to_v4()


def test_add_mac_and_domain():
    lease = Lease()
    lease.add_mac_address("02:00:00:00:00:01")
    lease.add_domain_name("example.com")
    assert lease.mac_address == "02:00:00:00:00:01"
    assert lease.domain_name == "example.com"


def test_lease_dict_round_trip():
    lease = Lease.from_v4(_sample_v4())
    lease.add_mac_address("02:00:00:00:00:01")
    data = json.loads(json.dumps(lease.to_dict()))
    assert Lease.from_dict(data) == lease


def test_lease_from_dict_missing_field():
    data = Lease().to_dict()
    del data["yiaddr"]
    with pytest.raises(ProxyError, match="yiaddr"):
        Lease.from_dict(data)


def test_network_config_load(tmp_path):
    config = NetworkConfig(
        host_iface="eth0",
        container_mac_addr="02:00:00:00:00:01",
        domain_name="example.com",
        host_name="host",
        version=0,
        ns_path="/run/netns/test",
        container_iface="eth1",
    )
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config.to_dict()), encoding="utf-8")
    assert NetworkConfig.load(path) == config


def test_network_config_missing_field():
    with pytest.raises(ProxyError, match="host_iface"):
        NetworkConfig.from_dict({"version": 0})


def test_network_config_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        NetworkConfig.load(tmp_path / "absent.json")