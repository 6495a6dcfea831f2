# varknet

Building blocks for handling DHCP leases on behalf of containers. It is a library only.

## Modules

- **`varknet.proxy_conf`** finds where the DHCP proxy keeps its files.
  - `get_run_dir(run_cli)` picks the run directory. The `NETAVARK_PROXY_RUN_DIR_ENV` environment variable is used first. If it is not set, the given option is used. If there is no option either, the default `/run/podman` is used.
  - `get_proxy_sock_fqname(run_dir_opt)` returns the path of the socket file (`nv-proxy.sock`) inside that directory.
  - `get_cache_fqname(run_dir)` returns the path of the lease cache file (`nv-proxy.lease`) inside that directory.
  - The module also holds defaults such as `DEFAULT_TIMEOUT` (8 seconds) and `DEFAULT_INACTIVITY_TIMEOUT` (300 seconds).
- **`varknet.lease`** holds the lease and configuration records.
  - `DhcpV4Lease` is a lease as a DHCP server hands it out, with `ipaddress` values.
  - `Lease` is the string-based form that is stored and returned to clients:
    - `Lease.from_v4` and `Lease.to_v4` convert between the two forms. `to_v4` raises `ProxyError` on addresses that do not parse or an MTU out of range.
    - `to_dict` and `from_dict` give a JSON-ready form. `from_dict` raises `ProxyError` if a field is missing.
    - `add_mac_address` and `add_domain_name` fill in the MAC address and the domain name.
  - `NetworkConfig` is what a client sends to request or release a lease. It has `to_dict`, `from_dict` and `load(path)`, which reads JSON from a file.
  - `handle_ip_vectors` and `to_v4_addrs` convert between lists of addresses and lists of strings.
- **`varknet.ip`** turns a lease into what a container interface needs.
  - `get_prefix_length_v4` counts the one bits of a dotted subnet mask.
  - `handle_gws` turns gateway addresses and a mask into gateway networks.
  - `MacVlanAddress.from_lease` collects the address, prefix length and gateways of a lease.
  - `MacVlanAddress.interface_address` returns the address with its prefix.
  - Bad input raises `ProxyError`.
- **`varknet.cache`** provides `LeaseCache`, which keeps leases by container MAC address.
  - Every change rewrites the given stream with the JSON form of the whole cache. The stream may be text or binary, but must allow seek and truncate.
  - The methods are `add_lease`, `update_lease`, `remove_lease` and `teardown`. Use `len()` and `is_empty()` to check how many leases it holds.
  - `remove_lease` returns a blank `Lease` for a MAC address that the cache does not hold.

## Library use

```python
import io
from varknet.cache import LeaseCache
from varknet.ip import MacVlanAddress
from varknet.lease import Lease

lease = Lease(yiaddr="10.88.0.5", subnet_mask="255.255.0.0", gateways=["10.88.0.1"])
cache = LeaseCache(io.StringIO())
cache.add_lease("02:00:00:00:00:01", lease)
print(len(cache))  # 1

addr = MacVlanAddress.from_lease(lease, "eth0")
print(addr.interface_address())  # 10.88.0.5/16
```

## What it does not do

The package has no command-line program. It does not run a DHCP proxy server or client, and it does not speak to a DHCP server. It does not configure addresses or routes in a network namespace. It does not manage DNS server configuration. It only provides the records, paths, address calculations and cache described above.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```