"""Container network helpers: DHCP proxy paths, lease records, interface addresses and a lease cache."""

__version__ = "1.12.1"