"""In-memory lease cache mirrored to a writable stream."""

from __future__ import annotations

import copy
import io
import json
import logging
from typing import IO, Any

from varknet.lease import Lease

log = logging.getLogger(__name__)


class LeaseCache:
    """Holds leases keyed by container MAC address and mirrors them to a writer.

    The writer is any seekable, truncatable stream, text or binary: a file in
    production, an in-memory buffer in tests. Every change rewrites the whole
    stream with the JSON form of the cache.
    """

    def __init__(self, writer: IO[Any]) -> None:
        self._mem: dict[str, list[Lease]] = {}
        self._writer = writer

    def add_lease(self, mac_addr: str, lease: Lease) -> None:
        """Store a new lease for a container and save the cache."""
        log.debug("add lease: %r", mac_addr)
        self._mem[str(mac_addr)] = [copy.deepcopy(lease)]
        self._save()

    def update_lease(self, mac_addr: str, lease: Lease) -> None:
        """Replace the lease of a container and save the cache."""
        self._mem[str(mac_addr)] = [copy.deepcopy(lease)]
        self._save()

    def remove_lease(self, mac_addr: str) -> Lease:
        """Remove and return the lease of a container.

        A blank lease is returned, and nothing is written, when the container
        has no lease in the cache.
        """
        log.debug("remove lease: %r", mac_addr)
        leases = self._mem.pop(mac_addr, None)
        if leases is None:
            return Lease()
        self._save()
        return copy.deepcopy(leases[0])

    def teardown(self) -> None:
        """Drop every lease and save the now empty cache."""
        self._mem.clear()
        self._save()

    def __len__(self) -> int:
        return len(self._mem)

    def is_empty(self) -> bool:
        """Return True when the cache holds no leases."""
        return not self._mem

    def _clear_writer(self) -> bool:
        try:
            self._writer.seek(0)
            self._writer.truncate(0)
        except (OSError, ValueError) as err:
            log.error(
                "Could not clear the writer. Not updating lease information: %s", err
            )
            return False
        return True

    def _save(self) -> None:
        if not self._clear_writer():
            return
        data = json.dumps(
            {mac: [lease.to_dict() for lease in leases] for mac, leases in self._mem.items()},
            separators=(",", ":"),
        )
        if isinstance(self._writer, io.TextIOBase):
            self._writer.write(data)
        else:
            self._writer.write(data.encode("utf-8"))
        self._writer.flush()