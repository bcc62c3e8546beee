"""Peer discovery by periodic UDP broadcast of node identifiers."""

from __future__ import annotations

import logging
import queue
import socket
import threading
import time
from dataclasses import dataclass, field
from typing import Optional

from blerelay.conn import dial_broadcast_udp

log = logging.getLogger(__name__)

INTERVAL = 0.050
TIMEOUT = 0.999
_BUFFER_SIZE = 1024


@dataclass
class PeerUpdate:
    """The peers currently alive, the one just seen and those just lost."""

    peers: list[str] = field(default_factory=list)
    new: str = ""
    lost: list[str] = field(default_factory=list)


class PeerTracker:
    """Remembers when each peer was last heard and reports changes."""

    def __init__(self, timeout: float = TIMEOUT) -> None:
        self.timeout = timeout
        self._last_seen: dict[str, float] = {}

    @property
    def peers(self) -> list[str]:
        """The peers currently considered alive, sorted."""
        return sorted(self._last_seen)

    def observe(self, peer_id: str, now: float) -> Optional[PeerUpdate]:
        """Record a heartbeat (or none, if ``peer_id`` is empty) at time ``now``.

        Returns a PeerUpdate when a peer appeared or timed out, else None.
        """
        updated = False
        new = ""
        if peer_id:
            if peer_id not in self._last_seen:
                new = peer_id
                updated = True
            self._last_seen[peer_id] = now

        lost = sorted(
            peer for peer, seen in self._last_seen.items() if now - seen > self.timeout
        )
        for peer in lost:
            del self._last_seen[peer]
        if lost:
            updated = True

        if not updated:
            return None
        return PeerUpdate(peers=sorted(self._last_seen), new=new, lost=lost)


def transmitter(
    port: int,
    peer_id: str,
    enable: "queue.Queue[bool]",
    stop: Optional[threading.Event] = None,
) -> None:
    """Broadcast ``peer_id`` every interval while enabled, until ``stop`` is set."""
    stop = stop or threading.Event()
    enabled = True
    payload = peer_id.encode("utf-8")
    with dial_broadcast_udp(port) as sock:
        while not stop.is_set():
            try:
                enabled = enable.get(timeout=INTERVAL)
            except queue.Empty:
                pass
            if enabled and not stop.is_set():
                try:
                    sock.sendto(payload, ("255.255.255.255", port))
                except OSError as exc:
                    log.debug("heartbeat on port %d failed: %s", port, exc)


def receiver(
    port: int,
    updates: "queue.Queue[PeerUpdate]",
    stop: Optional[threading.Event] = None,
) -> None:
    """Listen for heartbeats on ``port`` and put peer changes on ``updates``."""
    stop = stop or threading.Event()
    tracker = PeerTracker()
    with dial_broadcast_udp(port) as sock:
        sock.settimeout(INTERVAL)
        while not stop.is_set():
            try:
                data, _ = sock.recvfrom(_BUFFER_SIZE)
            except socket.timeout:
                data = b""
            peer_id = data.decode("utf-8", errors="replace")
            update = tracker.observe(peer_id, time.monotonic())
            if update is not None:
                updates.put(update)