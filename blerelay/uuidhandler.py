"""Forwards locally seen UUIDs and tracks which nodes are online."""

from __future__ import annotations

import queue
import threading
from typing import Optional, Union

from blerelay.config import N_NODES, PeerStatusUpdate

Event = Union[PeerStatusUpdate, str]


class UUIDHandler:
    """Keeps the online table of the nodes and relays UUIDs to the network."""

    def __init__(self, local_ip: str, outgoing: "queue.Queue[str]") -> None:
        self._statuses = [PeerStatusUpdate() for _ in range(N_NODES)]
        self._statuses[0].ip = local_ip
        self._outgoing = outgoing

    @property
    def statuses(self) -> list[PeerStatusUpdate]:
        """A copy of the online table; entry 0 is this node."""
        return [PeerStatusUpdate(ip=s.ip, online=s.online) for s in self._statuses]

    def update_status(self, status: PeerStatusUpdate) -> None:
        """Apply ``status`` to every other node whose address matches."""
        for node in self._statuses[1:]:
            if node.ip == status.ip:
                node.online = status.online

    def forward(self, uuid: str) -> None:
        """Send a locally seen UUID to the network."""
        self._outgoing.put(uuid)

    def run(self, events: "queue.Queue[Event]", stop: Optional[threading.Event] = None) -> None:
        """Handle status updates and UUIDs from ``events`` until ``stop`` is set."""
        stop = stop or threading.Event()
        while not stop.is_set():
            try:
                event = events.get(timeout=0.05)
            except queue.Empty:
                continue
            if isinstance(event, PeerStatusUpdate):
                self.update_status(event)
            elif isinstance(event, str):
                self.forward(event)
            else:
                raise TypeError(f"unexpected event: {event!r}")