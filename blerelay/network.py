"""Ties peer discovery and UUID broadcasting together."""

from __future__ import annotations

import queue
import threading
from typing import Optional

from blerelay import bcast, peers
from blerelay.config import PeerStatusUpdate

PEER_PORT = 20004
BROADCAST_PORT = 15647
MESSAGE_TAG = "string"
_POLL = 0.01


def peer_statuses(update: peers.PeerUpdate) -> list[PeerStatusUpdate]:
    """Turn a peer update into online/offline status records."""
    statuses = []
    if update.new:
        statuses.append(PeerStatusUpdate(ip=update.new, online=True))
    statuses.extend(PeerStatusUpdate(ip=ip, online=False) for ip in update.lost)
    return statuses


def broadcast_message(message: str, channel: "queue.Queue[str]") -> None:
    """Hand ``message`` to the broadcast channel."""
    channel.put(message)


def sync(
    events: "queue.Queue[str]",
    online_status: "queue.Queue[PeerStatusUpdate]",
    local_ip: str,
    stop: Optional[threading.Event] = None,
) -> None:
    """Broadcast outgoing messages and report peer status until ``stop`` is set.

    ``events`` carries outgoing messages; peer changes go to ``online_status``.
    """
    stop = stop or threading.Event()
    peer_updates: "queue.Queue[peers.PeerUpdate]" = queue.Queue()
    peer_enable: "queue.Queue[bool]" = queue.Queue()
    outgoing: "queue.Queue[str]" = queue.Queue()

    workers = [
        threading.Thread(
            target=peers.transmitter, args=(PEER_PORT, local_ip, peer_enable, stop), daemon=True
        ),
        threading.Thread(
            target=peers.receiver, args=(PEER_PORT, peer_updates, stop), daemon=True
        ),
        threading.Thread(
            target=bcast.transmit,
            args=(BROADCAST_PORT, {MESSAGE_TAG: outgoing}, bcast.DEFAULT_HOST, stop),
            daemon=True,
        ),
    ]
    for worker in workers:
        worker.start()

    while not stop.is_set():
        handled = False
        try:
            update = peer_updates.get_nowait()
        except queue.Empty:
            pass
        else:
            handled = True
            for status in peer_statuses(update):
                online_status.put(status)
        try:
            message = events.get_nowait()
        except queue.Empty:
            pass
        else:
            handled = True
            broadcast_message(message, outgoing)
        if not handled:
            stop.wait(_POLL)