"""Shared settings and message records for the relay nodes."""

from __future__ import annotations

from dataclasses import dataclass

N_NODES = 3
MASTER = 1


@dataclass
class Message:
    """A UUID sighting reported by the node at ``ip``."""

    ip: str = ""
    uuid: str = ""


@dataclass
class AcknowledgeMessage:
    """Acknowledgement of a relayed UUID."""

    ip: str = ""
    uuid: str = ""
    not_acknowledged: bool = False


@dataclass
class PeerStatusUpdate:
    """Reachability of the peer at ``ip``."""

    ip: str = ""
    online: bool = False