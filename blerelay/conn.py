"""UDP sockets that can send and receive broadcasts."""

from __future__ import annotations

import socket


def dial_broadcast_udp(port: int) -> socket.socket:
    """Open a UDP socket bound to ``port`` on all interfaces, with broadcast enabled.

    The address is marked reusable, so several nodes on one host may share the port.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    return sock