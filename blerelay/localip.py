"""Discovery of the address this host uses to reach the outside world."""

from __future__ import annotations

import functools
import socket

_PROBE_ADDRESS = ("8.8.8.8", 53)


@functools.lru_cache(maxsize=None)
def local_ip() -> str:
    """Return the local IPv4 address of the route to the public internet.

    The answer is cached after the first success; failures raise OSError.
    """
    conn = socket.create_connection(_PROBE_ADDRESS)
    try:
        return conn.getsockname()[0]
    finally:
        conn.close()