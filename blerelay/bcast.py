"""Broadcasting of tagged JSON values over UDP."""

from __future__ import annotations

import dataclasses
import json
import logging
import queue
import socket
import threading
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from blerelay.conn import dial_broadcast_udp

log = logging.getLogger(__name__)

DEFAULT_HOST = "192.168.1.2"
_BUFFER_SIZE = 1024
_POLL = 0.01

Channels = Union[Mapping[str, "queue.Queue[Any]"], Iterable[tuple[str, "queue.Queue[Any]"]]]


def _channel_list(channels: Channels) -> list[tuple[str, "queue.Queue[Any]"]]:
    pairs = list(channels.items()) if isinstance(channels, Mapping) else list(channels)
    seen: dict[str, int] = {}
    for position, (tag, _) in enumerate(pairs, start=1):
        if not isinstance(tag, str) or not tag:
            raise ValueError(f"channel tag must be a non-empty string (arg#{position})")
        if tag in seen:
            raise ValueError(
                "All channels must have mutually different tags, "
                f"arg#{seen[tag]} and arg#{position} both have tag {tag!r}"
            )
        seen[tag] = position
    return pairs


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def encode_tagged(tag: str, value: Any) -> bytes:
    """Encode ``value`` as compact JSON preceded by ``tag``."""
    body = json.dumps(_jsonable(value), separators=(",", ":"))
    return tag.encode("utf-8") + body.encode("utf-8")


def decode_tagged(data: bytes, tags: Iterable[str]) -> list[tuple[str, Any]]:
    """Decode ``data`` for every tag it starts with.

    Returns (tag, value) pairs; raises ValueError if a matching payload is not JSON.
    """
    results = []
    for tag in tags:
        prefix = tag.encode("utf-8")
        if (data + b"{").startswith(prefix):
            results.append((tag, json.loads(data[len(prefix):].decode("utf-8"))))
    return results


def transmit(
    port: int,
    channels: Channels,
    host: str = DEFAULT_HOST,
    stop: Optional[threading.Event] = None,
) -> None:
    """Send every value put on the channels to ``host``:``port`` until ``stop`` is set."""
    pairs = _channel_list(channels)
    stop = stop or threading.Event()
    with dial_broadcast_udp(port) as sock:
        while not stop.is_set():
            sent = False
            for tag, channel in pairs:
                try:
                    value = channel.get_nowait()
                except queue.Empty:
                    continue
                sent = True
                try:
                    sock.sendto(encode_tagged(tag, value), (host, port))
                except (TypeError, ValueError) as exc:
                    log.warning("cannot encode value for %s: %s", tag, exc)
                except OSError as exc:
                    log.warning("broadcast on port %d failed: %s", port, exc)
            if not sent:
                stop.wait(_POLL)


def receive(port: int, channels: Channels, stop: Optional[threading.Event] = None) -> None:
    """Put every tagged value received on ``port`` on its channel until ``stop`` is set."""
    pairs = _channel_list(channels)
    by_tag = dict(pairs)
    stop = stop or threading.Event()
    with dial_broadcast_udp(port) as sock:
        sock.settimeout(0.1)
        while not stop.is_set():
            try:
                data, _ = sock.recvfrom(_BUFFER_SIZE)
            except socket.timeout:
                continue
            try:
                decoded = decode_tagged(data, by_tag)
            except ValueError as exc:
                log.warning("dropping undecodable datagram: %s", exc)
                continue
            for tag, value in decoded:
                by_tag[tag].put(value)