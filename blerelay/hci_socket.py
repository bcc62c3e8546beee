"""Minimal helpers for Bluetooth HCI sockets."""

from __future__ import annotations

import errno
import socket
import struct
import time
from dataclasses import dataclass
from typing import Any

AF_BLUETOOTH = getattr(socket, "AF_BLUETOOTH", 0)

# Bluetooth protocols
BTPROTO_L2CAP = 0
BTPROTO_HCI = 1
BTPROTO_SCO = 2
BTPROTO_RFCOMM = 3
BTPROTO_BNEP = 4
BTPROTO_CMTP = 5
BTPROTO_HIDP = 6
BTPROTO_AVDTP = 7

# HCI channels
HCI_CHANNEL_RAW = 0
HCI_CHANNEL_USER = 1
HCI_CHANNEL_MONITOR = 2
HCI_CHANNEL_CONTROL = 3

# Socket levels
SOL_HCI = 0
SOL_L2CAP = 6
SOL_SCO = 17
SOL_RFCOMM = 18
SOL_BLUETOOTH = 274

# HCI socket options
HCI_DATA_DIR = 1
HCI_FILTER = 2
HCI_TIME_STAMP = 3

_ATTEMPTS = 5
_RETRY_DELAY = 1.0


class SocketOpenError(OSError):
    """The Bluetooth socket stayed busy."""

    def __init__(self, message: str = "unable to open bluetooth socket to device") -> None:
        super().__init__(message)


class SocketBindTimeout(OSError):
    """Binding to the Bluetooth device kept failing with EBUSY."""

    def __init__(self, message: str = "timeout occurred binding to bluetooth device") -> None:
        super().__init__(message)


@dataclass
class SockaddrHCI:
    """An HCI socket address: device index and channel."""

    dev: int = 0
    channel: int = HCI_CHANNEL_RAW

    def _validate(self) -> None:
        if not 0 <= self.dev <= 0xFFFF or not 0 <= self.channel <= 0xFFFF:
            raise OSError(errno.EINVAL, "invalid HCI socket address")

    def pack(self) -> bytes:
        """Return the raw sockaddr_hci structure."""
        self._validate()
        return struct.pack("=HHH", AF_BLUETOOTH, self.dev, self.channel)

    def _bind_address(self) -> tuple:
        self._validate()
        if self.channel == HCI_CHANNEL_RAW:
            return (self.dev,)
        return (self.dev, self.channel)


@dataclass
class HCIFilter:
    """An HCI socket filter of packet types, events and opcode."""

    type_mask: int = 0
    event_mask: tuple[int, int] = (0, 0)
    opcode: int = 0

    def pack(self) -> bytes:
        """Return the raw filter structure, padded as the kernel expects."""
        low, high = self.event_mask
        return struct.pack("=IIIH2x", self.type_mask, low, high, self.opcode)


def open_socket(domain: int, kind: int, proto: int) -> socket.socket:
    """Open a socket, retrying while the device reports EBUSY."""
    for _ in range(_ATTEMPTS):
        try:
            return socket.socket(domain, kind, proto)
        except OSError as exc:
            if exc.errno != errno.EBUSY:
                raise
        time.sleep(_RETRY_DELAY)
    raise SocketOpenError()


def bind(sock: Any, address: SockaddrHCI) -> None:
    """Bind ``sock`` to ``address``, retrying while the device reports EBUSY."""
    target = address._bind_address()
    for _ in range(_ATTEMPTS):
        try:
            sock.bind(target)
            return
        except OSError as exc:
            if exc.errno != errno.EBUSY:
                raise
        time.sleep(_RETRY_DELAY)
    raise SocketBindTimeout()


def set_filter(sock: Any, hci_filter: HCIFilter) -> None:
    """Install ``hci_filter`` on ``sock``."""
    sock.setsockopt(SOL_HCI, HCI_FILTER, hci_filter.pack())