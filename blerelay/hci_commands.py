"""HCI command parameters and command packet framing."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar, Optional

from blerelay.hci_opcodes import Opcode

COMMAND_PACKET_TYPE = 0x01


class HCICommandError(Exception):
    """An HCI command returned a status that was not expected."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


def _pack(fmt: str, *values: int) -> bytes:
    try:
        return struct.pack(fmt, *values)
    except struct.error as exc:
        raise ValueError(f"command field out of range: {values!r}") from exc


def _fixed(value: bytes, size: int, name: str) -> bytes:
    raw = bytes(value)
    if len(raw) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(raw)}")
    return raw


class CommandParam:
    """Parameters of one HCI command: its opcode, length and encoding."""

    opcode: ClassVar[int]
    length: ClassVar[int] = 0

    def _encode(self) -> bytes:
        return b""

    def marshal(self) -> bytes:
        """Return exactly ``length`` bytes of encoded parameters."""
        payload = self._encode()
        if len(payload) > self.length:
            raise ValueError(
                f"{type(self).__name__} encodes {len(payload)} bytes, "
                f"more than its length {self.length}"
            )
        return payload.ljust(self.length, b"\x00")


def command_packet(param: CommandParam) -> bytes:
    """Frame ``param`` as a complete HCI command packet."""
    header = _pack("<BHB", COMMAND_PACKET_TYPE, int(param.opcode), param.length)
    return header + param.marshal()


def check_status(param: CommandParam, response: bytes, expected: bytes) -> Optional[int]:
    """Check the status byte of ``response`` against ``expected`` values.

    Returns the status byte, or None when the response is empty and any
    status is acceptable.
    """
    status = response[0] if response else None
    if not expected:
        return status
    if status is None:
        raise HCICommandError(
            f"HCI command: '0x{int(param.opcode):04x}' returned no status, "
            f"expect: [{bytes(expected).hex().upper()}] "
        )
    if status not in bytes(expected):
        raise HCICommandError(
            f"HCI command: '0x{int(param.opcode):04x}' return 0x{status:02X}, "
            f"expect: [{bytes(expected).hex().upper()}] ",
            status,
        )
    return status


# Link control commands


@dataclass(frozen=True)
class Disconnect(CommandParam):
    """Disconnect a connection for a reason."""

    opcode: ClassVar[int] = Opcode.DISCONNECT
    length: ClassVar[int] = 3

    connection_handle: int = 0
    reason: int = 0

    def _encode(self) -> bytes:
        return _pack("<HB", self.connection_handle, self.reason)


# Link policy commands


@dataclass(frozen=True)
class WriteDefaultLinkPolicy(CommandParam):
    """Write the default link policy settings."""

    opcode: ClassVar[int] = Opcode.WRITE_DEFAULT_LINK_POLICY
    length: ClassVar[int] = 2

    default_link_policy_settings: int = 0

    def _encode(self) -> bytes:
        return _pack("<H", self.default_link_policy_settings)


# Host controller and baseband commands


@dataclass(frozen=True)
class SetEventMask(CommandParam):
    """Set the event mask."""

    opcode: ClassVar[int] = Opcode.SET_EVENT_MASK
    length: ClassVar[int] = 8

    event_mask: int = 0

    def _encode(self) -> bytes:
        return _pack("<Q", self.event_mask)


@dataclass(frozen=True)
class Reset(CommandParam):
    """Reset the controller."""

    opcode: ClassVar[int] = Opcode.RESET
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class Flush(CommandParam):
    """Flush a connection."""

    opcode: ClassVar[int] = Opcode.FLUSH
    length: ClassVar[int] = 2

    connection_handle: int = 0

    def _encode(self) -> bytes:
        return _pack("<H", self.connection_handle)


@dataclass(frozen=True)
class WritePageTimeout(CommandParam):
    """Write the page timeout."""

    opcode: ClassVar[int] = Opcode.WRITE_PAGE_TIMEOUT
    length: ClassVar[int] = 2

    page_timeout: int = 0

    def _encode(self) -> bytes:
        return _pack("<H", self.page_timeout)


@dataclass(frozen=True)
class WriteClassOfDevice(CommandParam):
    """Write the three-byte class of device."""

    opcode: ClassVar[int] = Opcode.WRITE_CLASS_OF_DEVICE
    length: ClassVar[int] = 3

    class_of_device: bytes = bytes(3)

    def _encode(self) -> bytes:
        return _fixed(self.class_of_device, 3, "class_of_device")


@dataclass(frozen=True)
class HostBufferSize(CommandParam):
    """Tell the controller the host's buffer sizes."""

    opcode: ClassVar[int] = Opcode.HOST_BUFFER_SIZE
    length: ClassVar[int] = 7

    host_acl_data_packet_length: int = 0
    host_synchronous_data_packet_length: int = 0
    host_total_num_acl_data_packets: int = 0
    host_total_num_synchronous_data_packets: int = 0

    def _encode(self) -> bytes:
        return _pack(
            "<HBHH",
            self.host_acl_data_packet_length,
            self.host_synchronous_data_packet_length,
            self.host_total_num_acl_data_packets,
            self.host_total_num_synchronous_data_packets,
        )


@dataclass(frozen=True)
class WriteInquiryScanType(CommandParam):
    """Write the inquiry scan type."""

    opcode: ClassVar[int] = Opcode.WRITE_INQUIRY_SCAN_TYPE
    length: ClassVar[int] = 1

    scan_type: int = 0

    def _encode(self) -> bytes:
        return _pack("<B", self.scan_type)


@dataclass(frozen=True)
class WriteInquiryMode(CommandParam):
    """Write the inquiry mode."""

    opcode: ClassVar[int] = Opcode.WRITE_INQUIRY_MODE
    length: ClassVar[int] = 1

    inquiry_mode: int = 0

    def _encode(self) -> bytes:
        return _pack("<B", self.inquiry_mode)


@dataclass(frozen=True)
class WritePageScanType(CommandParam):
    """Write the page scan type."""

    opcode: ClassVar[int] = Opcode.WRITE_PAGE_SCAN_TYPE
    length: ClassVar[int] = 1

    page_scan_type: int = 0

    def _encode(self) -> bytes:
        return _pack("<B", self.page_scan_type)


@dataclass(frozen=True)
class WriteSimplePairingMode(CommandParam):
    """Write the simple pairing mode."""

    opcode: ClassVar[int] = Opcode.WRITE_SIMPLE_PAIRING_MODE
    length: ClassVar[int] = 1

    simple_pairing_mode: int = 0

    def _encode(self) -> bytes:
        return _pack("<B", self.simple_pairing_mode)


@dataclass(frozen=True)
class SetEventMaskPage2(CommandParam):
    """Set the second page of the event mask."""

    opcode: ClassVar[int] = Opcode.SET_EVENT_MASK_PAGE2
    length: ClassVar[int] = 8

    event_mask_page2: int = 0

    def _encode(self) -> bytes:
        return _pack("<Q", self.event_mask_page2)


@dataclass(frozen=True)
class WriteLEHostSupported(CommandParam):
    """Write whether the host supports LE."""

    opcode: ClassVar[int] = Opcode.WRITE_LE_HOST_SUPPORTED
    length: ClassVar[int] = 2

    le_supported_host: int = 0
    simultaneous_le_host: int = 0

    def _encode(self) -> bytes:
        return _pack("<BB", self.le_supported_host, self.simultaneous_le_host)