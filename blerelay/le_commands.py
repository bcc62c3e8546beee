"""Parameters of the HCI LE controller commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from blerelay.hci_commands import CommandParam, _fixed, _pack
from blerelay.hci_opcodes import Opcode

_MAX_ADVERTISING_DATA = 31


def _mac(value: bytes, name: str) -> bytes:
    """Encode a six-byte device address in wire (little-endian) order."""
    return _fixed(value, 6, name)[::-1]


def _length_prefixed(length: int, data: bytes, name: str) -> bytes:
    """Encode a length byte and a 31-byte field holding ``length`` bytes of ``data``."""
    raw = bytes(data)
    if len(raw) > _MAX_ADVERTISING_DATA:
        raise ValueError(f"{name} holds at most {_MAX_ADVERTISING_DATA} bytes, got {len(raw)}")
    if not 0 <= length <= _MAX_ADVERTISING_DATA:
        raise ValueError(f"{name} length out of range: {length!r}")
    field = raw.ljust(_MAX_ADVERTISING_DATA, b"\x00")
    return bytes([length]) + field[:length]


@dataclass(frozen=True)
class LESetEventMask(CommandParam):
    """Set the LE event mask."""

    opcode: ClassVar[int] = Opcode.LE_SET_EVENT_MASK
    length: ClassVar[int] = 8

    le_event_mask: int = 0

    def _encode(self) -> bytes:
        return _pack("<Q", self.le_event_mask)


@dataclass(frozen=True)
class LEReadBufferSize(CommandParam):
    """Read the LE ACL buffer size."""

    opcode: ClassVar[int] = Opcode.LE_READ_BUFFER_SIZE
    length: ClassVar[int] = 1


@dataclass(frozen=True)
class LEReadLocalSupportedFeatures(CommandParam):
    """Read the LE features the controller supports."""

    opcode: ClassVar[int] = Opcode.LE_READ_LOCAL_SUPPORTED_FEATURES
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LESetRandomAddress(CommandParam):
    """Set the random device address."""

    opcode: ClassVar[int] = Opcode.LE_SET_RANDOM_ADDRESS
    length: ClassVar[int] = 6

    random_address: bytes = bytes(6)

    def _encode(self) -> bytes:
        return _mac(self.random_address, "random_address")


@dataclass(frozen=True)
class LESetAdvertisingParameters(CommandParam):
    """Set the advertising interval, type, addresses and channels."""

    opcode: ClassVar[int] = Opcode.LE_SET_ADVERTISING_PARAMETERS
    length: ClassVar[int] = 15

    advertising_interval_min: int = 0
    advertising_interval_max: int = 0
    advertising_type: int = 0
    own_address_type: int = 0
    direct_address_type: int = 0
    direct_address: bytes = bytes(6)
    advertising_channel_map: int = 0
    advertising_filter_policy: int = 0

    def _encode(self) -> bytes:
        return (
            _pack(
                "<HHBBB",
                self.advertising_interval_min,
                self.advertising_interval_max,
                self.advertising_type,
                self.own_address_type,
                self.direct_address_type,
            )
            + _mac(self.direct_address, "direct_address")
            + _pack("<BB", self.advertising_channel_map, self.advertising_filter_policy)
        )


@dataclass(frozen=True)
class LEReadAdvertisingChannelTxPower(CommandParam):
    """Read the transmit power used on advertising channels."""

    opcode: ClassVar[int] = Opcode.LE_READ_ADVERTISING_CHANNEL_TX_POWER
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LESetAdvertisingData(CommandParam):
    """Set up to 31 bytes of advertising data."""

    opcode: ClassVar[int] = Opcode.LE_SET_ADVERTISING_DATA
    length: ClassVar[int] = 32

    advertising_data_length: int = 0
    advertising_data: bytes = b""

    def _encode(self) -> bytes:
        return _length_prefixed(
            self.advertising_data_length, self.advertising_data, "advertising_data"
        )


@dataclass(frozen=True)
class LESetScanResponseData(CommandParam):
    """Set up to 31 bytes of scan response data."""

    opcode: ClassVar[int] = Opcode.LE_SET_SCAN_RESPONSE_DATA
    length: ClassVar[int] = 32

    scan_response_data_length: int = 0
    scan_response_data: bytes = b""

    def _encode(self) -> bytes:
        return _length_prefixed(
            self.scan_response_data_length, self.scan_response_data, "scan_response_data"
        )


@dataclass(frozen=True)
class LESetAdvertiseEnable(CommandParam):
    """Turn advertising on or off."""

    opcode: ClassVar[int] = Opcode.LE_SET_ADVERTISE_ENABLE
    length: ClassVar[int] = 1

    advertising_enable: int = 0

    def _encode(self) -> bytes:
        return _pack("<B", self.advertising_enable)


@dataclass(frozen=True)
class LESetScanParameters(CommandParam):
    """Set the scan type, interval, window and filter policy."""

    opcode: ClassVar[int] = Opcode.LE_SET_SCAN_PARAMETERS
    length: ClassVar[int] = 7

    le_scan_type: int = 0
    le_scan_interval: int = 0
    le_scan_window: int = 0
    own_address_type: int = 0
    scanning_filter_policy: int = 0

    def _encode(self) -> bytes:
        return _pack(
            "<BHHBB",
            self.le_scan_type,
            self.le_scan_interval,
            self.le_scan_window,
            self.own_address_type,
            self.scanning_filter_policy,
        )


@dataclass(frozen=True)
class LESetScanEnable(CommandParam):
    """Turn scanning on or off."""

    opcode: ClassVar[int] = Opcode.LE_SET_SCAN_ENABLE
    length: ClassVar[int] = 2

    le_scan_enable: int = 0
    filter_duplicates: int = 0

    def _encode(self) -> bytes:
        return _pack("<BB", self.le_scan_enable, self.filter_duplicates)


@dataclass(frozen=True)
class LECreateConn(CommandParam):
    """Create a connection to an advertising device."""

    opcode: ClassVar[int] = Opcode.LE_CREATE_CONN
    length: ClassVar[int] = 25

    le_scan_interval: int = 0
    le_scan_window: int = 0
    initiator_filter_policy: int = 0
    peer_address_type: int = 0
    peer_address: bytes = bytes(6)
    own_address_type: int = 0
    conn_interval_min: int = 0
    conn_interval_max: int = 0
    conn_latency: int = 0
    supervision_timeout: int = 0
    minimum_ce_length: int = 0
    maximum_ce_length: int = 0

    def _encode(self) -> bytes:
        return (
            _pack(
                "<HHBB",
                self.le_scan_interval,
                self.le_scan_window,
                self.initiator_filter_policy,
                self.peer_address_type,
            )
            + _mac(self.peer_address, "peer_address")
            + _pack(
                "<BHHHHHH",
                self.own_address_type,
                self.conn_interval_min,
                self.conn_interval_max,
                self.conn_latency,
                self.supervision_timeout,
                self.minimum_ce_length,
                self.maximum_ce_length,
            )
        )


@dataclass(frozen=True)
class LECreateConnCancel(CommandParam):
    """Cancel a pending connection creation."""

    opcode: ClassVar[int] = Opcode.LE_CREATE_CONN_CANCEL
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LEReadWhiteListSize(CommandParam):
    """Read the size of the white list."""

    opcode: ClassVar[int] = Opcode.LE_READ_WHITE_LIST_SIZE
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LEClearWhiteList(CommandParam):
    """Clear the white list."""

    opcode: ClassVar[int] = Opcode.LE_CLEAR_WHITE_LIST
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LEAddDeviceToWhiteList(CommandParam):
    """Add a device to the white list."""

    opcode: ClassVar[int] = Opcode.LE_ADD_DEVICE_TO_WHITE_LIST
    length: ClassVar[int] = 7

    address_type: int = 0
    address: bytes = bytes(6)

    def _encode(self) -> bytes:
        return _pack("<B", self.address_type) + _mac(self.address, "address")


@dataclass(frozen=True)
class LERemoveDeviceFromWhiteList(CommandParam):
    """Remove a device from the white list."""

    opcode: ClassVar[int] = Opcode.LE_REMOVE_DEVICE_FROM_WHITE_LIST
    length: ClassVar[int] = 7

    address_type: int = 0
    address: bytes = bytes(6)

    def _encode(self) -> bytes:
        return _pack("<B", self.address_type) + _mac(self.address, "address")


@dataclass(frozen=True)
class LEConnUpdate(CommandParam):
    """Change the parameters of an existing connection."""

    opcode: ClassVar[int] = Opcode.LE_CONN_UPDATE
    length: ClassVar[int] = 14

    connection_handle: int = 0
    conn_interval_min: int = 0
    conn_interval_max: int = 0
    conn_latency: int = 0
    supervision_timeout: int = 0
    minimum_ce_length: int = 0
    maximum_ce_length: int = 0

    def _encode(self) -> bytes:
        return _pack(
            "<7H",
            self.connection_handle,
            self.conn_interval_min,
            self.conn_interval_max,
            self.conn_latency,
            self.supervision_timeout,
            self.minimum_ce_length,
            self.maximum_ce_length,
        )


@dataclass(frozen=True)
class LESetHostChannelClassification(CommandParam):
    """Classify the data channels the host considers usable."""

    opcode: ClassVar[int] = Opcode.LE_SET_HOST_CHANNEL_CLASSIFICATION
    length: ClassVar[int] = 5

    channel_map: bytes = bytes(5)

    def _encode(self) -> bytes:
        return _fixed(self.channel_map, 5, "channel_map")


@dataclass(frozen=True)
class LEReadChannelMap(CommandParam):
    """Read the channel map of a connection."""

    opcode: ClassVar[int] = Opcode.LE_READ_CHANNEL_MAP
    length: ClassVar[int] = 2

    connection_handle: int = 0

    def _encode(self) -> bytes:
        return _pack("<H", self.connection_handle)


@dataclass(frozen=True)
class LEReadRemoteUsedFeatures(CommandParam):
    """Read the LE features used by the remote device."""

    opcode: ClassVar[int] = Opcode.LE_READ_REMOTE_USED_FEATURES
    length: ClassVar[int] = 8

    connection_handle: int = 0

    def _encode(self) -> bytes:
        return _pack("<H", self.connection_handle)


@dataclass(frozen=True)
class LEEncrypt(CommandParam):
    """Encrypt 16 bytes of plaintext with a 16-byte key."""

    opcode: ClassVar[int] = Opcode.LE_ENCRYPT
    length: ClassVar[int] = 32

    key: bytes = bytes(16)
    plaintext_data: bytes = bytes(16)

    def _encode(self) -> bytes:
        return _fixed(self.key, 16, "key") + _fixed(self.plaintext_data, 16, "plaintext_data")


@dataclass(frozen=True)
class LERand(CommandParam):
    """Ask the controller for a random number."""

    opcode: ClassVar[int] = Opcode.LE_RAND
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LEStartEncryption(CommandParam):
    """Start encryption on a connection."""

    opcode: ClassVar[int] = Opcode.LE_START_ENCRYPTION
    length: ClassVar[int] = 28

    connection_handle: int = 0
    random_number: int = 0
    encrypted_diversifier: int = 0
    long_term_key: bytes = bytes(16)

    def _encode(self) -> bytes:
        return _pack(
            "<HQH", self.connection_handle, self.random_number, self.encrypted_diversifier
        ) + _fixed(self.long_term_key, 16, "long_term_key")


@dataclass(frozen=True)
class LELTKReply(CommandParam):
    """Reply to a long term key request."""

    opcode: ClassVar[int] = Opcode.LE_LTK_REPLY
    length: ClassVar[int] = 18

    connection_handle: int = 0
    long_term_key: bytes = bytes(16)

    def _encode(self) -> bytes:
        return _pack("<H", self.connection_handle) + _fixed(
            self.long_term_key, 16, "long_term_key"
        )


@dataclass(frozen=True)
class LELTKNegReply(CommandParam):
    """Refuse a long term key request."""

    opcode: ClassVar[int] = Opcode.LE_LTK_NEG_REPLY
    length: ClassVar[int] = 2

    connection_handle: int = 0

    def _encode(self) -> bytes:
        return _pack("<H", self.connection_handle)


@dataclass(frozen=True)
class LEReadSupportedStates(CommandParam):
    """Read the state combinations the controller supports."""

    opcode: ClassVar[int] = Opcode.LE_READ_SUPPORTED_STATES
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LEReceiverTest(CommandParam):
    """Start a receiver test on a channel."""

    opcode: ClassVar[int] = Opcode.LE_RECEIVER_TEST
    length: ClassVar[int] = 1

    rx_channel: int = 0

    def _encode(self) -> bytes:
        return _pack("<B", self.rx_channel)


@dataclass(frozen=True)
class LETransmitterTest(CommandParam):
    """Start a transmitter test on a channel."""

    opcode: ClassVar[int] = Opcode.LE_TRANSMITTER_TEST
    length: ClassVar[int] = 3

    tx_channel: int = 0
    length_of_test_data: int = 0
    packet_payload: int = 0

    def _encode(self) -> bytes:
        return _pack("<BBB", self.tx_channel, self.length_of_test_data, self.packet_payload)


@dataclass(frozen=True)
class LETestEnd(CommandParam):
    """End a receiver or transmitter test."""

    opcode: ClassVar[int] = Opcode.LE_TEST_END
    length: ClassVar[int] = 0


@dataclass(frozen=True)
class LERemoteConnectionParameterReply(CommandParam):
    """Accept a remote connection parameter request."""

    opcode: ClassVar[int] = Opcode.LE_REMOTE_CONNECTION_PARAMETER_REPLY
    length: ClassVar[int] = 14

    connection_handle: int = 0
    interval_min: int = 0
    interval_max: int = 0
    latency: int = 0
    timeout: int = 0
    minimum_ce_length: int = 0
    maximum_ce_length: int = 0

    def _encode(self) -> bytes:
        return _pack(
            "<7H",
            self.connection_handle,
            self.interval_min,
            self.interval_max,
            self.latency,
            self.timeout,
            self.minimum_ce_length,
            self.maximum_ce_length,
        )


@dataclass(frozen=True)
class LERemoteConnectionParameterNegReply(CommandParam):
    """Reject a remote connection parameter request."""

    opcode: ClassVar[int] = Opcode.LE_REMOTE_CONNECTION_PARAMETER_NEG_REPLY
    length: ClassVar[int] = 3

    connection_handle: int = 0
    reason: int = 0

    def _encode(self) -> bytes:
        return _pack("<HB", self.connection_handle, self.reason)