from dataclasses import dataclass
from typing import ClassVar

import pytest

from blerelay.hci_commands import CommandParam, command_packet
from blerelay.le_commands import (
    LEAddDeviceToWhiteList,
    LEClearWhiteList,
    LEConnUpdate,
    LECreateConn,
    LECreateConnCancel,
    LEEncrypt,
    LELTKNegReply,
    LELTKReply,
    LERand,
    LEReadAdvertisingChannelTxPower,
    LEReadBufferSize,
    LEReadChannelMap,
    LEReadLocalSupportedFeatures,
    LEReadRemoteUsedFeatures,
    LEReadSupportedStates,
    LEReadWhiteListSize,
    LEReceiverTest,
    LERemoteConnectionParameterNegReply,
    LERemoteConnectionParameterReply,
    LERemoveDeviceFromWhiteList,
    LESetAdvertiseEnable,
    LESetAdvertisingData,
    LESetAdvertisingParameters,
    LESetEventMask,
    LESetHostChannelClassification,
    LESetRandomAddress,
    LESetScanEnable,
    LESetScanParameters,
    LESetScanResponseData,
    LEStartEncryption,
    LETestEnd,
    LETransmitterTest,
)

ADDRESS = bytes([0x01, 0x02, 0x03, 0x04, 0x05, 0x06])


def test_advertising_data_example():
    param = LESetAdvertisingData(
        advertising_data_length=6,
        advertising_data=bytes([0x02, 0x01, 0x06, 0x03, 0x01, 0xFE]),
    )
    expected = bytes([0x06, 0x02, 0x01, 0x06, 0x03, 0x01, 0xFE]) + bytes(25)
    assert param.marshal() == expected
    assert command_packet(param) == bytes([0x01, 0x08, 0x20, 0x20]) + expected


def test_scan_response_data_example():
    param = LESetScanResponseData(
        scan_response_data_length=8,
        scan_response_data=bytes([0x07, 0x09]) + b"Gopher",
    )
    expected = bytes([0x08, 0x07, 0x09]) + b"Gopher" + bytes(23)
    assert param.marshal() == expected
    assert len(param.marshal()) == 32


def test_advertising_data_truncated_to_length():
    param = LESetAdvertisingData(advertising_data_length=2, advertising_data=b"\xaa\xbb\xcc")
    assert param.marshal() == b"\x02\xaa\xbb" + bytes(29)


def test_advertising_data_too_long():
    with pytest.raises(ValueError):
        LESetAdvertisingData(advertising_data_length=31, advertising_data=bytes(32)).marshal()


def test_advertising_data_length_out_of_range():
    with pytest.raises(ValueError):
        LESetScanResponseData(scan_response_data_length=32).marshal()


def test_advertising_parameters_example():
    param = LESetAdvertisingParameters(
        advertising_interval_min=0x800,
        advertising_interval_max=0x800,
        advertising_type=0x00,
        own_address_type=0x00,
        direct_address_type=0x00,
        direct_address=bytes(6),
        advertising_channel_map=0x7,
        advertising_filter_policy=0x00,
    )
    expected = bytes([0x00, 0x08, 0x00, 0x08, 0x00, 0x00, 0x00]) + bytes(6) + bytes([0x07, 0x00])
    assert param.marshal() == expected
    assert command_packet(param)[:4] == bytes([0x01, 0x06, 0x20, 0x0F])


def test_advertising_parameters_address_order():
    param = LESetAdvertisingParameters(direct_address=ADDRESS)
    assert param.marshal()[7:13] == ADDRESS[::-1]


def test_custom_vendor_command_packet():
    @dataclass(frozen=True)
    class CustomCmd(CommandParam):
        opcode: ClassVar[int] = 0xFC01
        length: ClassVar[int] = 3
        connection_handle: int = 0

        def _encode(self) -> bytes:
            return bytes([self.connection_handle & 0xFF, self.connection_handle >> 8, 0xFF])

    assert command_packet(CustomCmd(connection_handle=0x40)) == bytes(
        [0x01, 0x01, 0xFC, 0x03, 0x40, 0x00, 0xFF]
    )


def test_scan_enable_packet():
    param = LESetScanEnable(le_scan_enable=1, filter_duplicates=0)
    assert command_packet(param) == bytes([0x01, 0x0C, 0x20, 0x02, 0x01, 0x00])


def test_read_buffer_size_has_one_padding_byte():
    assert command_packet(LEReadBufferSize()) == bytes([0x01, 0x02, 0x20, 0x01, 0x00])


@pytest.mark.parametrize(
    "param, opcode",
    [
        (LEReadLocalSupportedFeatures(), 0x2003),
        (LEReadAdvertisingChannelTxPower(), 0x2007),
        (LECreateConnCancel(), 0x200E),
        (LEReadWhiteListSize(), 0x200F),
        (LEClearWhiteList(), 0x2010),
        (LERand(), 0x2018),
        (LEReadSupportedStates(), 0x201C),
        (LETestEnd(), 0x201F),
    ],
)
def test_empty_commands(param, opcode):
    assert param.marshal() == b""
    assert command_packet(param) == bytes([0x01, opcode & 0xFF, opcode >> 8, 0x00])


def test_event_mask():
    param = LESetEventMask(le_event_mask=0x1F)
    assert param.marshal() == bytes([0x1F]) + bytes(7)
    assert int(param.opcode) == 0x2001


def test_random_address_reversed():
    assert LESetRandomAddress(random_address=ADDRESS).marshal() == ADDRESS[::-1]


def test_random_address_wrong_size():
    with pytest.raises(ValueError):
        LESetRandomAddress(random_address=b"\x01\x02").marshal()


def test_advertise_enable():
    assert LESetAdvertiseEnable(advertising_enable=1).marshal() == b"\x01"


def test_scan_parameters():
    param = LESetScanParameters(
        le_scan_type=1,
        le_scan_interval=0x0010,
        le_scan_window=0x0010,
        own_address_type=0,
        scanning_filter_policy=0,
    )
    assert param.marshal() == bytes([0x01, 0x10, 0x00, 0x10, 0x00, 0x00, 0x00])


def test_create_conn_layout():
    param = LECreateConn(
        le_scan_interval=0x0004,
        le_scan_window=0x0004,
        initiator_filter_policy=0,
        peer_address_type=1,
        peer_address=ADDRESS,
        own_address_type=0,
        conn_interval_min=0x0006,
        conn_interval_max=0x0006,
        conn_latency=0,
        supervision_timeout=0x0048,
        minimum_ce_length=0,
        maximum_ce_length=0,
    )
    raw = param.marshal()
    assert len(raw) == 25
    assert raw[:6] == bytes([0x04, 0x00, 0x04, 0x00, 0x00, 0x01])
    assert raw[6:12] == ADDRESS[::-1]
    assert raw[12:] == bytes([0x00, 0x06, 0x00, 0x06, 0x00, 0x00, 0x00, 0x48, 0x00, 0, 0, 0, 0])


def test_white_list_commands():
    add = LEAddDeviceToWhiteList(address_type=1, address=ADDRESS)
    remove = LERemoveDeviceFromWhiteList(address_type=1, address=ADDRESS)
    assert add.marshal() == b"\x01" + ADDRESS[::-1]
    assert remove.marshal() == add.marshal()
    assert int(add.opcode) == 0x2011
    assert int(remove.opcode) == 0x2012


def test_conn_update():
    param = LEConnUpdate(
        connection_handle=0x0040,
        conn_interval_min=6,
        conn_interval_max=7,
        conn_latency=0,
        supervision_timeout=0x48,
        minimum_ce_length=1,
        maximum_ce_length=2,
    )
    assert param.marshal() == bytes([0x40, 0, 6, 0, 7, 0, 0, 0, 0x48, 0, 1, 0, 2, 0])


def test_host_channel_classification():
    param = LESetHostChannelClassification(channel_map=b"\xff\xff\xff\xff\x1f")
    assert param.marshal() == b"\xff\xff\xff\xff\x1f"


def test_read_channel_map():
    assert LEReadChannelMap(connection_handle=0x0102).marshal() == b"\x02\x01"


def test_read_remote_used_features_padded():
    assert LEReadRemoteUsedFeatures(connection_handle=0x0040).marshal() == b"\x40" + bytes(7)


def test_encrypt():
    key = bytes(range(16))
    plain = bytes(range(16, 32))
    assert LEEncrypt(key=key, plaintext_data=plain).marshal() == key + plain


def test_encrypt_wrong_key_size():
    with pytest.raises(ValueError):
        LEEncrypt(key=bytes(15)).marshal()


def test_start_encryption():
    ltk = bytes(range(16))
    param = LEStartEncryption(
        connection_handle=0x0040,
        random_number=0x0102030405060708,
        encrypted_diversifier=0x1234,
        long_term_key=ltk,
    )
    expected = (
        bytes([0x40, 0x00])
        + bytes([0x08, 0x07, 0x06, 0x05, 0x04, 0x03, 0x02, 0x01])
        + bytes([0x34, 0x12])
        + ltk
    )
    assert param.marshal() == expected
    assert len(expected) == 28


def test_ltk_replies():
    ltk = bytes(range(16))
    assert LELTKReply(connection_handle=0x0040, long_term_key=ltk).marshal() == b"\x40\x00" + ltk
    assert LELTKNegReply(connection_handle=0x0040).marshal() == b"\x40\x00"


def test_receiver_and_transmitter_tests():
    assert LEReceiverTest(rx_channel=5).marshal() == b"\x05"
    param = LETransmitterTest(tx_channel=1, length_of_test_data=0x25, packet_payload=2)
    assert param.marshal() == bytes([0x01, 0x25, 0x02])


def test_remote_connection_parameter_replies():
    reply = LERemoteConnectionParameterReply(
        connection_handle=1,
        interval_min=2,
        interval_max=3,
        latency=4,
        timeout=5,
        minimum_ce_length=6,
        maximum_ce_length=7,
    )
    assert reply.marshal() == bytes([1, 0, 2, 0, 3, 0, 4, 0, 5, 0, 6, 0, 7, 0])
    neg = LERemoteConnectionParameterNegReply(connection_handle=0x0040, reason=0x3B)
    assert neg.marshal() == bytes([0x40, 0x00, 0x3B])
    assert int(neg.opcode) == 0x2021


def test_field_out_of_range():
    with pytest.raises(ValueError):
        LESetScanEnable(le_scan_enable=256).marshal()