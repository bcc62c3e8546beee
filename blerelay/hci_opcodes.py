"""HCI command opcodes: a 6-bit group field (OGF) and a 10-bit command field (OCF)."""

from __future__ import annotations

from enum import IntEnum

_OGF_MAX = 0x3F
_OCF_MAX = 0x3FF
_OGF_SHIFT = 10


class OGF(IntEnum):
    """Opcode group fields of the HCI command set."""

    LINK_CTL = 0x01
    LINK_POLICY = 0x02
    HOST_CTL = 0x03
    INFO_PARAM = 0x04
    STATUS_PARAM = 0x05
    LE_CTL = 0x08
    TESTING_CMD = 0x3E
    VENDOR_CMD = 0x3F


def opcode(ogf: int, ocf: int) -> int:
    """Combine a group field and a command field into a 16-bit opcode."""
    if not 0 <= ogf <= _OGF_MAX:
        raise ValueError(f"OGF out of range: {ogf!r}")
    if not 0 <= ocf <= _OCF_MAX:
        raise ValueError(f"OCF out of range: {ocf!r}")
    return (int(ogf) << _OGF_SHIFT) | int(ocf)


class Opcode(IntEnum):
    """Known HCI command opcodes."""

    # Link control commands
    INQUIRY = opcode(OGF.LINK_CTL, 0x0001)
    INQUIRY_CANCEL = opcode(OGF.LINK_CTL, 0x0002)
    PERIODIC_INQUIRY = opcode(OGF.LINK_CTL, 0x0003)
    EXIT_PERIODIC_INQUIRY = opcode(OGF.LINK_CTL, 0x0004)
    CREATE_CONN = opcode(OGF.LINK_CTL, 0x0005)
    DISCONNECT = opcode(OGF.LINK_CTL, 0x0006)
    CREATE_CONN_CANCEL = opcode(OGF.LINK_CTL, 0x0008)
    ACCEPT_CONN_REQ = opcode(OGF.LINK_CTL, 0x0009)
    REJECT_CONN_REQ = opcode(OGF.LINK_CTL, 0x000A)
    LINK_KEY_REPLY = opcode(OGF.LINK_CTL, 0x000B)
    LINK_KEY_NEG_REPLY = opcode(OGF.LINK_CTL, 0x000C)
    PIN_CODE_REPLY = opcode(OGF.LINK_CTL, 0x000D)
    PIN_CODE_NEG_REPLY = opcode(OGF.LINK_CTL, 0x000E)
    SET_CONN_PTYPE = opcode(OGF.LINK_CTL, 0x000F)
    AUTH_REQUESTED = opcode(OGF.LINK_CTL, 0x0011)
    SET_CONN_ENCRYPT = opcode(OGF.LINK_CTL, 0x0013)
    CHANGE_CONN_LINK_KEY = opcode(OGF.LINK_CTL, 0x0015)
    MASTER_LINK_KEY = opcode(OGF.LINK_CTL, 0x0017)
    REMOTE_NAME_REQ = opcode(OGF.LINK_CTL, 0x0019)
    REMOTE_NAME_REQ_CANCEL = opcode(OGF.LINK_CTL, 0x001A)
    READ_REMOTE_FEATURES = opcode(OGF.LINK_CTL, 0x001B)
    READ_REMOTE_EXT_FEATURES = opcode(OGF.LINK_CTL, 0x001C)
    READ_REMOTE_VERSION = opcode(OGF.LINK_CTL, 0x001D)
    READ_CLOCK_OFFSET = opcode(OGF.LINK_CTL, 0x001F)
    READ_LMP_HANDLE = opcode(OGF.LINK_CTL, 0x0020)
    SETUP_SYNC_CONN = opcode(OGF.LINK_CTL, 0x0028)
    ACCEPT_SYNC_CONN_REQ = opcode(OGF.LINK_CTL, 0x0029)
    REJECT_SYNC_CONN_REQ = opcode(OGF.LINK_CTL, 0x002A)
    IO_CAPABILITY_REPLY = opcode(OGF.LINK_CTL, 0x002B)
    USER_CONFIRM_REPLY = opcode(OGF.LINK_CTL, 0x002C)
    USER_CONFIRM_NEG_REPLY = opcode(OGF.LINK_CTL, 0x002D)
    USER_PASSKEY_REPLY = opcode(OGF.LINK_CTL, 0x002E)
    USER_PASSKEY_NEG_REPLY = opcode(OGF.LINK_CTL, 0x002F)
    REMOTE_OOB_DATA_REPLY = opcode(OGF.LINK_CTL, 0x0030)
    REMOTE_OOB_DATA_NEG_REPLY = opcode(OGF.LINK_CTL, 0x0033)
    IO_CAPABILITY_NEG_REPLY = opcode(OGF.LINK_CTL, 0x0034)
    CREATE_PHYSICAL_LINK = opcode(OGF.LINK_CTL, 0x0035)
    ACCEPT_PHYSICAL_LINK = opcode(OGF.LINK_CTL, 0x0036)
    DISCONNECT_PHYSICAL_LINK = opcode(OGF.LINK_CTL, 0x0037)
    CREATE_LOGICAL_LINK = opcode(OGF.LINK_CTL, 0x0038)
    ACCEPT_LOGICAL_LINK = opcode(OGF.LINK_CTL, 0x0039)
    DISCONNECT_LOGICAL_LINK = opcode(OGF.LINK_CTL, 0x003A)
    LOGICAL_LINK_CANCEL = opcode(OGF.LINK_CTL, 0x003B)
    FLOW_SPEC_MODIFY = opcode(OGF.LINK_CTL, 0x003C)

    # Link policy commands
    HOLD_MODE = opcode(OGF.LINK_POLICY, 0x0001)
    SNIFF_MODE = opcode(OGF.LINK_POLICY, 0x0003)
    EXIT_SNIFF_MODE = opcode(OGF.LINK_POLICY, 0x0004)
    PARK_MODE = opcode(OGF.LINK_POLICY, 0x0005)
    EXIT_PARK_MODE = opcode(OGF.LINK_POLICY, 0x0006)
    QOS_SETUP = opcode(OGF.LINK_POLICY, 0x0007)
    ROLE_DISCOVERY = opcode(OGF.LINK_POLICY, 0x0009)
    SWITCH_ROLE = opcode(OGF.LINK_POLICY, 0x000B)
    READ_LINK_POLICY = opcode(OGF.LINK_POLICY, 0x000C)
    WRITE_LINK_POLICY = opcode(OGF.LINK_POLICY, 0x000D)
    READ_DEFAULT_LINK_POLICY = opcode(OGF.LINK_POLICY, 0x000E)
    WRITE_DEFAULT_LINK_POLICY = opcode(OGF.LINK_POLICY, 0x000F)
    FLOW_SPECIFICATION = opcode(OGF.LINK_POLICY, 0x0010)
    SNIFF_SUBRATING = opcode(OGF.LINK_POLICY, 0x0011)

    # Host controller and baseband commands
    SET_EVENT_MASK = opcode(OGF.HOST_CTL, 0x0001)
    RESET = opcode(OGF.HOST_CTL, 0x0003)
    SET_EVENT_FLT = opcode(OGF.HOST_CTL, 0x0005)
    FLUSH = opcode(OGF.HOST_CTL, 0x0008)
    READ_PIN_TYPE = opcode(OGF.HOST_CTL, 0x0009)
    WRITE_PIN_TYPE = opcode(OGF.HOST_CTL, 0x000A)
    CREATE_NEW_UNIT_KEY = opcode(OGF.HOST_CTL, 0x000B)
    READ_STORED_LINK_KEY = opcode(OGF.HOST_CTL, 0x000D)
    WRITE_STORED_LINK_KEY = opcode(OGF.HOST_CTL, 0x0011)
    DELETE_STORED_LINK_KEY = opcode(OGF.HOST_CTL, 0x0012)
    WRITE_LOCAL_NAME = opcode(OGF.HOST_CTL, 0x0013)
    READ_LOCAL_NAME = opcode(OGF.HOST_CTL, 0x0014)
    READ_CONN_ACCEPT_TIMEOUT = opcode(OGF.HOST_CTL, 0x0015)
    WRITE_CONN_ACCEPT_TIMEOUT = opcode(OGF.HOST_CTL, 0x0016)
    READ_PAGE_TIMEOUT = opcode(OGF.HOST_CTL, 0x0017)
    WRITE_PAGE_TIMEOUT = opcode(OGF.HOST_CTL, 0x0018)
    READ_SCAN_ENABLE = opcode(OGF.HOST_CTL, 0x0019)
    WRITE_SCAN_ENABLE = opcode(OGF.HOST_CTL, 0x001A)
    READ_PAGE_ACTIVITY = opcode(OGF.HOST_CTL, 0x001B)
    WRITE_PAGE_ACTIVITY = opcode(OGF.HOST_CTL, 0x001C)
    READ_INQ_ACTIVITY = opcode(OGF.HOST_CTL, 0x001D)
    WRITE_INQ_ACTIVITY = opcode(OGF.HOST_CTL, 0x001E)
    READ_AUTH_ENABLE = opcode(OGF.HOST_CTL, 0x001F)
    WRITE_AUTH_ENABLE = opcode(OGF.HOST_CTL, 0x0020)
    READ_ENCRYPT_MODE = opcode(OGF.HOST_CTL, 0x0021)
    WRITE_ENCRYPT_MODE = opcode(OGF.HOST_CTL, 0x0022)
    READ_CLASS_OF_DEV = opcode(OGF.HOST_CTL, 0x0023)
    WRITE_CLASS_OF_DEVICE = opcode(OGF.HOST_CTL, 0x0024)
    READ_VOICE_SETTING = opcode(OGF.HOST_CTL, 0x0025)
    WRITE_VOICE_SETTING = opcode(OGF.HOST_CTL, 0x0026)
    READ_AUTOMATIC_FLUSH_TIMEOUT = opcode(OGF.HOST_CTL, 0x0027)
    WRITE_AUTOMATIC_FLUSH_TIMEOUT = opcode(OGF.HOST_CTL, 0x0028)
    READ_NUM_BROADCAST_RETRANS = opcode(OGF.HOST_CTL, 0x0029)
    WRITE_NUM_BROADCAST_RETRANS = opcode(OGF.HOST_CTL, 0x002A)
    READ_HOLD_MODE_ACTIVITY = opcode(OGF.HOST_CTL, 0x002B)
    WRITE_HOLD_MODE_ACTIVITY = opcode(OGF.HOST_CTL, 0x002C)
    READ_TRANSMIT_POWER_LEVEL = opcode(OGF.HOST_CTL, 0x002D)
    READ_SYNC_FLOW_ENABLE = opcode(OGF.HOST_CTL, 0x002E)
    WRITE_SYNC_FLOW_ENABLE = opcode(OGF.HOST_CTL, 0x002F)
    SET_CONTROLLER_TO_HOST_FC = opcode(OGF.HOST_CTL, 0x0031)
    HOST_BUFFER_SIZE = opcode(OGF.HOST_CTL, 0x0033)
    HOST_NUM_COMP_PKTS = opcode(OGF.HOST_CTL, 0x0035)
    READ_LINK_SUPERVISION_TIMEOUT = opcode(OGF.HOST_CTL, 0x0036)
    WRITE_LINK_SUPERVISION_TIMEOUT = opcode(OGF.HOST_CTL, 0x0037)
    READ_NUM_SUPPORTED_IAC = opcode(OGF.HOST_CTL, 0x0038)
    READ_CURRENT_IAC_LAP = opcode(OGF.HOST_CTL, 0x0039)
    WRITE_CURRENT_IAC_LAP = opcode(OGF.HOST_CTL, 0x003A)
    READ_PAGE_SCAN_PERIOD_MODE = opcode(OGF.HOST_CTL, 0x003B)
    WRITE_PAGE_SCAN_PERIOD_MODE = opcode(OGF.HOST_CTL, 0x003C)
    READ_PAGE_SCAN_MODE = opcode(OGF.HOST_CTL, 0x003D)
    WRITE_PAGE_SCAN_MODE = opcode(OGF.HOST_CTL, 0x003E)
    SET_AFH_CLASSIFICATION = opcode(OGF.HOST_CTL, 0x003F)
    READ_INQUIRY_SCAN_TYPE = opcode(OGF.HOST_CTL, 0x0042)
    WRITE_INQUIRY_SCAN_TYPE = opcode(OGF.HOST_CTL, 0x0043)
    READ_INQUIRY_MODE = opcode(OGF.HOST_CTL, 0x0044)
    WRITE_INQUIRY_MODE = opcode(OGF.HOST_CTL, 0x0045)
    READ_PAGE_SCAN_TYPE = opcode(OGF.HOST_CTL, 0x0046)
    WRITE_PAGE_SCAN_TYPE = opcode(OGF.HOST_CTL, 0x0047)
    READ_AFH_MODE = opcode(OGF.HOST_CTL, 0x0048)
    WRITE_AFH_MODE = opcode(OGF.HOST_CTL, 0x0049)
    READ_EXT_INQUIRY_RESPONSE = opcode(OGF.HOST_CTL, 0x0051)
    WRITE_EXT_INQUIRY_RESPONSE = opcode(OGF.HOST_CTL, 0x0052)
    REFRESH_ENCRYPTION_KEY = opcode(OGF.HOST_CTL, 0x0053)
    READ_SIMPLE_PAIRING_MODE = opcode(OGF.HOST_CTL, 0x0055)
    WRITE_SIMPLE_PAIRING_MODE = opcode(OGF.HOST_CTL, 0x0056)
    READ_LOCAL_OOB_DATA = opcode(OGF.HOST_CTL, 0x0057)
    READ_INQ_RESPONSE_TRANSMIT_POWER_LEVEL = opcode(OGF.HOST_CTL, 0x0058)
    WRITE_INQUIRY_TRANSMIT_POWER_LEVEL = opcode(OGF.HOST_CTL, 0x0059)
    READ_DEFAULT_ERROR_DATA_REPORTING = opcode(OGF.HOST_CTL, 0x005A)
    WRITE_DEFAULT_ERROR_DATA_REPORTING = opcode(OGF.HOST_CTL, 0x005B)
    ENHANCED_FLUSH = opcode(OGF.HOST_CTL, 0x005F)
    SEND_KEYPRESS_NOTIFY = opcode(OGF.HOST_CTL, 0x0060)
    READ_LOGICAL_LINK_ACCEPT_TIMEOUT = opcode(OGF.HOST_CTL, 0x0061)
    WRITE_LOGICAL_LINK_ACCEPT_TIMEOUT = opcode(OGF.HOST_CTL, 0x0062)
    SET_EVENT_MASK_PAGE2 = opcode(OGF.HOST_CTL, 0x0063)
    READ_LOCATION_DATA = opcode(OGF.HOST_CTL, 0x0064)
    WRITE_LOCATION_DATA = opcode(OGF.HOST_CTL, 0x0065)
    READ_FLOW_CONTROL_MODE = opcode(OGF.HOST_CTL, 0x0066)
    WRITE_FLOW_CONTROL_MODE = opcode(OGF.HOST_CTL, 0x0067)
    READ_ENHANCED_TRANSMIT_POWER_LEVEL = opcode(OGF.HOST_CTL, 0x0068)
    READ_BEST_EFFORT_FLUSH_TIMEOUT = opcode(OGF.HOST_CTL, 0x0069)
    WRITE_BEST_EFFORT_FLUSH_TIMEOUT = opcode(OGF.HOST_CTL, 0x006A)
    READ_LE_HOST_SUPPORTED = opcode(OGF.HOST_CTL, 0x006C)
    WRITE_LE_HOST_SUPPORTED = opcode(OGF.HOST_CTL, 0x006D)

    # Informational parameters
    READ_LOCAL_VERSION_INFORMATION = opcode(OGF.INFO_PARAM, 0x0001)
    READ_LOCAL_SUPPORTED_COMMANDS = opcode(OGF.INFO_PARAM, 0x0002)
    READ_LOCAL_SUPPORTED_FEATURES = opcode(OGF.INFO_PARAM, 0x0003)
    READ_LOCAL_EXTENDED_FEATURES = opcode(OGF.INFO_PARAM, 0x0004)
    READ_BUFFER_SIZE = opcode(OGF.INFO_PARAM, 0x0005)
    READ_BD_ADDR = opcode(OGF.INFO_PARAM, 0x0009)
    READ_DATA_BLOCK_SIZE = opcode(OGF.INFO_PARAM, 0x000A)
    READ_LOCAL_SUPPORTED_CODECS = opcode(OGF.INFO_PARAM, 0x000B)

    # LE controller commands
    LE_SET_EVENT_MASK = opcode(OGF.LE_CTL, 0x0001)
    LE_READ_BUFFER_SIZE = opcode(OGF.LE_CTL, 0x0002)
    LE_READ_LOCAL_SUPPORTED_FEATURES = opcode(OGF.LE_CTL, 0x0003)
    LE_SET_RANDOM_ADDRESS = opcode(OGF.LE_CTL, 0x0005)
    LE_SET_ADVERTISING_PARAMETERS = opcode(OGF.LE_CTL, 0x0006)
    LE_READ_ADVERTISING_CHANNEL_TX_POWER = opcode(OGF.LE_CTL, 0x0007)
    LE_SET_ADVERTISING_DATA = opcode(OGF.LE_CTL, 0x0008)
    LE_SET_SCAN_RESPONSE_DATA = opcode(OGF.LE_CTL, 0x0009)
    LE_SET_ADVERTISE_ENABLE = opcode(OGF.LE_CTL, 0x000A)
    LE_SET_SCAN_PARAMETERS = opcode(OGF.LE_CTL, 0x000B)
    LE_SET_SCAN_ENABLE = opcode(OGF.LE_CTL, 0x000C)
    LE_CREATE_CONN = opcode(OGF.LE_CTL, 0x000D)
    LE_CREATE_CONN_CANCEL = opcode(OGF.LE_CTL, 0x000E)
    LE_READ_WHITE_LIST_SIZE = opcode(OGF.LE_CTL, 0x000F)
    LE_CLEAR_WHITE_LIST = opcode(OGF.LE_CTL, 0x0010)
    LE_ADD_DEVICE_TO_WHITE_LIST = opcode(OGF.LE_CTL, 0x0011)
    LE_REMOVE_DEVICE_FROM_WHITE_LIST = opcode(OGF.LE_CTL, 0x0012)
    LE_CONN_UPDATE = opcode(OGF.LE_CTL, 0x0013)
    LE_SET_HOST_CHANNEL_CLASSIFICATION = opcode(OGF.LE_CTL, 0x0014)
    LE_READ_CHANNEL_MAP = opcode(OGF.LE_CTL, 0x0015)
    LE_READ_REMOTE_USED_FEATURES = opcode(OGF.LE_CTL, 0x0016)
    LE_ENCRYPT = opcode(OGF.LE_CTL, 0x0017)
    LE_RAND = opcode(OGF.LE_CTL, 0x0018)
    LE_START_ENCRYPTION = opcode(OGF.LE_CTL, 0x0019)
    LE_LTK_REPLY = opcode(OGF.LE_CTL, 0x001A)
    LE_LTK_NEG_REPLY = opcode(OGF.LE_CTL, 0x001B)
    LE_READ_SUPPORTED_STATES = opcode(OGF.LE_CTL, 0x001C)
    LE_RECEIVER_TEST = opcode(OGF.LE_CTL, 0x001D)
    LE_TRANSMITTER_TEST = opcode(OGF.LE_CTL, 0x001E)
    LE_TEST_END = opcode(OGF.LE_CTL, 0x001F)
    LE_REMOTE_CONNECTION_PARAMETER_REPLY = opcode(OGF.LE_CTL, 0x0020)
    LE_REMOTE_CONNECTION_PARAMETER_NEG_REPLY = opcode(OGF.LE_CTL, 0x0021)

    @property
    def ogf(self) -> OGF:
        """The opcode group field."""
        return OGF(int(self) >> _OGF_SHIFT)

    @property
    def ocf(self) -> int:
        """The opcode command field."""
        return int(self) & _OCF_MAX