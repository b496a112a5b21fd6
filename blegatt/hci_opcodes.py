"""HCI command opcodes: group (OGF) and command (OCF) fields."""

from __future__ import annotations

from enum import IntEnum

_OGF_BITS = 6
_OCF_BITS = 10
_OCF_MASK = (1 << _OCF_BITS) - 1
_OGF_MASK = (1 << _OGF_BITS) - 1


class OpcodeGroup(IntEnum):
    """Opcode group fields (OGF) of HCI commands."""

    LINK_CTL = 0x01
    LINK_POLICY = 0x02
    HOST_CTL = 0x03
    INFO_PARAM = 0x04
    STATUS_PARAM = 0x05
    LE_CTL = 0x08
    TESTING = 0x3E
    VENDOR = 0x3F


def opcode(ogf: int, ocf: int) -> int:
    """Combine a group and a command field into a 16-bit opcode."""
    if not 0 <= ogf <= _OGF_MASK:
        raise ValueError(f"OGF out of range: {ogf:#x}")
    if not 0 <= ocf <= _OCF_MASK:
        raise ValueError(f"OCF out of range: {ocf:#x}")
    return (ogf << _OCF_BITS) | ocf


def _check_opcode(op: int) -> None:
    if not 0 <= op <= 0xFFFF:
        raise ValueError(f"opcode out of range: {op:#x}")


def ogf_of(op: int) -> int:
    """Return the group field of an opcode."""
    _check_opcode(op)
    return op >> _OCF_BITS


def ocf_of(op: int) -> int:
    """Return the command field of an opcode."""
    _check_opcode(op)
    return op & _OCF_MASK


_LC = OpcodeGroup.LINK_CTL
_LP = OpcodeGroup.LINK_POLICY
_HC = OpcodeGroup.HOST_CTL
_IP = OpcodeGroup.INFO_PARAM
_LE = OpcodeGroup.LE_CTL

# Link control commands
OP_INQUIRY = opcode(_LC, 0x0001)
OP_INQUIRY_CANCEL = opcode(_LC, 0x0002)
OP_PERIODIC_INQUIRY = opcode(_LC, 0x0003)
OP_EXIT_PERIODIC_INQUIRY = opcode(_LC, 0x0004)
OP_CREATE_CONN = opcode(_LC, 0x0005)
OP_DISCONNECT = opcode(_LC, 0x0006)
OP_CREATE_CONN_CANCEL = opcode(_LC, 0x0008)
OP_ACCEPT_CONN_REQ = opcode(_LC, 0x0009)
OP_REJECT_CONN_REQ = opcode(_LC, 0x000A)
OP_LINK_KEY_REPLY = opcode(_LC, 0x000B)
OP_LINK_KEY_NEG_REPLY = opcode(_LC, 0x000C)
OP_PIN_CODE_REPLY = opcode(_LC, 0x000D)
OP_PIN_CODE_NEG_REPLY = opcode(_LC, 0x000E)
OP_SET_CONN_PTYPE = opcode(_LC, 0x000F)
OP_AUTH_REQUESTED = opcode(_LC, 0x0011)
OP_SET_CONN_ENCRYPT = opcode(_LC, 0x0013)
OP_CHANGE_CONN_LINK_KEY = opcode(_LC, 0x0015)
OP_MASTER_LINK_KEY = opcode(_LC, 0x0017)
OP_REMOTE_NAME_REQ = opcode(_LC, 0x0019)
OP_REMOTE_NAME_REQ_CANCEL = opcode(_LC, 0x001A)
OP_READ_REMOTE_FEATURES = opcode(_LC, 0x001B)
OP_READ_REMOTE_EXT_FEATURES = opcode(_LC, 0x001C)
OP_READ_REMOTE_VERSION = opcode(_LC, 0x001D)
OP_READ_CLOCK_OFFSET = opcode(_LC, 0x001F)
OP_READ_LMP_HANDLE = opcode(_LC, 0x0020)
OP_SETUP_SYNC_CONN = opcode(_LC, 0x0028)
OP_ACCEPT_SYNC_CONN_REQ = opcode(_LC, 0x0029)
OP_REJECT_SYNC_CONN_REQ = opcode(_LC, 0x002A)
OP_IO_CAPABILITY_REPLY = opcode(_LC, 0x002B)
OP_USER_CONFIRM_REPLY = opcode(_LC, 0x002C)
OP_USER_CONFIRM_NEG_REPLY = opcode(_LC, 0x002D)
OP_USER_PASSKEY_REPLY = opcode(_LC, 0x002E)
OP_USER_PASSKEY_NEG_REPLY = opcode(_LC, 0x002F)
OP_REMOTE_OOB_DATA_REPLY = opcode(_LC, 0x0030)
OP_REMOTE_OOB_DATA_NEG_REPLY = opcode(_LC, 0x0033)
OP_IO_CAPABILITY_NEG_REPLY = opcode(_LC, 0x0034)
OP_CREATE_PHYSICAL_LINK = opcode(_LC, 0x0035)
OP_ACCEPT_PHYSICAL_LINK = opcode(_LC, 0x0036)
OP_DISCONNECT_PHYSICAL_LINK = opcode(_LC, 0x0037)
OP_CREATE_LOGICAL_LINK = opcode(_LC, 0x0038)
OP_ACCEPT_LOGICAL_LINK = opcode(_LC, 0x0039)
OP_DISCONNECT_LOGICAL_LINK = opcode(_LC, 0x003A)
OP_LOGICAL_LINK_CANCEL = opcode(_LC, 0x003B)
OP_FLOW_SPEC_MODIFY = opcode(_LC, 0x003C)

# Link policy commands
OP_HOLD_MODE = opcode(_LP, 0x0001)
OP_SNIFF_MODE = opcode(_LP, 0x0003)
OP_EXIT_SNIFF_MODE = opcode(_LP, 0x0004)
OP_PARK_MODE = opcode(_LP, 0x0005)
OP_EXIT_PARK_MODE = opcode(_LP, 0x0006)
OP_QOS_SETUP = opcode(_LP, 0x0007)
OP_ROLE_DISCOVERY = opcode(_LP, 0x0009)
OP_SWITCH_ROLE = opcode(_LP, 0x000B)
OP_READ_LINK_POLICY = opcode(_LP, 0x000C)
OP_WRITE_LINK_POLICY = opcode(_LP, 0x000D)
OP_READ_DEFAULT_LINK_POLICY = opcode(_LP, 0x000E)
OP_WRITE_DEFAULT_LINK_POLICY = opcode(_LP, 0x000F)
OP_FLOW_SPECIFICATION = opcode(_LP, 0x0010)
OP_SNIFF_SUBRATING = opcode(_LP, 0x0011)

# Host controller and baseband commands
OP_SET_EVENT_MASK = opcode(_HC, 0x0001)
OP_RESET = opcode(_HC, 0x0003)
OP_SET_EVENT_FLT = opcode(_HC, 0x0005)
OP_FLUSH = opcode(_HC, 0x0008)
OP_READ_PIN_TYPE = opcode(_HC, 0x0009)
OP_WRITE_PIN_TYPE = opcode(_HC, 0x000A)
OP_CREATE_NEW_UNIT_KEY = opcode(_HC, 0x000B)
OP_READ_STORED_LINK_KEY = opcode(_HC, 0x000D)
OP_WRITE_STORED_LINK_KEY = opcode(_HC, 0x0011)
OP_DELETE_STORED_LINK_KEY = opcode(_HC, 0x0012)
OP_WRITE_LOCAL_NAME = opcode(_HC, 0x0013)
OP_READ_LOCAL_NAME = opcode(_HC, 0x0014)
OP_READ_CONN_ACCEPT_TIMEOUT = opcode(_HC, 0x0015)
OP_WRITE_CONN_ACCEPT_TIMEOUT = opcode(_HC, 0x0016)
OP_READ_PAGE_TIMEOUT = opcode(_HC, 0x0017)
OP_WRITE_PAGE_TIMEOUT = opcode(_HC, 0x0018)
OP_READ_SCAN_ENABLE = opcode(_HC, 0x0019)
OP_WRITE_SCAN_ENABLE = opcode(_HC, 0x001A)
OP_READ_PAGE_ACTIVITY = opcode(_HC, 0x001B)
OP_WRITE_PAGE_ACTIVITY = opcode(_HC, 0x001C)
OP_READ_INQ_ACTIVITY = opcode(_HC, 0x001D)
OP_WRITE_INQ_ACTIVITY = opcode(_HC, 0x001E)
OP_READ_AUTH_ENABLE = opcode(_HC, 0x001F)
OP_WRITE_AUTH_ENABLE = opcode(_HC, 0x0020)
OP_READ_ENCRYPT_MODE = opcode(_HC, 0x0021)
OP_WRITE_ENCRYPT_MODE = opcode(_HC, 0x0022)
OP_READ_CLASS_OF_DEV = opcode(_HC, 0x0023)
OP_WRITE_CLASS_OF_DEVICE = opcode(_HC, 0x0024)
OP_READ_VOICE_SETTING = opcode(_HC, 0x0025)
OP_WRITE_VOICE_SETTING = opcode(_HC, 0x0026)
OP_READ_AUTOMATIC_FLUSH_TIMEOUT = opcode(_HC, 0x0027)
OP_WRITE_AUTOMATIC_FLUSH_TIMEOUT = opcode(_HC, 0x0028)
OP_READ_NUM_BROADCAST_RETRANS = opcode(_HC, 0x0029)
OP_WRITE_NUM_BROADCAST_RETRANS = opcode(_HC, 0x002A)
OP_READ_HOLD_MODE_ACTIVITY = opcode(_HC, 0x002B)
OP_WRITE_HOLD_MODE_ACTIVITY = opcode(_HC, 0x002C)
OP_READ_TRANSMIT_POWER_LEVEL = opcode(_HC, 0x002D)
OP_READ_SYNC_FLOW_ENABLE = opcode(_HC, 0x002E)
OP_WRITE_SYNC_FLOW_ENABLE = opcode(_HC, 0x002F)
OP_SET_CONTROLLER_TO_HOST_FC = opcode(_HC, 0x0031)
OP_HOST_BUFFER_SIZE = opcode(_HC, 0x0033)
OP_HOST_NUM_COMP_PKTS = opcode(_HC, 0x0035)
OP_READ_LINK_SUPERVISION_TIMEOUT = opcode(_HC, 0x0036)
OP_WRITE_LINK_SUPERVISION_TIMEOUT = opcode(_HC, 0x0037)
OP_READ_NUM_SUPPORTED_IAC = opcode(_HC, 0x0038)
OP_READ_CURRENT_IAC_LAP = opcode(_HC, 0x0039)
OP_WRITE_CURRENT_IAC_LAP = opcode(_HC, 0x003A)
OP_READ_PAGE_SCAN_PERIOD_MODE = opcode(_HC, 0x003B)
OP_WRITE_PAGE_SCAN_PERIOD_MODE = opcode(_HC, 0x003C)
OP_READ_PAGE_SCAN_MODE = opcode(_HC, 0x003D)
OP_WRITE_PAGE_SCAN_MODE = opcode(_HC, 0x003E)
OP_SET_AFH_CLASSIFICATION = opcode(_HC, 0x003F)
OP_READ_INQUIRY_SCAN_TYPE = opcode(_HC, 0x0042)
OP_WRITE_INQUIRY_SCAN_TYPE = opcode(_HC, 0x0043)
OP_READ_INQUIRY_MODE = opcode(_HC, 0x0044)
OP_WRITE_INQUIRY_MODE = opcode(_HC, 0x0045)
OP_READ_PAGE_SCAN_TYPE = opcode(_HC, 0x0046)
OP_WRITE_PAGE_SCAN_TYPE = opcode(_HC, 0x0047)
OP_READ_AFH_MODE = opcode(_HC, 0x0048)
OP_WRITE_AFH_MODE = opcode(_HC, 0x0049)
OP_READ_EXT_INQUIRY_RESPONSE = opcode(_HC, 0x0051)
OP_WRITE_EXT_INQUIRY_RESPONSE = opcode(_HC, 0x0052)
OP_REFRESH_ENCRYPTION_KEY = opcode(_HC, 0x0053)
OP_READ_SIMPLE_PAIRING_MODE = opcode(_HC, 0x0055)
OP_WRITE_SIMPLE_PAIRING_MODE = opcode(_HC, 0x0056)
OP_READ_LOCAL_OOB_DATA = opcode(_HC, 0x0057)
OP_READ_INQ_RESPONSE_TRANSMIT_POWER_LEVEL = opcode(_HC, 0x0058)
OP_WRITE_INQUIRY_TRANSMIT_POWER_LEVEL = opcode(_HC, 0x0059)
OP_READ_DEFAULT_ERROR_DATA_REPORTING = opcode(_HC, 0x005A)
OP_WRITE_DEFAULT_ERROR_DATA_REPORTING = opcode(_HC, 0x005B)
OP_ENHANCED_FLUSH = opcode(_HC, 0x005F)
OP_SEND_KEYPRESS_NOTIFY = opcode(_HC, 0x0060)
OP_READ_LOGICAL_LINK_ACCEPT_TIMEOUT = opcode(_HC, 0x0061)
OP_WRITE_LOGICAL_LINK_ACCEPT_TIMEOUT = opcode(_HC, 0x0062)
OP_SET_EVENT_MASK_PAGE2 = opcode(_HC, 0x0063)
OP_READ_LOCATION_DATA = opcode(_HC, 0x0064)
OP_WRITE_LOCATION_DATA = opcode(_HC, 0x0065)
OP_READ_FLOW_CONTROL_MODE = opcode(_HC, 0x0066)
OP_WRITE_FLOW_CONTROL_MODE = opcode(_HC, 0x0067)
OP_READ_ENHANCED_TRANSMIT_POWER_LEVEL = opcode(_HC, 0x0068)
OP_READ_BEST_EFFORT_FLUSH_TIMEOUT = opcode(_HC, 0x0069)
OP_WRITE_BEST_EFFORT_FLUSH_TIMEOUT = opcode(_HC, 0x006A)
OP_READ_LE_HOST_SUPPORTED = opcode(_HC, 0x006C)
OP_WRITE_LE_HOST_SUPPORTED = opcode(_HC, 0x006D)

# Informational parameters
OP_READ_LOCAL_VERSION_INFORMATION = opcode(_IP, 0x0001)
OP_READ_LOCAL_SUPPORTED_COMMANDS = opcode(_IP, 0x0002)
OP_READ_LOCAL_SUPPORTED_FEATURES = opcode(_IP, 0x0003)
OP_READ_LOCAL_EXTENDED_FEATURES = opcode(_IP, 0x0004)
OP_READ_BUFFER_SIZE = opcode(_IP, 0x0005)
OP_READ_BDADDR = opcode(_IP, 0x0009)
OP_READ_DATA_BLOCK_SIZE = opcode(_IP, 0x000A)
OP_READ_LOCAL_SUPPORTED_CODECS = opcode(_IP, 0x000B)

# LE controller commands
OP_LE_SET_EVENT_MASK = opcode(_LE, 0x0001)
OP_LE_READ_BUFFER_SIZE = opcode(_LE, 0x0002)
OP_LE_READ_LOCAL_SUPPORTED_FEATURES = opcode(_LE, 0x0003)
OP_LE_SET_RANDOM_ADDRESS = opcode(_LE, 0x0005)
OP_LE_SET_ADVERTISING_PARAMETERS = opcode(_LE, 0x0006)
OP_LE_READ_ADVERTISING_CHANNEL_TX_POWER = opcode(_LE, 0x0007)
OP_LE_SET_ADVERTISING_DATA = opcode(_LE, 0x0008)
OP_LE_SET_SCAN_RESPONSE_DATA = opcode(_LE, 0x0009)
OP_LE_SET_ADVERTISE_ENABLE = opcode(_LE, 0x000A)
OP_LE_SET_SCAN_PARAMETERS = opcode(_LE, 0x000B)
OP_LE_SET_SCAN_ENABLE = opcode(_LE, 0x000C)
OP_LE_CREATE_CONN = opcode(_LE, 0x000D)
OP_LE_CREATE_CONN_CANCEL = opcode(_LE, 0x000E)
OP_LE_READ_WHITE_LIST_SIZE = opcode(_LE, 0x000F)
OP_LE_CLEAR_WHITE_LIST = opcode(_LE, 0x0010)
OP_LE_ADD_DEVICE_TO_WHITE_LIST = opcode(_LE, 0x0011)
OP_LE_REMOVE_DEVICE_FROM_WHITE_LIST = opcode(_LE, 0x0012)
OP_LE_CONN_UPDATE = opcode(_LE, 0x0013)
OP_LE_SET_HOST_CHANNEL_CLASSIFICATION = opcode(_LE, 0x0014)
OP_LE_READ_CHANNEL_MAP = opcode(_LE, 0x0015)
OP_LE_READ_REMOTE_USED_FEATURES = opcode(_LE, 0x0016)
OP_LE_ENCRYPT = opcode(_LE, 0x0017)
OP_LE_RAND = opcode(_LE, 0x0018)
OP_LE_START_ENCRYPTION = opcode(_LE, 0x0019)
OP_LE_LTK_REPLY = opcode(_LE, 0x001A)
OP_LE_LTK_NEG_REPLY = opcode(_LE, 0x001B)
OP_LE_READ_SUPPORTED_STATES = opcode(_LE, 0x001C)
OP_LE_RECEIVER_TEST = opcode(_LE, 0x001D)
OP_LE_TRANSMITTER_TEST = opcode(_LE, 0x001E)
OP_LE_TEST_END = opcode(_LE, 0x001F)
OP_LE_REMOTE_CONNECTION_PARAMETER_REPLY = opcode(_LE, 0x0020)
OP_LE_REMOTE_CONNECTION_PARAMETER_NEG_REPLY = opcode(_LE, 0x0021)