"""Tools for working with OpenBSD's imsg message format."""

from imsg.protocol import (
    HEADER_SIZE,
    MAX_MESSAGE_SIZE,
    MAX_PAYLOAD_SIZE,
    ByteOrder,
    NATIVE_BYTE_ORDER,
    native_byte_order,
    compose,
    encode,
    decode,
    decode_bytes,
    Message,
    MessageHeader,
)
from imsg.utils.exceptions import (
    ImsgError,
    DataTooLargeError,
    LengthOutOfBoundsError,
    InsufficientDataError,
)

__version__ = '0.1.0'

__all__ = [
    'HEADER_SIZE',
    'MAX_MESSAGE_SIZE',
    'MAX_PAYLOAD_SIZE',
    'ByteOrder',
    'NATIVE_BYTE_ORDER',
    'native_byte_order',
    'compose',
    'encode',
    'decode',
    'decode_bytes',
    'Message',
    'MessageHeader',
    'ImsgError',
    'DataTooLargeError',
    'LengthOutOfBoundsError',
    'InsufficientDataError',
]
