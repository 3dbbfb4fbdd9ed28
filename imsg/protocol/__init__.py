"""Protocol module for imsg message structure, byte order, and encoding."""

from imsg.protocol.constants import (
    HEADER_FORMAT,
    HEADER_SIZE,
    MAX_MESSAGE_SIZE,
    MAX_PAYLOAD_SIZE,
)
from imsg.protocol.endianness import (
    ByteOrder,
    NATIVE_BYTE_ORDER,
    native_byte_order,
    resolve_native_byte_order,
)
from imsg.protocol.encoding import compose, encode, decode, decode_bytes
from imsg.protocol.messages import MessageHeader, Message

__all__ = [
    'HEADER_FORMAT',
    'HEADER_SIZE',
    'MAX_MESSAGE_SIZE',
    'MAX_PAYLOAD_SIZE',
    'ByteOrder',
    'NATIVE_BYTE_ORDER',
    'native_byte_order',
    'resolve_native_byte_order',
    'compose',
    'encode',
    'decode',
    'decode_bytes',
    'MessageHeader',
    'Message',
]
