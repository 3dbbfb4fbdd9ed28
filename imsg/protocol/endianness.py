"""Host byte order detection.

imsg has no byte order negotiation: both peers write integers in the
order their hardware uses natively. The order is probed once, at import,
by packing the native 16-bit integer 1 and looking at which byte holds it.
"""

from enum import Enum
import struct


class ByteOrder(Enum):
    """Byte orders the codec knows how to read and write."""
    
    LITTLE = 'little'
    BIG = 'big'
    
    @property
    def struct_prefix(self) -> str:
        """Byte order character understood by the struct module."""
        return '<' if self is ByteOrder.LITTLE else '>'


def resolve_native_byte_order() -> ByteOrder:
    """
    Probe the byte order of the running machine.
    
    Returns:
        ByteOrder.LITTLE if the low byte of a native integer is stored
        first, ByteOrder.BIG otherwise
    """
    layout = struct.pack('=H', 1)
    if layout[0] == 1:
        return ByteOrder.LITTLE
    return ByteOrder.BIG


# Resolved once; read-only for the life of the process
NATIVE_BYTE_ORDER = resolve_native_byte_order()


def native_byte_order() -> ByteOrder:
    """Return the byte order used by default for encoding and decoding."""
    return NATIVE_BYTE_ORDER
