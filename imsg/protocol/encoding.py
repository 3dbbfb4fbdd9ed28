"""Message composition, encoding, and decoding functions.

Each call handles exactly one message. Splitting a stream into messages
and scheduling reads is up to the transport that calls into this module.
"""

import io
import os
from typing import BinaryIO, Union

from imsg.protocol.constants import HEADER_SIZE, MAX_MESSAGE_SIZE, MAX_PAYLOAD_SIZE
from imsg.protocol.endianness import ByteOrder, NATIVE_BYTE_ORDER
from imsg.protocol.messages import Message, MessageHeader
from imsg.utils.exceptions import (
    DataTooLargeError,
    LengthOutOfBoundsError,
    InsufficientDataError,
)
from imsg.utils.logging import get_logger

logger = get_logger(__name__)


def compose(msg_type: int, peer_id: int, payload: bytes = b'') -> Message:
    """
    Build a message stamped with the calling process's pid.
    
    Args:
        msg_type: Caller-defined message type
        peer_id: Caller-defined peer identifier
        payload: Ancillary data to send with the message
        
    Returns:
        Message with flags cleared and pid set to os.getpid()
        
    Raises:
        DataTooLargeError: If the payload does not fit in a single message
    """
    payload = bytes(payload)
    if len(payload) > MAX_PAYLOAD_SIZE:
        raise DataTooLargeError(len(payload), MAX_PAYLOAD_SIZE)

    message = Message(
        msg_type=msg_type,
        peer_id=peer_id,
        pid=os.getpid(),
        payload=payload,
    )
    logger.debug(
        "Composed type=0x%X peer_id=%d size: %d bytes",
        msg_type, peer_id, len(payload),
    )
    return message


def encode(message: Message, *, byte_order: ByteOrder = NATIVE_BYTE_ORDER) -> bytes:
    """
    Serialize a message to its wire representation.
    
    Args:
        message: Message to serialize
        byte_order: Order to write header integers in
        
    Returns:
        Header followed by the raw payload, exactly encoded_size() bytes
        
    Raises:
        DataTooLargeError: If the message exceeds MAX_MESSAGE_SIZE
    """
    payload = bytes(message.payload)
    if HEADER_SIZE + len(payload) > MAX_MESSAGE_SIZE:
        raise DataTooLargeError(len(payload), MAX_PAYLOAD_SIZE)

    header = message.header()
    logger.debug(
        "Encoding type=0x%X length=%d byte_order=%s",
        header.msg_type, header.length, byte_order.value,
    )
    return header.to_bytes(byte_order) + payload


def _read_exactly(source: BinaryIO, size: int) -> bytes:
    """
    Read up to size bytes, retrying short reads until the source is exhausted.
    
    Returns fewer than size bytes only when the source hits end of stream.

    Raises:
        BlockingIOError: If a non-blocking source has no data ready
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if chunk is None:
            raise BlockingIOError(
                f"imsg: source has no data ready "
                f"({size - remaining} of {size} bytes read)"
            )
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)


def decode(source: BinaryIO, *, byte_order: ByteOrder = NATIVE_BYTE_ORDER) -> Message:
    """
    Read a single message from a binary stream.
    
    Blocks until the header and the payload it announces are available,
    or the stream ends. No timeout is applied; wrap the source if a
    deadline is needed.
    
    Args:
        source: Binary file-like object providing read(n)
        byte_order: Order the peer wrote header integers in
        
    Returns:
        Decoded Message, flags included
        
    Raises:
        EOFError: If the stream ends before a full header was read
        BlockingIOError: If a non-blocking source has no data ready; the
            source must be blocking for a message to be read in one call
        LengthOutOfBoundsError: If the header length is outside
            [HEADER_SIZE, MAX_MESSAGE_SIZE]
        InsufficientDataError: If the stream ends before the full payload
            was read
    """
    raw_header = _read_exactly(source, HEADER_SIZE)
    if len(raw_header) < HEADER_SIZE:
        raise EOFError(
            f"imsg: unexpected end of stream while reading header "
            f"({len(raw_header)} of {HEADER_SIZE} bytes)"
        )
    
    header = MessageHeader.from_bytes(raw_header, byte_order)
    if header.length < HEADER_SIZE or header.length > MAX_MESSAGE_SIZE:
        logger.debug("Rejecting header with length %d", header.length)
        raise LengthOutOfBoundsError(header.length, HEADER_SIZE, MAX_MESSAGE_SIZE)
    
    payload = b''
    if header.length > HEADER_SIZE:
        expected = header.length - HEADER_SIZE
        payload = _read_exactly(source, expected)
        if len(payload) < expected:
            raise InsufficientDataError(expected, len(payload))
    
    logger.debug(
        "Decoded type=0x%X length=%d byte_order=%s",
        header.msg_type, header.length, byte_order.value,
    )
    return Message(
        msg_type=header.msg_type,
        peer_id=header.peer_id,
        pid=header.pid,
        payload=payload,
        flags=header.flags,
    )


def decode_bytes(
    data: Union[bytes, bytearray, memoryview],
    *,
    byte_order: ByteOrder = NATIVE_BYTE_ORDER,
) -> Message:
    """
    Decode a single message from an in-memory buffer.
    
    Behaves exactly like decode(); bytes past the declared length are
    left unread.
    """
    return decode(io.BytesIO(data), byte_order=byte_order)
