"""Message structure definitions."""

from dataclasses import dataclass
import struct

from imsg.protocol.constants import HEADER_FORMAT, HEADER_SIZE
from imsg.protocol.endianness import ByteOrder, NATIVE_BYTE_ORDER


@dataclass
class MessageHeader:
    """Fixed 16-byte header that precedes every imsg payload."""
    
    msg_type: int
    length: int
    flags: int
    peer_id: int
    pid: int
    
    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        byte_order: ByteOrder = NATIVE_BYTE_ORDER,
    ) -> 'MessageHeader':
        """
        Parse message header from bytes.
        
        Args:
            data: Exactly HEADER_SIZE raw bytes
            byte_order: Order the peer wrote its integers in
            
        Returns:
            Parsed MessageHeader instance
        """
        msg_type, length, flags, peer_id, pid = struct.unpack(
            byte_order.struct_prefix + HEADER_FORMAT, data
        )
        return cls(
            msg_type=msg_type,
            length=length,
            flags=flags,
            peer_id=peer_id,
            pid=pid,
        )
    
    def to_bytes(self, byte_order: ByteOrder = NATIVE_BYTE_ORDER) -> bytes:
        """
        Serialize header to bytes.
        
        Args:
            byte_order: Order to write integers in
            
        Returns:
            Serialized header bytes
        """
        return struct.pack(
            byte_order.struct_prefix + HEADER_FORMAT,
            self.msg_type,
            self.length,
            self.flags,
            self.peer_id,
            self.pid,
        )


@dataclass
class Message:
    """
    A message used for inter-process communication over sockets.
    
    msg_type describes the meaning of the message. peer_id and pid are
    free for use by the caller and conventionally identify the sender.
    
    flags are reserved for internal use by the C implementation. They are
    carried through decode and encode untouched but never set by compose().
    
    Building a Message directly performs no validation; encode() checks
    the size limit.
    """
    
    msg_type: int
    peer_id: int
    pid: int
    payload: bytes = b''
    flags: int = 0
    
    def encoded_size(self) -> int:
        """Size in bytes of the encoded message, whether or not it fits the limit."""
        return HEADER_SIZE + memoryview(self.payload).nbytes
    
    def __len__(self) -> int:
        return self.encoded_size()
    
    def header(self) -> MessageHeader:
        """Build the header describing this message."""
        return MessageHeader(
            msg_type=self.msg_type,
            length=self.encoded_size(),
            flags=self.flags,
            peer_id=self.peer_id,
            pid=self.pid,
        )
    
    def __repr__(self) -> str:
        return (
            f"Message(msg_type=0x{self.msg_type:X}, peer_id={self.peer_id}, "
            f"pid={self.pid}, flags=0x{self.flags:04X}, "
            f"payload={bytes(self.payload).hex(' ') if self.payload else '(empty)'})"
        )
