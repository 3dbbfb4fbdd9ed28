"""Protocol constants for the imsg wire format.

These mirror the values compiled into OpenBSD's imsg library and must
not be changed, or peers built against the C implementation will
reject our messages.
"""

import struct

# Header layout without a byte order prefix:
# 'I' = type (4 bytes), 'H' = length (2 bytes), 'H' = flags (2 bytes),
# 'I' = peer id (4 bytes), 'I' = pid (4 bytes)
HEADER_FORMAT = 'IHHII'

# Size of the fixed header that precedes every message (16 bytes)
HEADER_SIZE = struct.calcsize('=' + HEADER_FORMAT)

# Maximum size of a single message, header included
MAX_MESSAGE_SIZE = 16384

# Largest payload that still fits in a single message
MAX_PAYLOAD_SIZE = MAX_MESSAGE_SIZE - HEADER_SIZE
