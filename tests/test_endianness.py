"""Tests for host byte order detection."""

import struct
import sys

from imsg.protocol.endianness import (
    ByteOrder,
    NATIVE_BYTE_ORDER,
    native_byte_order,
    resolve_native_byte_order,
)


def test_probe_matches_interpreter():
    """The runtime probe should agree with the interpreter's own view."""
    assert resolve_native_byte_order().value == sys.byteorder


def test_native_constant_is_probed_value():
    """The module constant holds the probed order."""
    assert NATIVE_BYTE_ORDER is resolve_native_byte_order()


def test_accessor_returns_constant():
    assert native_byte_order() is NATIVE_BYTE_ORDER


def test_struct_prefixes():
    """Prefixes should pack integers in the named order."""
    assert struct.pack(ByteOrder.LITTLE.struct_prefix + 'H', 1) == b'\x01\x00'
    assert struct.pack(ByteOrder.BIG.struct_prefix + 'H', 1) == b'\x00\x01'
