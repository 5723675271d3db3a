"""Reading and writing fixed-width unsigned integers in packet buffers."""

from __future__ import annotations

import struct

_U8 = struct.Struct("B")
_U16_BE = struct.Struct(">H")
_U32_BE = struct.Struct(">I")
_U64_BE = struct.Struct(">Q")
_U16_LE = struct.Struct("<H")
_U32_LE = struct.Struct("<I")
_U64_LE = struct.Struct("<Q")


def get_uint8(buffer, offset=0):
    """Return the unsigned byte at ``offset``."""
    return _U8.unpack_from(buffer, offset)[0]


def set_uint8(buffer, offset, value):
    """Store an unsigned byte at ``offset`` of a writable buffer."""
    _U8.pack_into(buffer, offset, value)


def get_uint16_big_endian(buffer, offset=0):
    """Return the big-endian 16-bit unsigned value at ``offset``."""
    return _U16_BE.unpack_from(buffer, offset)[0]


def get_uint32_big_endian(buffer, offset=0):
    """Return the big-endian 32-bit unsigned value at ``offset``."""
    return _U32_BE.unpack_from(buffer, offset)[0]


def get_uint64_big_endian(buffer, offset=0):
    """Return the big-endian 64-bit unsigned value at ``offset``."""
    return _U64_BE.unpack_from(buffer, offset)[0]


def set_uint16_big_endian(buffer, offset, value):
    """Store ``value`` as a big-endian 16-bit unsigned integer."""
    _U16_BE.pack_into(buffer, offset, value)


def set_uint32_big_endian(buffer, offset, value):
    """Store ``value`` as a big-endian 32-bit unsigned integer."""
    _U32_BE.pack_into(buffer, offset, value)


def set_uint64_big_endian(buffer, offset, value):
    """Store ``value`` as a big-endian 64-bit unsigned integer."""
    _U64_BE.pack_into(buffer, offset, value)


def get_uint16_little_endian(buffer, offset=0):
    """Return the little-endian 16-bit unsigned value at ``offset``."""
    return _U16_LE.unpack_from(buffer, offset)[0]


def get_uint32_little_endian(buffer, offset=0):
    """Return the little-endian 32-bit unsigned value at ``offset``."""
    return _U32_LE.unpack_from(buffer, offset)[0]


def get_uint64_little_endian(buffer, offset=0):
    """Return the little-endian 64-bit unsigned value at ``offset``."""
    return _U64_LE.unpack_from(buffer, offset)[0]


def set_uint16_little_endian(buffer, offset, value):
    """Store ``value`` as a little-endian 16-bit unsigned integer."""
    _U16_LE.pack_into(buffer, offset, value)


def set_uint32_little_endian(buffer, offset, value):
    """Store ``value`` as a little-endian 32-bit unsigned integer."""
    _U32_LE.pack_into(buffer, offset, value)


def set_uint64_little_endian(buffer, offset, value):
    """Store ``value`` as a little-endian 64-bit unsigned integer."""
    _U64_LE.pack_into(buffer, offset, value)