"""Big-endian signed integer reading and writing over byte buffers."""

from __future__ import annotations


def _read(data: bytes | bytearray | memoryview, offset: int, size: int) -> int:
    if offset < 0 or offset + size > len(data):
        raise IndexError(f"cannot read {size} bytes at offset {offset}")
    return int.from_bytes(data[offset:offset + size], "big", signed=True)


def _write(value: int, dest: bytearray, offset: int, size: int) -> None:
    if offset < 0 or offset + size > len(dest):
        raise IndexError(f"cannot write {size} bytes at offset {offset}")
    mask = (1 << (size * 8)) - 1
    dest[offset:offset + size] = (value & mask).to_bytes(size, "big")


def read_int16_big(data, offset: int) -> int:
    """Read a big-endian 16-bit signed integer."""
    return _read(data, offset, 2)


def read_int32_big(data, offset: int) -> int:
    """Read a big-endian 32-bit signed integer."""
    return _read(data, offset, 4)


def read_int64_big(data, offset: int) -> int:
    """Read a big-endian 64-bit signed integer."""
    return _read(data, offset, 8)


def write_int16_big(value: int, dest: bytearray, offset: int) -> None:
    """Write the low 16 bits of value big-endian into dest."""
    _write(value, dest, offset, 2)


def write_int32_big(value: int, dest: bytearray, offset: int) -> None:
    """Write the low 32 bits of value big-endian into dest."""
    _write(value, dest, offset, 4)


def write_int64_big(value: int, dest: bytearray, offset: int) -> None:
    """Write the low 64 bits of value big-endian into dest."""
    _write(value, dest, offset, 8)