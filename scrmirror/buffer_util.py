"""Big-endian integer helpers for binary streams."""

from typing import BinaryIO

__all__ = ["write16", "write32", "write64", "read16", "read32", "read64"]


def _write(buffer: BinaryIO, value: int, size: int) -> None:
    mask = (1 << (size * 8)) - 1
    buffer.write((value & mask).to_bytes(size, "big"))


def _read(buffer: BinaryIO, size: int) -> int:
    data = buffer.read(size)
    if len(data) < size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return int.from_bytes(data, "big")


def write16(buffer: BinaryIO, value: int) -> None:
    """Write the low 16 bits of ``value`` in big-endian order."""
    _write(buffer, value, 2)


def write32(buffer: BinaryIO, value: int) -> None:
    """Write the low 32 bits of ``value`` in big-endian order."""
    _write(buffer, value, 4)


def write64(buffer: BinaryIO, value: int) -> None:
    """Write the low 64 bits of ``value`` in big-endian order."""
    _write(buffer, value, 8)


def read16(buffer: BinaryIO) -> int:
    """Read an unsigned big-endian 16-bit integer."""
    return _read(buffer, 2)


def read32(buffer: BinaryIO) -> int:
    """Read an unsigned big-endian 32-bit integer."""
    return _read(buffer, 4)


def read64(buffer: BinaryIO) -> int:
    """Read an unsigned big-endian 64-bit integer."""
    return _read(buffer, 8)