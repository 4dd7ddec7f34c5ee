"""Cursor-style reading and appending of binary data."""

from __future__ import annotations

import operator
import struct


class ByteReader:
    """Reads integers, strings and raw bytes from a buffer, advancing a position."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes | bytearray | memoryview, position: int = 0) -> None:
        self._data = bytes(data)
        self._pos = operator.index(position)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def position(self) -> int:
        return self._pos

    @position.setter
    def position(self, value: int) -> None:
        self._pos = operator.index(value)

    def skip_bytes(self, amount: int) -> None:
        self._pos += operator.index(amount)

    def _take(self, length: int) -> bytes:
        length = operator.index(length)
        if length < 0:
            raise ValueError("length must not be negative")
        end = self._pos + length
        if self._pos < 0 or end > len(self._data):
            raise EOFError(
                f"cannot read {length} bytes at position {self._pos} "
                f"of a {len(self._data)}-byte buffer"
            )
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_byte(self) -> int:
        return self._take(1)[0]

    def read_bytes(self, length: int) -> bytes:
        return self._take(length)

    def read_string(self, length: int) -> str:
        """Read ``length`` bytes as UTF-8, replacing invalid sequences."""
        return self._take(length).decode("utf-8", errors="replace")

    def read_bool(self) -> bool:
        return self._take(1)[0] != 0

    def read_be_u16(self) -> int:
        return int.from_bytes(self._take(2), "big")

    def read_le_u24(self) -> int:
        return int.from_bytes(self._take(3), "little")

    def read_be_u32(self) -> int:
        return int.from_bytes(self._take(4), "big")

    def read_be_u64(self) -> int:
        return int.from_bytes(self._take(8), "big")

    def read_be_i64(self) -> int:
        return int.from_bytes(self._take(8), "big", signed=True)

    def read_le_u16(self) -> int:
        return int.from_bytes(self._take(2), "little")

    def read_le_u32(self) -> int:
        return int.from_bytes(self._take(4), "little")

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes (all remaining when negative)."""
        remaining = self.remaining_bytes()
        chunk = remaining if size < 0 else remaining[:size]
        self._pos += len(chunk)
        return chunk

    def remaining_bytes(self) -> bytes:
        if self._pos > len(self._data):
            raise EOFError(
                f"position {self._pos} is past the end of a {len(self._data)}-byte buffer"
            )
        return self._data[self._pos:]

    def is_read_finished(self) -> bool:
        return self._pos >= len(self._data)

    def __repr__(self) -> str:
        return f"ByteReader(length={len(self._data)}, position={self._pos})"


class ByteWriter:
    """Appends encoded values to a growing byte buffer."""

    __slots__ = ("_buf",)

    def __init__(self) -> None:
        self._buf = bytearray()

    def __len__(self) -> int:
        return len(self._buf)

    def is_empty(self) -> bool:
        return not self._buf

    def finish(self) -> bytes:
        return bytes(self._buf)

    def write(self, data: bytes | bytearray | memoryview) -> int:
        self._buf += data
        return len(data)

    def write_byte(self, byte: int) -> None:
        self._buf += byte.to_bytes(1, "little")

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        self._buf += data

    def write_bool(self, flag: bool) -> None:
        self._buf.append(1 if flag else 0)

    def write_u16(self, number: int) -> None:
        self._buf += number.to_bytes(2, "little")

    def write_u32(self, number: int) -> None:
        self._buf += number.to_bytes(4, "little")

    def write_u24(self, number: int) -> None:
        """Write the low three bytes of a 32-bit number, little-endian."""
        self._buf += number.to_bytes(4, "little")[:3]

    def write_be_u24(self, number: int) -> None:
        """Write the three high bytes of a big-endian 32-bit number, then a zero byte."""
        self._buf += number.to_bytes(4, "big")[:3] + b"\x00"

    def write_u64(self, number: int) -> None:
        self._buf += number.to_bytes(8, "little")

    def write_be_u16(self, number: int) -> None:
        self._buf += number.to_bytes(2, "big")

    def write_be_u32(self, number: int) -> None:
        self._buf += number.to_bytes(4, "big")

    def write_be_u64(self, number: int) -> None:
        self._buf += number.to_bytes(8, "big")

    def write_be_i64(self, number: int) -> None:
        self._buf += number.to_bytes(8, "big", signed=True)

    def write_f32(self, number: float) -> None:
        self._buf += struct.pack("<f", number)

    def write_string(self, text: str) -> None:
        self._buf += text.encode("utf-8")