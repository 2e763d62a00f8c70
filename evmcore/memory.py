"""Byte-addressed, growable machine memory."""

from __future__ import annotations

_WORD_BYTES = 32
_MAX_U256 = (1 << 256) - 1


class Memory:
    """Sequential memory backed by a bytearray."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Memory):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Memory(len={len(self._data)})"

    def effective_len(self) -> int:
        """Length of the memory in use."""
        return len(self._data)

    def data(self) -> bytes:
        """A copy of the full memory."""
        return bytes(self._data)

    def resize(self, new_size: int) -> None:
        """Grow with zeros or truncate to ``new_size`` bytes."""
        if new_size < 0:
            raise ValueError(f"negative memory size: {new_size}")
        current = len(self._data)
        if new_size > current:
            self._data.extend(bytes(new_size - current))
        else:
            del self._data[new_size:]

    def _check_range(self, offset: int, size: int) -> None:
        if offset < 0 or size < 0 or offset + size > len(self._data):
            raise IndexError(
                f"memory range {offset}..{offset + size} outside 0..{len(self._data)}"
            )

    def get_slice(self, offset: int, size: int) -> bytes:
        """Return ``size`` bytes starting at ``offset``."""
        self._check_range(offset, size)
        return bytes(self._data[offset : offset + size])

    def set_byte(self, index: int, byte: int) -> None:
        """Store one byte at ``index``."""
        self._check_range(index, 1)
        self._data[index] = byte

    def set_u256(self, index: int, value: int) -> None:
        """Store a 256-bit word big-endian at ``index``."""
        if not 0 <= value <= _MAX_U256:
            raise ValueError(f"value is not a 256-bit word: {value}")
        self._check_range(index, _WORD_BYTES)
        self._data[index : index + _WORD_BYTES] = value.to_bytes(_WORD_BYTES, "big")

    def set(self, offset: int, value: bytes) -> None:
        """Copy ``value`` into memory at ``offset``."""
        if not value:
            return
        self._check_range(offset, len(value))
        self._data[offset : offset + len(value)] = value

    def set_data(self, memory_offset: int, data_offset: int, length: int, data: bytes) -> None:
        """Copy ``length`` bytes of ``data`` from ``data_offset`` into memory.

        Bytes past the end of ``data`` are written as zeros.
        """
        self._check_range(memory_offset, length)
        if data_offset < 0:
            raise IndexError(f"negative data offset: {data_offset}")
        end = memory_offset + length
        if data_offset >= len(data):
            self._data[memory_offset:end] = bytes(length)
            return
        chunk = data[data_offset : min(data_offset + length, len(data))]
        copied_end = memory_offset + len(chunk)
        self._data[memory_offset:copied_end] = chunk
        self._data[copied_end:end] = bytes(end - copied_end)


def next_multiple_of_32(x: int) -> int:
    """Round ``x`` up to the closest multiple of 32."""
    if x < 0:
        raise ValueError(f"negative size: {x}")
    return x + (-x % _WORD_BYTES)