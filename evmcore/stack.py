"""The machine stack of 256-bit words."""

from __future__ import annotations

STACK_LIMIT = 1024
_WORD_BYTES = 32
_MAX_U256 = (1 << 256) - 1


class StackUnderflow(IndexError):
    """Raised when an operation needs more items than the stack holds."""


class StackOverflow(OverflowError):
    """Raised when a push would exceed the stack limit."""


def _check_word(value: int) -> int:
    if not 0 <= value <= _MAX_U256:
        raise ValueError(f"value is not a 256-bit word: {value}")
    return value


class Stack:
    """A bounded stack of 256-bit words; the top is the last item."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: list[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self._data) + "]"

    def __repr__(self) -> str:
        return f"Stack({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self._data == other._data

    def data(self) -> list[int]:
        """A copy of the stack items, bottom first."""
        return list(self._data)

    def _require(self, count: int) -> None:
        if len(self._data) < count:
            raise StackUnderflow(
                f"need {count} stack items, have {len(self._data)}"
            )

    def _ensure_room(self) -> None:
        if len(self._data) + 1 > STACK_LIMIT:
            raise StackOverflow(f"stack limit of {STACK_LIMIT} items reached")

    def reduce_one(self) -> None:
        """Drop the top item."""
        self._require(1)
        self._data.pop()

    def pop(self) -> int:
        """Remove and return the top item."""
        self._require(1)
        return self._data.pop()

    def pop_many(self, count: int) -> tuple[int, ...]:
        """Remove ``count`` items and return them, top first."""
        if count < 0:
            raise ValueError(f"negative item count: {count}")
        if count == 0:
            return ()
        self._require(count)
        values = tuple(reversed(self._data[-count:]))
        del self._data[-count:]
        return values

    def push(self, value: int) -> None:
        """Push a word; the stack is left unchanged on overflow."""
        _check_word(value)
        self._ensure_room()
        self._data.append(value)

    def push_b256(self, value: bytes) -> None:
        """Push 32 big-endian bytes as a word."""
        if len(value) != _WORD_BYTES:
            raise ValueError(f"expected {_WORD_BYTES} bytes, got {len(value)}")
        self._ensure_room()
        self._data.append(int.from_bytes(value, "big"))

    def peek(self, no_from_top: int) -> int:
        """Return the item ``no_from_top`` places below the top (0 is the top)."""
        if no_from_top < 0:
            raise ValueError(f"negative stack position: {no_from_top}")
        self._require(no_from_top + 1)
        return self._data[-no_from_top - 1]

    def set(self, no_from_top: int, value: int) -> None:
        """Replace the item ``no_from_top`` places below the top."""
        if no_from_top < 0:
            raise ValueError(f"negative stack position: {no_from_top}")
        _check_word(value)
        self._require(no_from_top + 1)
        self._data[-no_from_top - 1] = value

    def dup(self, n: int) -> None:
        """Push a copy of the ``n``-th item from the top (1 is the top)."""
        if n < 1:
            raise ValueError(f"dup depth must be at least 1: {n}")
        self._require(n)
        self._ensure_room()
        self._data.append(self._data[-n])

    def swap(self, n: int) -> None:
        """Exchange the top item with the one ``n`` places below it."""
        if n < 1:
            raise ValueError(f"swap depth must be at least 1: {n}")
        self._require(n + 1)
        data = self._data
        data[-1], data[-1 - n] = data[-1 - n], data[-1]

    def push_slice(self, data: bytes) -> None:
        """Push up to 32 big-endian bytes as a word."""
        if len(data) > _WORD_BYTES:
            raise ValueError(f"at most {_WORD_BYTES} bytes fit a word, got {len(data)}")
        self._ensure_room()
        self._data.append(int.from_bytes(data, "big"))