"""A read-only view over a packed bitset used to filter search results."""

from __future__ import annotations


class BitsetView:
    """Bits packed little-endian within each byte; a set bit filters a row out."""

    def __init__(self, data=None, num_bits: int = 0) -> None:
        if data is None:
            data = b""
            num_bits = 0
        if num_bits < 0:
            raise ValueError("num_bits must not be negative")
        self.data = bytes(data)
        self._num_bits = num_bits
        if len(self.data) < self.byte_size():
            raise ValueError("data is too short for the number of bits")

    def empty(self) -> bool:
        return self._num_bits == 0

    def __len__(self) -> int:
        return self._num_bits

    def byte_size(self) -> int:
        return (self._num_bits + 7) >> 3

    def test(self, index: int) -> bool:
        """Return whether bit ``index`` is set; indexes past the end count as set."""
        if index < 0:
            raise IndexError("bit index must not be negative")
        if index >= self._num_bits:
            return True
        return bool(self.data[index >> 3] & (1 << (index & 7)))

    def count(self) -> int:
        """Count the set bits over every byte the view covers."""
        return int.from_bytes(self.data[: self.byte_size()], "little").bit_count()

    def to_string(self, start: int, stop: int) -> str:
        """Render bits ``start`` to ``stop`` as a string of 0s and 1s."""
        if self.empty():
            return ""
        stop = min(stop, self._num_bits)
        return "".join("1" if self.test(i) else "0" for i in range(start, stop))