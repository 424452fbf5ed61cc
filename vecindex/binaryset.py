"""Named binary blobs that make up a serialized index."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Binary:
    """A block of bytes with its logical size."""

    data: bytes
    size: int = 0


def copy_binary(binary: Binary) -> bytes:
    """Return an independent copy of the first ``size`` bytes of ``binary``."""
    return bytes(binary.data[: binary.size])


class BinarySet:
    """A mapping from names to binaries."""

    def __init__(self) -> None:
        self.binary_map: dict[str, Binary] = {}

    def get_by_name(self, name: str) -> Binary | None:
        """Return the binary stored under ``name``, or None."""
        return self.binary_map.get(name)

    def get_by_names(self, names) -> Binary | None:
        """Return the binary of the first name present, or None."""
        for name in names:
            if name in self.binary_map:
                return self.binary_map[name]
        return None

    def append(self, name: str, data, size: int | None = None) -> None:
        """Store a Binary, or raw bytes with an optional size, under ``name``."""
        if isinstance(data, Binary):
            self.binary_map[name] = data
            return
        data = bytes(data)
        self.binary_map[name] = Binary(data, len(data) if size is None else size)

    def erase(self, name: str) -> Binary | None:
        """Remove and return the binary under ``name``, or None."""
        return self.binary_map.pop(name, None)

    def clear(self) -> None:
        self.binary_map.clear()

    def __contains__(self, name: object) -> bool:
        return name in self.binary_map

    def __len__(self) -> int:
        return len(self.binary_map)