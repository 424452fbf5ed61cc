"""Interface for managing index files, with a local bookkeeping implementation."""

from __future__ import annotations

import abc


class FileManager(abc.ABC):
    """Manages files an index reads and writes, such as replication or backup."""

    @abc.abstractmethod
    def load_file(self, filename: str) -> bool:
        """Make ``filename`` available on local disk; False on failure."""

    @abc.abstractmethod
    def add_file(self, filename: str) -> bool:
        """Start managing ``filename``; False on failure."""

    @abc.abstractmethod
    def is_existed(self, filename: str) -> bool | None:
        """Return whether ``filename`` exists, or None on failure."""

    @abc.abstractmethod
    def remove_file(self, filename: str) -> bool:
        """Stop managing ``filename``; False on failure."""


class LocalFileManager(FileManager):
    """Tracks file names only; it never touches files on disk. Not thread-safe."""

    def __init__(self) -> None:
        self._files: set[str] = set()

    def load_file(self, filename: str) -> bool:
        """Local files are already on disk, so loading always succeeds."""
        if not isinstance(filename, str):
            raise TypeError(f"filename must be a str, not {type(filename).__name__}")
        return True

    def add_file(self, filename: str) -> bool:
        self._files.add(filename)
        return True

    def is_existed(self, filename: str) -> bool:
        return filename in self._files

    def remove_file(self, filename: str) -> bool:
        self._files.discard(filename)
        return True