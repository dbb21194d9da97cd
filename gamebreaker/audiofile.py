"""Error codes and readable byte sources (disk or memory) for audio data."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import BinaryIO


class ErrorCode(IntEnum):
    NO_ERROR = 0
    INVALID_PARAMETER = 1
    FILE_NOT_FOUND = 2
    FILE_LOAD_FAILED = 3
    DLL_NOT_FOUND = 4
    OUT_OF_MEMORY = 5
    NOT_IMPLEMENTED = 6
    UNKNOWN_ERROR = 7


class AudioError(Exception):
    """An audio operation failed; ``code`` tells why."""

    def __init__(self, code: ErrorCode, message: str = "") -> None:
        self.code = ErrorCode(code)
        super().__init__(message or self.code.name.replace("_", " ").lower())


class File(ABC):
    """A readable, seekable source of bytes."""

    @abstractmethod
    def eof(self) -> bool: ...

    @abstractmethod
    def read(self, size: int) -> bytes: ...

    @abstractmethod
    def length(self) -> int: ...

    @abstractmethod
    def seek(self, offset: int) -> None: ...

    @abstractmethod
    def pos(self) -> int: ...

    def close(self) -> None:
        """Release the source; nothing to do by default."""

    def __enter__(self) -> File:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _read_uint(self, size: int) -> int:
        data = self.read(size)
        return int.from_bytes(data.ljust(size, b"\0"), "little")

    def read8(self) -> int:
        """Read an unsigned byte; 0 at the end of the data."""
        return self._read_uint(1)

    def read16(self) -> int:
        """Read an unsigned little-endian 16-bit number."""
        return self._read_uint(2)

    def read32(self) -> int:
        """Read an unsigned little-endian 32-bit number."""
        return self._read_uint(4)


class DiskFile(File):
    """A file on disk, or any binary file object handed in."""

    def __init__(self, handle: BinaryIO | None = None) -> None:
        self._handle = handle

    def open(self, path: str) -> None:
        """Open ``path`` for reading; AudioError if that fails."""
        self.close()
        try:
            self._handle = open(path, "rb")
        except FileNotFoundError as exc:
            raise AudioError(ErrorCode.FILE_NOT_FOUND, f"file not found: {path}") from exc
        except OSError as exc:
            raise AudioError(ErrorCode.FILE_LOAD_FAILED, f"cannot open {path}: {exc}") from exc

    def _require(self) -> BinaryIO:
        if self._handle is None:
            raise AudioError(ErrorCode.INVALID_PARAMETER, "no file is open")
        return self._handle

    def eof(self) -> bool:
        return self.pos() >= self.length()

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must not be negative")
        return self._require().read(size)

    def length(self) -> int:
        handle = self._require()
        current = handle.tell()
        end = handle.seek(0, 2)
        handle.seek(current)
        return end

    def seek(self, offset: int) -> None:
        if offset < 0:
            raise ValueError("offset must not be negative")
        self._require().seek(offset)

    def pos(self) -> int:
        return self._require().tell()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


class MemoryFile(File):
    """Bytes held in memory, read like a file."""

    def __init__(self, data: bytes | None = None) -> None:
        self._data = b""
        self._offset = 0
        if data is not None:
            self.open_mem(data)

    @property
    def data(self) -> bytes:
        return self._data

    def open_mem(self, data: bytes) -> None:
        """Use ``data`` as the content; it must not be empty."""
        content = bytes(data)
        if not content:
            raise AudioError(ErrorCode.INVALID_PARAMETER, "no data given")
        self._data = content
        self._offset = 0

    def open_to_mem(self, path: str) -> None:
        """Load the whole file at ``path``."""
        with DiskFile() as disk:
            disk.open(path)
            self.open_file_to_mem(disk)

    def open_file_to_mem(self, source: File | None) -> None:
        """Load everything ``source`` holds."""
        if source is None:
            raise AudioError(ErrorCode.INVALID_PARAMETER, "no source file given")
        source.seek(0)
        self.open_mem(source.read(source.length()))

    def eof(self) -> bool:
        return self._offset >= len(self._data)

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must not be negative")
        chunk = self._data[self._offset:self._offset + size]
        self._offset += len(chunk)
        return chunk

    def length(self) -> int:
        return len(self._data)

    def seek(self, offset: int) -> None:
        """Move to ``offset``; a negative offset counts from the end."""
        target = offset if offset >= 0 else len(self._data) + offset
        self._offset = min(max(target, 0), len(self._data))

    def pos(self) -> int:
        return self._offset