"""Byte-oriented text file reading with character peeking and rewinding."""

from __future__ import annotations

import enum
import os
from types import TracebackType
from typing import BinaryIO

MAX_STRING_SIZE = 4096

_ENCODING = "latin-1"


class FileMode(enum.Enum):
    """Ways a file can be opened."""

    READ = "rb"
    WRITE = "wb"
    READ_WRITE = "r+b"


class TextFile:
    """An open file read one character, one line or all at once.

    Sizes and positions count bytes; every byte is read as one character.
    """

    def __init__(self, path: str | os.PathLike[str], mode: FileMode = FileMode.READ) -> None:
        if not isinstance(mode, FileMode):
            raise ValueError(f"unsupported file mode: {mode!r}")
        self._file: BinaryIO = open(path, mode.value)  # noqa: SIM115
        self._file.seek(0, os.SEEK_END)
        self._size = self._file.tell()
        self._file.seek(0)
        self._reached_end = False

    def __enter__(self) -> "TextFile":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def read_line(self, limit: int) -> str:
        """Read up to limit - 1 characters, stopping after a newline.

        Returns an empty string and marks the end of file when nothing is left.
        """
        if limit < 1:
            raise ValueError("limit must be at least 1")
        if limit == 1:
            return ""
        data = self._file.readline(limit - 1)
        if not data:
            self._reached_end = True
        return data.decode(_ENCODING)

    def read_character(self) -> str:
        """Read one character; an empty string (and end of file) when none is left."""
        data = self._file.read(1)
        if not data:
            self._reached_end = True
        return data.decode(_ENCODING)

    def peek_character(self) -> str:
        """Return the next character without moving; empty string at end of file."""
        data = self._file.read(1)
        if data:
            self._file.seek(-1, os.SEEK_CUR)
        return data.decode(_ENCODING)

    def rewind(self, count: int) -> None:
        """Move the position back by count characters."""
        self._file.seek(-count, os.SEEK_CUR)

    def position(self) -> int:
        """Current read/write position."""
        return self._file.tell()

    def at_end(self) -> bool:
        """True once a read has run into the end of the file."""
        return self._reached_end

    def read_all(self) -> str:
        """Read the whole file from its start.

        Raises ValueError when the file is larger than MAX_STRING_SIZE.
        """
        if self._size > MAX_STRING_SIZE:
            raise ValueError(
                "cannot read file contents to string, exceeds maximum string size "
                f"{MAX_STRING_SIZE}"
            )
        self._file.seek(0)
        return self._file.read(self._size).decode(_ENCODING)

    def size(self) -> int:
        """Size of the file in bytes when it was opened."""
        return self._size