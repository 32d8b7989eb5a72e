"""A logger writing tagged messages to a file, the terminal, or both."""

from __future__ import annotations

import os
import sys
from types import TracebackType
from typing import TextIO


class Logger:
    """Writes Info, Warning and Error lines with printf-style formatting."""

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        output_to_terminal: bool = True,
    ) -> None:
        self._file: TextIO | None = (
            open(path, "w", encoding="utf-8") if path is not None else None  # noqa: SIM115
        )
        self.output_to_terminal = output_to_terminal

    def __enter__(self) -> "Logger":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _write(self, tag: str, message: str, args: tuple[object, ...]) -> None:
        text = message % args if args else message
        line = f"[{tag}] {text}\n"
        if self._file is not None:
            self._file.write(line)
            self._file.flush()
        if self.output_to_terminal:
            sys.stdout.write(line)

    def info(self, message: str, *args: object) -> None:
        """Log an informational message."""
        self._write("Info", message, args)

    def warn(self, message: str, *args: object) -> None:
        """Log a warning."""
        self._write("Warning", message, args)

    def error(self, message: str, *args: object) -> None:
        """Log an error."""
        self._write("Error", message, args)

    def close(self) -> None:
        """Close the log file, if there is one."""
        if self._file is not None:
            self._file.close()