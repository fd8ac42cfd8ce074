"""Append-only event log with timestamped INFO and ERROR lines."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from typing import TextIO


def current_time_string() -> str:
    """Return the local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class EventLog:
    """Writes ``LEVEL: [timestamp] message`` lines to a file opened for append."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path
        self._file: TextIO | None
        try:
            self._file = open(path, "a", encoding="utf-8")
        except OSError:
            print(f"Error opening log file: {path}", file=sys.stderr)
            self._file = None

    def _write(self, level: str, message: str) -> None:
        if self._file is None:
            print("Log file is not open.", file=sys.stderr)
            return
        self._file.write(f"{level}: [{current_time_string()}] {message}\n")
        self._file.flush()

    def info(self, message: str) -> None:
        """Record an informational message."""
        self._write("INFO", message)

    def error(self, message: str) -> None:
        """Record an error message."""
        self._write("ERROR", message)

    def close(self) -> None:
        """Close the underlying file; later messages go nowhere."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> EventLog:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()