"""Reading and writing contacts as comma-separated lines."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable

from .contact import Contact

_log = logging.getLogger(__name__)

_WS = " \t\n\v\f\r"
_HEAD = re.compile(rf"[{_WS}]*([+-]?[0-9]+)[{_WS}]*([^{_WS}])[{_WS}]*(.*)", re.DOTALL)


def _parse_line(line: str) -> Contact | None:
    match = _HEAD.fullmatch(line)
    if match is None:
        return None
    parts = match.group(3).split(",", 2)
    if len(parts) != 3 or not parts[2]:
        return None
    name, email, phone = parts
    return Contact(name, email, phone, int(match.group(1)))


class ContactFile:
    """A file holding one ``id,name,email,phone`` line per contact."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = path

    def save(self, contacts: Iterable[Contact]) -> None:
        """Overwrite the file with the given contacts."""
        with open(self.path, "w", encoding="utf-8") as handle:
            for contact in contacts:
                handle.write(f"{contact.id},{contact.name},{contact.email},{contact.phone}\n")

    def load(self) -> list[Contact]:
        """Read contacts back, skipping malformed lines.

        A file that cannot be opened yields an empty list.
        """
        try:
            with open(self.path, encoding="utf-8") as handle:
                lines = handle.read().split("\n")
        except OSError as exc:
            _log.error("Error opening file for reading: %s (%s)", self.path, exc)
            return []
        if lines and lines[-1] == "":
            lines.pop()
        return [contact for contact in map(_parse_line, lines) if contact is not None]