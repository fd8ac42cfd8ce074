"""The contact record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Contact:
    """A single address-book entry identified by a numeric id."""

    name: str
    email: str
    phone: str
    id: int

    def __str__(self) -> str:
        return f"{self.name} <{self.email}> {self.phone}"