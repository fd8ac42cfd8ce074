"""In-memory collection of contacts."""

from __future__ import annotations

from collections.abc import Iterator

from .contact import Contact


class ContactNotFoundError(LookupError):
    """Raised when no stored contact matches a lookup."""


class ContactManager:
    """Holds contacts in insertion order and hands out increasing ids."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []
        self._next_id = 0

    def add_contact(self, name: str, email: str, phone: str) -> Contact:
        """Store a new contact under the next free id and return it."""
        contact = Contact(name, email, phone, self._next_id)
        self._next_id += 1
        self._contacts.append(contact)
        return contact

    def _find_by_id(self, contact_id: int) -> Contact:
        for stored in self._contacts:
            if stored.id == contact_id:
                return stored
        raise ContactNotFoundError(f"no contact with id {contact_id}")

    def edit_contact(self, contact: Contact) -> Contact:
        """Copy name, phone and email onto the stored contact with the same id."""
        stored = self._find_by_id(contact.id)
        stored.name = contact.name
        stored.phone = contact.phone
        stored.email = contact.email
        return stored

    def delete_contact(self, contact: Contact) -> None:
        """Remove the stored contact whose id matches the given one."""
        self._contacts.remove(self._find_by_id(contact.id))

    def search_contact(self, query: str) -> Contact:
        """Return the first contact whose name equals the query exactly."""
        for stored in self._contacts:
            if stored.name == query:
                return stored
        raise ContactNotFoundError(f"no contact named {query!r}")

    def all_contacts(self) -> list[Contact]:
        """Return the stored contacts in insertion order."""
        return list(self._contacts)

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(list(self._contacts))