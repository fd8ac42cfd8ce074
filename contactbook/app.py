"""Main window of the address book and the command that starts it."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

from .contact import Contact
from .dialog import ContactDialog
from .eventlog import EventLog
from .manager import ContactManager, ContactNotFoundError

_COLUMNS = ("Name", "Phone", "Email")
DEFAULT_LOG_FILE = "ContactManagmentSystem/resources/log.txt"


def table_rows(contacts: Iterable[Contact]) -> list[tuple[str, str, str]]:
    """Return the ``(name, phone, email)`` cells shown for each contact, in order."""
    return [(contact.name, contact.phone, contact.email) for contact in contacts]


class MainWindow:
    """A contact table with search, add, edit and delete controls."""

    def __init__(self, root: object, manager: ContactManager, logger: EventLog) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.root = root
        self.manager = manager
        self.logger = logger

        root.title("Contact Management System")
        logger.info("MainWindow initialized")

        frame = ttk.Frame(root, padding=8)
        frame.pack(fill="both", expand=True)

        self._table = ttk.Treeview(frame, columns=_COLUMNS, show="headings", selectmode="browse")
        for column in _COLUMNS:
            self._table.heading(column, text=column)
            self._table.column(column, stretch=True)
        self._table.pack(fill="both", expand=True)

        bar = ttk.Frame(frame)
        bar.pack(fill="x", pady=(8, 0))
        self._search = tk.StringVar()
        ttk.Entry(bar, textvariable=self._search).pack(side="left", fill="x", expand=True)
        ttk.Button(bar, text="Search", command=self._on_search).pack(side="left", padx=2)
        ttk.Button(bar, text="Add Contact", command=self._on_add).pack(side="left", padx=2)
        self._edit_button = ttk.Button(bar, text="Edit Contact", command=self._on_edit)
        self._edit_button.pack(side="left", padx=2)
        self._delete_button = ttk.Button(bar, text="Delete Contact", command=self._on_delete)
        self._delete_button.pack(side="left", padx=2)

        self._table.bind("<<TreeviewSelect>>", self._on_selection_changed)
        root.protocol("WM_DELETE_WINDOW", self._on_close)

        self.refresh()

    def _show(self, contacts: list[Contact]) -> None:
        self._table.delete(*self._table.get_children())
        for contact, cells in zip(contacts, table_rows(contacts)):
            self._table.insert("", "end", iid=str(contact.id), values=cells)
        self._on_selection_changed()

    def refresh(self) -> None:
        """Show every stored contact in the table."""
        contacts = self.manager.all_contacts()
        self._show(contacts)
        self.logger.info(f"Table updated with {len(contacts)} contacts")

    def _selected(self) -> tuple[int, Contact] | None:
        selection = self._table.selection()
        if not selection:
            return None
        iid = selection[0]
        contact_id = int(iid)
        for contact in self.manager:
            if contact.id == contact_id:
                return self._table.index(iid), contact
        return None

    def _warn(self, message: str) -> None:
        from tkinter import messagebox

        messagebox.showwarning("Error", message, parent=self.root)

    def _on_selection_changed(self, _event: object = None) -> None:
        state = "!disabled" if self._table.selection() else "disabled"
        self._edit_button.state([state])
        self._delete_button.state([state])

    def _on_add(self) -> None:
        self.logger.info("Add button clicked")
        data = ContactDialog(self.root, None, self.logger).run()
        if data is None:
            return
        name, phone, email = data
        self.manager.add_contact(name, email, phone)
        self.refresh()
        self.logger.info("Added contact: " + name)

    def _on_edit(self) -> None:
        self.logger.info("Edit button clicked")
        selected = self._selected()
        if selected is None:
            self.logger.error("No contact selected for edit")
            self._warn("Please select a contact to edit.")
            return
        _, contact = selected
        data = ContactDialog(self.root, contact, self.logger).run()
        if data is None:
            return
        name, phone, email = data
        try:
            self.manager.edit_contact(Contact(name, email, phone, contact.id))
        except ContactNotFoundError as exc:
            self.logger.error(f"Failed to edit contact: {exc}")
            self._warn("Failed to edit contact.")
            return
        self.refresh()
        self.logger.info("Edited contact: " + name)

    def _on_delete(self) -> None:
        from tkinter import messagebox

        self.logger.info("Delete button clicked")
        selected = self._selected()
        if selected is None:
            self.logger.error("No contact selected for delete")
            self._warn("Please select a contact to delete.")
            return
        row, contact = selected
        if not messagebox.askyesno(
            "Confirm Delete", "Are you sure you want to delete this contact?", parent=self.root
        ):
            return
        try:
            self.manager.delete_contact(contact)
        except ContactNotFoundError as exc:
            self.logger.error(f"Failed to delete contact: {exc}")
            self._warn("Failed to delete contact.")
            return
        self.refresh()
        self.logger.info(f"Deleted contact at index {row}")

    def _on_search(self) -> None:
        self.logger.info("Search button clicked")
        query = self._search.get()
        try:
            contact = self.manager.search_contact(query)
        except ContactNotFoundError as exc:
            self.logger.error(f"Search failed: {exc}")
            self._warn("Search failed.")
            return
        self._show([contact])
        self.logger.info(f"Searched for: {query}, found 1 contact")

    def _on_close(self) -> None:
        self.logger.info("MainWindow destroyed")
        self.root.destroy()


def main(argv: list[str] | None = None) -> int:
    """Open the address book window and run until it is closed."""
    parser = argparse.ArgumentParser(description="Manage a list of contacts.")
    parser.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="event log to append to")
    args = parser.parse_args(argv)

    import tkinter as tk

    with EventLog(args.log_file) as logger:
        logger.info("Application started")
        manager = ContactManager()
        manager.all_contacts()
        logger.info("Contacts loaded successfully")

        root = tk.Tk()
        MainWindow(root, manager, logger)
        root.mainloop()
        logger.info("Application closed")
    return 0