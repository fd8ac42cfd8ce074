"""Contact entry form and the validation rules it enforces."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .contact import Contact

if TYPE_CHECKING:
    from .eventlog import EventLog

_PHONE = re.compile(r"[0-9+-]+")


class ValidationError(ValueError):
    """Raised when entered contact data is rejected.

    ``str(exc)`` is the message meant for the user; ``log_message`` is the
    line meant for the event log.
    """

    def __init__(self, message: str, log_message: str) -> None:
        super().__init__(message)
        self.log_message = log_message


def validate_contact(name: str, phone: str, email: str) -> tuple[str, str, str]:
    """Check entered data and return it as ``(name, phone, email)``.

    Name must be non-empty, email must contain both ``@`` and ``.``, and
    phone must consist only of digits, ``-`` and ``+``.
    """
    if not name:
        raise ValidationError(
            "Name cannot be empty.", "Validation failed: Name is empty"
        )
    if "@" not in email or "." not in email:
        raise ValidationError(
            "Please enter a valid email address.",
            "Validation failed: Invalid email format",
        )
    if not _PHONE.fullmatch(phone):
        raise ValidationError(
            "Please enter a valid phone number.",
            "Validation failed: Invalid phone format",
        )
    return name, phone, email


class ContactDialog:
    """Modal form for adding a contact, or editing one when ``contact`` is given."""

    def __init__(
        self,
        parent: object,
        contact: Contact | None = None,
        logger: EventLog | None = None,
    ) -> None:
        # The toolkit is loaded on demand so validation works without a display.
        import tkinter as tk
        from tkinter import ttk

        self._logger = logger
        self.result: tuple[str, str, str] | None = None
        editing = contact is not None

        self._window = tk.Toplevel(parent)
        self._window.title("Edit Contact" if editing else "Add Contact")
        self._log_info("Edit Contact dialog opened" if editing else "Add Contact dialog opened")

        self._name = tk.StringVar(value=contact.name if contact else "")
        self._phone = tk.StringVar(value=contact.phone if contact else "")
        self._email = tk.StringVar(value=contact.email if contact else "")

        form = ttk.Frame(self._window, padding=8)
        form.grid(row=0, column=0, sticky="nsew")
        self._window.columnconfigure(0, weight=1)
        form.columnconfigure(1, weight=1)

        fields = (("Name:", self._name), ("Phone:", self._phone), ("Email:", self._email))
        for row, (label, variable) in enumerate(fields):
            ttk.Label(form, text=label).grid(row=row, column=0, sticky="w", padx=(0, 6), pady=2)
            entry = ttk.Entry(form, textvariable=variable, width=32)
            entry.grid(row=row, column=1, sticky="ew", pady=2)
            if row == 0:
                entry.focus_set()

        buttons = ttk.Frame(form)
        buttons.grid(row=len(fields), column=0, columnspan=2, pady=(8, 0))
        ttk.Button(buttons, text="Save", command=self._on_save).pack(side="left", padx=4)
        ttk.Button(buttons, text="Cancel", command=self._on_cancel).pack(side="left", padx=4)

        self._window.protocol("WM_DELETE_WINDOW", self._on_cancel)
        self._window.transient(parent)

    def _log_info(self, message: str) -> None:
        if self._logger is not None:
            self._logger.info(message)

    def _log_error(self, message: str) -> None:
        if self._logger is not None:
            self._logger.error(message)

    def _on_save(self) -> None:
        from tkinter import messagebox

        try:
            data = validate_contact(self._name.get(), self._phone.get(), self._email.get())
        except ValidationError as exc:
            self._log_error(exc.log_message)
            messagebox.showwarning("Error", str(exc), parent=self._window)
            return
        self._log_info("Contact dialog saved: " + data[0])
        self.result = data
        self._window.destroy()

    def _on_cancel(self) -> None:
        self.result = None
        self._window.destroy()

    def run(self) -> tuple[str, str, str] | None:
        """Show the form until closed; return ``(name, phone, email)`` or None if cancelled."""
        self._window.grab_set()
        self._window.wait_window()
        return self.result