# contactbook

A small desktop contact book. Each contact has a name, an e-mail address and
a phone number. The window lists contacts in a table and lets you add, edit,
delete and search for contacts by name. What you do is written to an event
log with a timestamp.

## Installing

```
pip install .
```

The window uses Tk, which ships with most Python installations.

## Running

```
contactbook
contactbook --log-file log.txt
```

`--log-file` names the event log to append to. By default it is
`ContactManagmentSystem/resources/log.txt`, relative to the current
directory. If the log file cannot be opened (for example because that
directory does not exist), a message is printed to standard error and the
window still opens; events are then not recorded.

The main window shows a table with the columns Name, Phone and Email, a
search box, and the buttons Search, Add Contact, Edit Contact and Delete
Contact. Edit and Delete are enabled only while a row is selected; a delete
asks for confirmation first.

Search looks for a contact whose name equals the search text exactly. If one
is found the table shows only that contact until the list is next refreshed
by an add, edit or delete; if none is found a warning is shown.

When you add or edit a contact, the entries are checked before they are
accepted:

- the name must not be empty;
- the e-mail address must contain both `@` and `.`;
- the phone number must not be empty and may hold only digits, `-` and `+`.

## What it does not do

The window keeps contacts in memory only. It starts with an empty list and
does not read or write a contacts file, so everything entered is gone when
the window is closed. Saving and loading are available from Python through
`contactbook.storage` (see below), but the window does not use them.

## Using it from Python

The contact list can be used on its own:

```python
from contactbook.manager import ContactManager, ContactNotFoundError

book = ContactManager()
book.add_contact("Ada", "ada@example.com", "0100")
book.add_contact("Grace", "grace@example.com", "0200")

print(len(book))                      # 2
for contact in book:
    print(contact.name, contact.email, contact.phone, contact.id)

try:
    found = book.search_contact("Ada")   # exact match on the name
except ContactNotFoundError:
    found = None
```

Contacts are `Contact` dataclasses (`contactbook.contact`) with the fields
`name`, `email`, `phone` and `id`. `add_contact` gives each new contact the
next numeric ID, starting at 0, and returns it. `edit_contact` copies the
name, e-mail and phone of the given contact onto the stored contact with the
same ID; `delete_contact` removes the stored contact with the same ID. Both
raise `ContactNotFoundError` when no contact has that ID, as does
`search_contact` when no name matches. `all_contacts` returns a list of the
contacts in the order they were added.

Contacts can be written to and read back from a plain text file, one contact
per line in the form `id,name,email,phone`:

```python
from contactbook.storage import ContactFile

store = ContactFile("contacts.txt")
store.save(book.all_contacts())
contacts = store.load()
```

`save` overwrites the file. `load` skips lines it cannot read and returns an
empty list if the file cannot be opened. Fields are not quoted, so a name or
e-mail address containing a comma does not read back as written.

Input checks are available without opening a window:

```python
from contactbook.dialog import validate_contact, ValidationError

try:
    validate_contact("Ada", "0100", "not-an-address")
except ValidationError as exc:
    print(exc)              # message for the user
    print(exc.log_message)  # line for the event log
```

`validate_contact(name, phone, email)` returns `(name, phone, email)` when
the data is accepted.

Events go to an append-only log file, one line per event, such as
`INFO: [2024-01-31 12:00:00] Application started`:

```python
from contactbook.eventlog import EventLog

with EventLog("log.txt") as log:
    log.info("Application started")
    log.error("Something went wrong")
```

## Tests

```
pip install .[test]
pytest
```