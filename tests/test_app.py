from contactbook.app import table_rows
from contactbook.contact import Contact
from contactbook.manager import ContactManager


def test_rows_show_name_phone_email():
    contact = Contact("Ada", "ada@example.com", "555-0100", 0)
    assert table_rows([contact]) == [("Ada", "555-0100", "ada@example.com")]


def test_no_contacts_no_rows():
    assert table_rows([]) == []


def test_rows_follow_manager_order():
    manager = ContactManager()
    manager.add_contact("Ada", "ada@example.com", "1")
    manager.add_contact("Bob", "bob@example.com", "2")
    manager.add_contact("Cy", "cy@example.com", "3")
    rows = table_rows(manager)
    assert [row[0] for row in rows] == ["Ada", "Bob", "Cy"]
    assert len(rows) == len(manager)


def test_rows_reflect_edits_and_deletes():
    manager = ContactManager()
    first = manager.add_contact("Ada", "ada@example.com", "1")
    second = manager.add_contact("Bob", "bob@example.com", "2")
    manager.edit_contact(Contact("Bea", "bea@example.com", "22", second.id))
    manager.delete_contact(first)
    assert table_rows(manager.all_contacts()) == [("Bea", "22", "bea@example.com")]


def test_rows_accept_generator():
    contacts = (Contact(f"n{i}", f"n{i}@example.com", str(i), i) for i in range(3))
    rows = table_rows(contacts)
    assert [row[1] for row in rows] == ["0", "1", "2"]