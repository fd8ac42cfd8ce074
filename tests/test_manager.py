import pytest

from contactbook.contact import Contact
from contactbook.manager import ContactManager, ContactNotFoundError


@pytest.fixture
def manager():
    mgr = ContactManager()
    mgr.add_contact("Alice", "alice@example.com", "555-0100")
    mgr.add_contact("Bob", "bob@example.com", "555-0101")
    return mgr


def test_new_manager_is_empty():
    mgr = ContactManager()
    assert len(mgr) == 0
    assert mgr.all_contacts() == []


def test_ids_start_at_zero_and_increase(manager):
    assert [c.id for c in manager] == [0, 1]


def test_add_returns_stored_contact(manager):
    added = manager.add_contact("Carol", "carol@example.com", "555-0102")
    assert added == Contact("Carol", "carol@example.com", "555-0102", 2)
    assert manager.all_contacts()[-1] is added
    assert len(manager) == 3


def test_ids_are_not_reused_after_delete(manager):
    manager.delete_contact(manager.search_contact("Bob"))
    added = manager.add_contact("Carol", "carol@example.com", "555-0102")
    assert added.id == 2


def test_search_finds_exact_name(manager):
    found = manager.search_contact("Bob")
    assert found.email == "bob@example.com"


def test_search_returns_first_match(manager):
    manager.add_contact("Alice", "other@example.com", "555-0103")
    assert manager.search_contact("Alice").id == 0


def test_search_missing_raises(manager):
    with pytest.raises(ContactNotFoundError):
        manager.search_contact("alice")


def test_edit_updates_by_id(manager):
    manager.edit_contact(Contact("Alicia", "alicia@example.com", "555-0111", 0))
    stored = manager.all_contacts()[0]
    assert stored == Contact("Alicia", "alicia@example.com", "555-0111", 0)
    assert len(manager) == 2


def test_edit_unknown_id_raises(manager):
    with pytest.raises(ContactNotFoundError):
        manager.edit_contact(Contact("X", "x@example.com", "555-0100", 42))


def test_delete_removes_contact(manager):
    manager.delete_contact(Contact("ignored", "", "", 0))
    assert [c.name for c in manager] == ["Bob"]


def test_delete_missing_raises(manager):
    with pytest.raises(ContactNotFoundError):
        manager.delete_contact(Contact("Alice", "alice@example.com", "555-0100", 9))
    assert len(manager) == 2


def test_all_contacts_is_a_copy(manager):
    listing = manager.all_contacts()
    listing.clear()
    assert len(manager) == 2


def test_iteration_follows_insertion_order(manager):
    assert [c.name for c in manager] == ["Alice", "Bob"]