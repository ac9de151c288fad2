"""Integration tests for Neo4jContactStore. Require Docker
(testcontainers); skipped when no container can be started."""

import pytest

from phonebook.application import Conflict, ContactService, NotFound
from phonebook.infrastructure import Neo4jContactStore, ensure_contact_constraints


@pytest.fixture(scope="session")
def neo4j_driver():
    neo4j = pytest.importorskip("testcontainers.neo4j")
    container = neo4j.Neo4jContainer()
    try:
        container.start()
    except Exception as e:  # noqa: BLE001
        pytest.skip(f"Neo4j container unavailable: {e}")
    driver = container.get_driver()
    try:
        yield driver
    finally:
        driver.close()
        container.stop()


@pytest.fixture
def clean_neo4j(neo4j_driver):
    """Clear the graph before each test so tests are independent."""
    with neo4j_driver.session() as session:
        session.run("MATCH (n) DETACH DELETE n")
    ensure_contact_constraints(neo4j_driver)
    yield neo4j_driver


def test_add_get_by_id_list_all(clean_neo4j):
    store = Neo4jContactStore(clean_neo4j)
    ada = store.add("Ada Lovelace", "39-44-5323523")
    assert ada.id == 1

    found = store.get_by_id(ada.id)
    assert found == ada

    all_contacts = store.list_all()
    assert all_contacts == [ada]
    assert store.count() == 1


def test_ids_increase_and_are_not_reused(clean_neo4j):
    store = Neo4jContactStore(clean_neo4j)
    first = store.add("First", "1")
    second = store.add("Second", "2")
    assert store.delete(second.id) is True
    third = store.add("Third", "3")
    assert (first.id, second.id, third.id) == (1, 2, 3)
    assert [c.name for c in store.list_all()] == ["First", "Third"]


def test_find_by_name_exact(clean_neo4j):
    store = Neo4jContactStore(clean_neo4j)
    ada = store.add("Ada Lovelace", "1")
    assert store.find_by_name("Ada Lovelace") == ada
    assert store.find_by_name("ada lovelace") is None


def test_name_constraint_rejects_duplicate(clean_neo4j):
    store = Neo4jContactStore(clean_neo4j)
    store.add("Ada Lovelace", "1")
    with pytest.raises(Conflict):
        store.add("Ada Lovelace", "2")
    assert store.count() == 1


def test_update_keeps_id(clean_neo4j):
    store = Neo4jContactStore(clean_neo4j)
    ada = store.add("Ada", "1")
    updated = store.update(ada.id, "Ada", "2")
    assert updated.id == ada.id
    assert updated.number == "2"
    assert store.update(999, "X", "1") is None


def test_update_to_taken_name_conflicts(clean_neo4j):
    store = Neo4jContactStore(clean_neo4j)
    store.add("Ada", "1")
    bob = store.add("Bob", "2")
    with pytest.raises(Conflict):
        store.update(bob.id, "Ada", "3")
    assert store.get_by_id(bob.id).name == "Bob"


def test_delete_missing_returns_false(clean_neo4j):
    store = Neo4jContactStore(clean_neo4j)
    assert store.delete(42) is False


def test_service_over_neo4j(clean_neo4j):
    service = ContactService(Neo4jContactStore(clean_neo4j))
    created = service.create_contact("Dan Abramov", "12-43-234345")
    with pytest.raises(Conflict):
        service.create_contact("Dan Abramov", "000")
    result = service.upsert_by_name("Dan Abramov", "000")
    assert result.created is False
    assert service.get_contact(created.id).number == "000"
    service.delete_contact(created.id)
    service.delete_contact(created.id)
    with pytest.raises(NotFound):
        service.get_contact(created.id)
