"""Neo4j implementation of ContactStore.
Graph: one (:Contact {id, name, number}) node per contact, plus a single
(:IdSequence {name: "contact", value}) counter node that allocates ids.
The counter is only ever incremented, so ids are not reused after a delete.
"""

import logging

from neo4j.exceptions import ConstraintError

from phonebook.application.errors import Conflict
from phonebook.domain import Contact

logger = logging.getLogger(__name__)

CONTACT_SEQUENCE = "contact"

_CONSTRAINT_QUERIES = (
    """
    CREATE CONSTRAINT contact_id_unique IF NOT EXISTS
    FOR (c:Contact) REQUIRE c.id IS UNIQUE
    """,
    """
    CREATE CONSTRAINT contact_name_unique IF NOT EXISTS
    FOR (c:Contact) REQUIRE c.name IS UNIQUE
    """,
    """
    CREATE CONSTRAINT id_sequence_unique IF NOT EXISTS
    FOR (s:IdSequence) REQUIRE s.name IS UNIQUE
    """,
)

_ADD_QUERY = """
MERGE (s:IdSequence {name: $sequence})
ON CREATE SET s.value = 0
WITH s
SET s.value = s.value + 1
WITH s.value AS next_id
CREATE (c:Contact {id: next_id, name: $name, number: $number})
RETURN c
"""

_UPDATE_QUERY = """
MATCH (c:Contact {id: $id})
SET c.name = $name, c.number = $number
RETURN c
"""

_DELETE_QUERY = """
MATCH (c:Contact {id: $id})
DETACH DELETE c
RETURN count(c) AS deleted
"""


def ensure_contact_constraints(driver) -> None:
    """Create unique constraints on Contact(id), Contact(name) and IdSequence(name) if missing.

    Call at startup. With the name constraint in place, two concurrent creates
    of the same name cannot both succeed.
    """
    with driver.session() as session:
        for query in _CONSTRAINT_QUERIES:
            session.run(query).consume()


class Neo4jContactStore:
    """Stores contacts as Contact nodes in Neo4j."""

    def __init__(self, driver: object) -> None:
        self._driver = driver

    def list_all(self) -> list[Contact]:
        with self._driver.session() as session:
            result = session.run("MATCH (c:Contact) RETURN c ORDER BY c.id")
            return [_record_to_contact(rec) for rec in result]

    def get_by_id(self, contact_id: int) -> Contact | None:
        with self._driver.session() as session:
            record = session.run(
                "MATCH (c:Contact {id: $id}) RETURN c", id=contact_id
            ).single()
        if not record:
            return None
        return _record_to_contact(record)

    def find_by_name(self, name: str) -> Contact | None:
        with self._driver.session() as session:
            record = session.run(
                "MATCH (c:Contact {name: $name}) RETURN c LIMIT 1", name=name
            ).single()
        if not record:
            return None
        return _record_to_contact(record)

    def add(self, name: str, number: str) -> Contact:
        logger.debug("Creating contact %r", name)
        with self._driver.session() as session:
            try:
                record = session.run(
                    _ADD_QUERY,
                    sequence=CONTACT_SEQUENCE,
                    name=name,
                    number=number,
                ).single()
            except ConstraintError as e:
                raise Conflict(name) from e
        if not record:
            raise RuntimeError("Neo4jContactStore.add: expected one result")
        return _record_to_contact(record)

    def update(self, contact_id: int, name: str, number: str) -> Contact | None:
        logger.debug("Updating contact %s", contact_id)
        with self._driver.session() as session:
            try:
                record = session.run(
                    _UPDATE_QUERY, id=contact_id, name=name, number=number
                ).single()
            except ConstraintError as e:
                raise Conflict(name) from e
        if not record:
            return None
        return _record_to_contact(record)

    def delete(self, contact_id: int) -> bool:
        logger.debug("Deleting contact %s", contact_id)
        with self._driver.session() as session:
            record = session.run(_DELETE_QUERY, id=contact_id).single()
        return bool(record and record["deleted"])

    def count(self) -> int:
        with self._driver.session() as session:
            record = session.run("MATCH (c:Contact) RETURN count(c) AS n").single()
        return record["n"] if record else 0


def _record_to_contact(record) -> Contact:
    c = record["c"]
    return Contact(id=c["id"], name=c["name"], number=c["number"])
