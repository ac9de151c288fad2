"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.memory_repository import InMemoryContactStore
from phonebook.infrastructure.persistence.neo4j_repository import (
    Neo4jContactStore,
    ensure_contact_constraints,
)
from phonebook.infrastructure.phone import normalize_phone, phone_normalizer

__all__ = [
    "InMemoryContactStore",
    "Neo4jContactStore",
    "ensure_contact_constraints",
    "normalize_phone",
    "phone_normalizer",
]
