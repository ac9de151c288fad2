"""
Phonebook core: clean-architecture layout.

- domain: entities (Contact). No outer dependencies.
- application: use cases (ContactService), ports (ContactStore), errors, DTOs.
- infrastructure: adapters (InMemoryContactStore, Neo4jContactStore), phone normalization.
"""

from phonebook.application import (
    Conflict,
    ContactError,
    ContactService,
    ContactStore,
    NotFound,
    UpsertResult,
    ValidationError,
    parse_contact_id,
)
from phonebook.domain import Contact
from phonebook.infrastructure import InMemoryContactStore, Neo4jContactStore

__all__ = [
    "Conflict",
    "Contact",
    "ContactError",
    "ContactService",
    "ContactStore",
    "InMemoryContactStore",
    "Neo4jContactStore",
    "NotFound",
    "UpsertResult",
    "ValidationError",
    "parse_contact_id",
]
