"""Application layer: use cases, ports, errors and DTOs. Depends only on domain."""

from phonebook.application.contact_service import ContactService, parse_contact_id
from phonebook.application.dto import UpsertResult
from phonebook.application.errors import (
    Conflict,
    ContactError,
    NotFound,
    ValidationError,
)
from phonebook.application.ports import ContactStore

__all__ = [
    "Conflict",
    "ContactError",
    "ContactService",
    "ContactStore",
    "NotFound",
    "UpsertResult",
    "ValidationError",
    "parse_contact_id",
]
