"""Contact directory use cases: list, get, create, update, delete, upsert and search."""

import logging
from collections.abc import Callable

from phonebook.application.dto import UpsertResult
from phonebook.application.errors import Conflict, NotFound, ValidationError
from phonebook.application.ports import ContactStore
from phonebook.domain import Contact

logger = logging.getLogger(__name__)

# Largest id a store can hold (Neo4j integers are signed 64-bit).
MAX_CONTACT_ID = 2**63 - 1


def parse_contact_id(raw: int | str) -> int:
    """Parse an id received from a client. Raises ValidationError unless it is a positive integer."""
    if isinstance(raw, bool):
        raise ValidationError(f"Malformed id: {raw!r}")
    if isinstance(raw, int):
        contact_id = raw
    else:
        text = (raw or "").strip()
        if not text.isascii() or not text.isdigit():
            raise ValidationError(f"Malformed id: {raw!r}")
        if len(text.lstrip("0")) > len(str(MAX_CONTACT_ID)):
            raise ValidationError(f"Malformed id: {text[:20]}...")
        contact_id = int(text)
    if contact_id < 1 or contact_id > MAX_CONTACT_ID:
        raise ValidationError(f"Malformed id: {raw!r}")
    return contact_id


def _required(value: str | None, field_name: str) -> str:
    clean = (value or "").strip()
    if not clean:
        raise ValidationError(f"Field missing: {field_name}")
    return clean


class ContactService:
    """Maintains the set of contacts and enforces name uniqueness over any ContactStore."""

    def __init__(
        self,
        store: ContactStore,
        *,
        normalize_number: Callable[[str], str | None] | None = None,
    ) -> None:
        self._store = store
        self._normalize_number = normalize_number

    def list_contacts(self) -> list[Contact]:
        """Return all contacts."""
        return self._store.list_all()

    def get_contact(self, contact_id: int) -> Contact:
        """Return the contact with the given id. Raises NotFound if absent."""
        contact = self._store.get_by_id(contact_id)
        if contact is None:
            raise NotFound(contact_id)
        return contact

    def create_contact(self, name: str, number: str) -> Contact:
        """Store a new contact. Rejects empty fields and names already in use."""
        name = _required(name, "name")
        number = _required(number, "number")
        if self._store.find_by_name(name) is not None:
            raise Conflict(name)
        try:
            return self._store.add(name, number)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    def update_contact(
        self, contact_id: int, number: str, name: str | None = None
    ) -> Contact:
        """Replace the number (and the name, when given). The id never changes."""
        number = _required(number, "number")
        if name is not None:
            name = _required(name, "name")
        current = self.get_contact(contact_id)
        new_name = name if name is not None else current.name
        if new_name != current.name:
            holder = self._store.find_by_name(new_name)
            if holder is not None and holder.id != contact_id:
                raise Conflict(new_name)
        try:
            updated = self._store.update(contact_id, new_name, number)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        if updated is None:
            raise NotFound(contact_id)
        return updated

    def delete_contact(self, contact_id: int) -> bool:
        """Remove the contact if present. Deleting an unknown id is a no-op.

        Returns True if a contact was removed.
        """
        removed = self._store.delete(contact_id)
        if not removed:
            logger.debug("Delete of unknown contact %s ignored", contact_id)
        return removed

    def upsert_by_name(self, name: str, number: str) -> UpsertResult:
        """Replace the number of the contact with this name, or create it if none exists.

        This is the explicit overwrite path; create_contact always rejects duplicates.
        """
        name = _required(name, "name")
        number = _required(number, "number")
        existing = self._store.find_by_name(name)
        if existing is None:
            return UpsertResult(contact=self.create_contact(name, number), created=True)
        return UpsertResult(
            contact=self.update_contact(existing.id, number), created=False
        )

    def search_contacts(self, query: str) -> list[Contact]:
        """Return contacts whose name contains the query (case-insensitive, partial).

        If the query parses as a phone number, contacts with the same normalized number match too.
        """
        if not query or not query.strip():
            return []
        needle = query.strip().lower()
        wanted_number = self._normalize(query)
        out = []
        for contact in self._store.list_all():
            if needle in contact.name.lower():
                out.append(contact)
            elif wanted_number and self._normalize(contact.number) == wanted_number:
                out.append(contact)
        return out

    def count_contacts(self) -> int:
        """Return the number of contacts."""
        return self._store.count()

    def _normalize(self, number: str) -> str | None:
        if self._normalize_number is None:
            return None
        return self._normalize_number(number)
