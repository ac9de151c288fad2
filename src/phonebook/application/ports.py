"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Contact


class ContactStore(Protocol):
    """Persists and queries contacts. Owns id allocation.

    Ids come from a monotonic counter starting at 1 and are never reused,
    even after the contact holding one is deleted.
    """

    def list_all(self) -> list[Contact]:
        """Return all contacts in ascending id order."""
        ...

    def get_by_id(self, contact_id: int) -> Contact | None:
        """Return the contact with the given id, or None."""
        ...

    def find_by_name(self, name: str) -> Contact | None:
        """Return the contact whose name matches exactly (case-sensitive), or None."""
        ...

    def add(self, name: str, number: str) -> Contact:
        """Allocate a new id, store the contact and return it."""
        ...

    def update(self, contact_id: int, name: str, number: str) -> Contact | None:
        """Replace name and number. Returns the updated contact, or None if not found."""
        ...

    def delete(self, contact_id: int) -> bool:
        """Remove the contact. Returns True if removed, False if not found."""
        ...

    def count(self) -> int:
        """Return the number of stored contacts."""
        ...
