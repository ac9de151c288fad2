"""Data transfer objects returned by the application layer."""

from dataclasses import dataclass

from phonebook.domain import Contact


@dataclass(frozen=True)
class UpsertResult:
    """Outcome of an upsert by name: the stored contact and whether it is new."""

    contact: Contact
    created: bool
