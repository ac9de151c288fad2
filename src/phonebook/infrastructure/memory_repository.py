"""In-memory implementation of ContactStore (no DB)."""

from phonebook.domain import Contact


class InMemoryContactStore:
    """Stores contacts in a dict keyed by id. Ids come from a counter that only moves forward.

    Name uniqueness is not enforced here; ContactService checks before adding.
    """

    def __init__(self) -> None:
        self._by_id: dict[int, Contact] = {}
        self._last_id = 0

    def list_all(self) -> list[Contact]:
        return [self._by_id[cid] for cid in sorted(self._by_id)]

    def get_by_id(self, contact_id: int) -> Contact | None:
        return self._by_id.get(contact_id)

    def find_by_name(self, name: str) -> Contact | None:
        for contact in self._by_id.values():
            if contact.name == name:
                return contact
        return None

    def add(self, name: str, number: str) -> Contact:
        contact = Contact(id=self._last_id + 1, name=name, number=number)
        self._last_id = contact.id
        self._by_id[contact.id] = contact
        return contact

    def update(self, contact_id: int, name: str, number: str) -> Contact | None:
        if contact_id not in self._by_id:
            return None
        contact = Contact(id=contact_id, name=name, number=number)
        self._by_id[contact_id] = contact
        return contact

    def delete(self, contact_id: int) -> bool:
        return self._by_id.pop(contact_id, None) is not None

    def count(self) -> int:
        return len(self._by_id)
