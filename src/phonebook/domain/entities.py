"""Domain entity: Contact."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Contact:
    """
    A phonebook entry: a name and the number to reach it on.
    The id is assigned by the store and never changes afterwards.
    """

    id: int
    name: str
    number: str

    def __post_init__(self):
        name = (self.name or "").strip()
        if not name:
            raise ValueError("Contact name must be non-empty.")
        number = (self.number or "").strip()
        if not number:
            raise ValueError("Contact number must be non-empty.")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "number", number)
