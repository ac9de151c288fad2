"""Errors raised by ContactService. The API maps them to HTTP responses."""


class ContactError(Exception):
    """Base class for contact directory errors."""


class ValidationError(ContactError, ValueError):
    """A required field is missing or empty, or an id is malformed."""


class Conflict(ContactError):
    """A contact with the same name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Name already exists: {name}")
        self.name = name


class NotFound(ContactError):
    """No contact has the given id."""

    def __init__(self, contact_id: int) -> None:
        super().__init__(f"Contact not found: {contact_id}")
        self.contact_id = contact_id
