"""
Contact records and the sorted contact list.

insert_contact() is the only way the phone book produces a new list: it never
touches its input and always returns a fresh tuple sorted by last name.
"""
from operator import attrgetter
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from ripple.errors import FormFieldError
from ripple.log import get_logger

__all__ = [
    'Contact',
    'ContactForm',
    'ContactList',
    'insert_contact',
    'is_sorted',
]

logger = get_logger(__name__)


class Contact(BaseModel):
    """One phone book entry. All fields must be present; empty strings are allowed."""

    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str
    phone: str

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} ({self.phone})"


ContactList = tuple[Contact, ...]

_by_last_name = attrgetter('last_name')


def insert_contact(contacts: Sequence[Contact], record: Contact) -> ContactList:
    """
    Return a new list holding contacts plus record, sorted by last name.

    Last names compare by code point (so "Zed" sorts before "abe"). Where last
    names tie, their relative order is not guaranteed.

    Args:
        contacts: Existing contacts, possibly empty. Not modified.
        record: Contact to add. Not validated here.

    Returns:
        A new tuple one element longer than contacts.
    """
    result = tuple(sorted([record, *contacts], key=_by_last_name))
    logger.debug("contact inserted", last_name=record.last_name, size=len(result))
    return result


def is_sorted(contacts: Sequence[Contact]) -> bool:
    """True if every adjacent pair is in last-name order."""
    return all(
        a.last_name <= b.last_name
        for a, b in zip(contacts, contacts[1:])
    )


class ContactForm(BaseModel):
    """Values of the phone book form before submission."""

    model_config = ConfigDict(frozen=True)

    first_name: str = 'Coder'
    last_name: str = 'Byte'
    phone: str = '8885559999'

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    def with_value(self, field: str, value: str) -> 'ContactForm':
        """Copy of the form with one field replaced."""
        if field not in type(self).model_fields:
            raise FormFieldError(field, self.field_names())
        return type(self)(**{**self.model_dump(), field: value})

    def to_contact(self) -> Contact:
        return Contact(**self.model_dump())
