"""Demo applications built from ripple components.

- counters: two presentational buttons sharing one counter behavior
- window: live window dimensions with a value logger
- phonebook: a contact form feeding a table sorted by last name
"""
from ripple.demos.counters import ClickCounter, CounterApp, HoverCounter
from ripple.demos.phonebook import InformationTable, PhoneBook, PhoneBookForm
from ripple.demos.window import WindowSizeApp

__all__ = [
    'ClickCounter',
    'HoverCounter',
    'CounterApp',
    'WindowSizeApp',
    'PhoneBook',
    'PhoneBookForm',
    'InformationTable',
]
