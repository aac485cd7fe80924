"""
Phone book: a contact form above a table sorted by last name.

PhoneBook owns the contact list. The form reports field changes and submits;
the table only reads. Every new list comes from insert_contact().
"""
from functools import reduce
from typing import Iterable

from ripple.contacts import Contact, ContactForm, ContactList, insert_contact
from ripple.decorators import component
from ripple.hooks import use_handler, use_ref, use_state
from ripple.html import escape_html as escape, spread_attrs

STYLE = {
    'table': {
        'borderCollapse': 'collapse',
    },
    'tableCell': {
        'border': '1px solid gray',
        'margin': 0,
        'padding': '5px 10px',
        'width': 'max-content',
        'minWidth': '150px',
    },
    'form': {
        'container': {
            'padding': '20px',
            'border': '1px solid #F0F8FF',
            'borderRadius': '15px',
            'width': 'max-content',
            'marginBottom': '40px',
        },
        'inputs': {
            'marginBottom': '5px',
        },
        'submitBtn': {
            'marginTop': '10px',
            'padding': '10px 15px',
            'border': 'none',
            'backgroundColor': 'lightseagreen',
            'fontSize': '14px',
            'borderRadius': '5px',
        },
    },
}

FIELDS = (
    ('first_name', 'First name'),
    ('last_name', 'Last name'),
    ('phone', 'Phone'),
)

COLUMNS = ('First name', 'Last name', 'Phone')


def contacts_of(initial: Iterable[Contact]) -> ContactList:
    """Sorted contact list built by inserting each contact in turn."""
    return reduce(insert_contact, initial, ())


@component
def PhoneBookForm(*, values: ContactForm, on_change, on_submit):
    use_handler('change', on_change)
    use_handler('submit', on_submit)

    form_attrs = spread_attrs({'data-on-submit': 'submit', 'style': STYLE['form']['container']})
    yield f'<form{form_attrs}>'
    for name, label in FIELDS:
        input_attrs = spread_attrs({
            'style': STYLE['form']['inputs'],
            'class': name,
            'name': name,
            'type': 'text',
            'value': getattr(values, name),
            'data-on-change': 'change',
        })
        yield f'\n  <label>{label}:</label>\n  <br />\n  <input{input_attrs} />\n  <br />'
    submit_attrs = spread_attrs({
        'style': STYLE['form']['submitBtn'],
        'class': 'submitButton',
        'type': 'submit',
        'value': 'Add User',
    })
    yield f'\n  <input{submit_attrs} />\n</form>'


@component
def InformationTable(*, contacts: Iterable[Contact]):
    cell = spread_attrs({'style': STYLE['tableCell']})
    yield f'<table{spread_attrs({"style": STYLE["table"], "class": "informationTable"})}>'
    yield '\n  <thead>\n    <tr>'
    for column in COLUMNS:
        yield f'<th{cell}>{column}</th>'
    yield '</tr>\n  </thead>\n  <tbody>'
    for contact in contacts:
        yield (
            f'\n    <tr><td>{escape(contact.first_name)}</td>'
            f'<td>{escape(contact.last_name)}</td>'
            f'<td>{escape(contact.phone)}</td></tr>'
        )
    yield '\n  </tbody>\n</table>'


@component
def PhoneBook(*, initial: Iterable[Contact] = ()):
    contacts, set_contacts = use_state(lambda: contacts_of(initial))
    form, set_form = use_state(ContactForm)
    # Latest form values, readable by handlers from any render
    latest_form = use_ref(form)

    def add_contact(record: Contact) -> None:
        set_contacts(lambda prev: insert_contact(prev, record))

    def on_change(field: str, value: str) -> None:
        latest_form.current = latest_form.current.with_value(field, value)
        set_form(latest_form.current)

    def on_submit() -> Contact:
        record = latest_form.current.to_contact()
        add_contact(record)
        return record

    use_handler('add', add_contact)

    yield '<section>\n'
    yield from PhoneBookForm(values=form, on_change=on_change, on_submit=on_submit)
    yield '\n'
    yield from InformationTable(contacts=contacts)
    yield '\n</section>'
