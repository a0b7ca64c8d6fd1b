"""Address book domain: a worked example of nested validation."""

from __future__ import annotations

from .loader import load_address_book, parse_address_book
from .model import Address, AddressBook, AddressBookEntry, Email, InvalidCharacters, PhoneNumber

__all__ = [
    "Address",
    "AddressBook",
    "AddressBookEntry",
    "Email",
    "InvalidCharacters",
    "PhoneNumber",
    "load_address_book",
    "parse_address_book",
]
