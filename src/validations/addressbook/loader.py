"""Build address book values from YAML documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from validations.addressbook.model import Address, AddressBook, AddressBookEntry, Email, PhoneNumber
from validations.constants.addressbook import ADDRESS_KEYS, ENTRIES_KEY, ENTRY_KEYS, PHONE_KEYS
from validations.exceptions import EntryParseError

logger = logging.getLogger(__name__)


def load_address_book(path: Path) -> AddressBook:
    """Read and parse an address book YAML file.

    Raises :class:`EntryParseError` when the file is unreadable or its shape
    is wrong. Domain rules are left to ``AddressBook.validate()``.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EntryParseError(f"cannot read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise EntryParseError(f"{path} is not valid UTF-8: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise EntryParseError(f"invalid YAML in {path}: {exc}") from exc

    book = parse_address_book(raw)
    logger.debug("Loaded %d address book entries from %s", len(book.entries), path)
    return book


def parse_address_book(raw: Any) -> AddressBook:
    """Convert an already-decoded document to an :class:`AddressBook`.

    Accepts either a list of entries or a mapping with an ``entries`` list.
    """
    if raw is None:
        return AddressBook()
    if isinstance(raw, dict):
        unknown = set(raw) - {ENTRIES_KEY}
        if unknown:
            raise EntryParseError(f"unknown top-level keys: {', '.join(sorted(map(str, unknown)))}")
        raw = raw.get(ENTRIES_KEY) or []
    if not isinstance(raw, list):
        raise EntryParseError(f"address book must be a list of entries, got {type(raw).__name__}")
    return AddressBook(entries=tuple(_parse_entry(item, f"entries[{index}]") for index, item in enumerate(raw)))


def _parse_entry(raw: Any, location: str) -> AddressBookEntry:
    mapping = _ensure_mapping(raw, location, ENTRY_KEYS)
    email = mapping.get("email")
    return AddressBookEntry(
        name=_scalar_text(mapping.get("name", ""), f"{location}.name"),
        email=Email(_scalar_text(email, f"{location}.email")) if email is not None else None,
        home_number=_parse_phone(mapping.get("home_number"), f"{location}.home_number"),
        cell_number=_parse_phone(mapping.get("cell_number"), f"{location}.cell_number"),
        address=_parse_address(mapping.get("address"), f"{location}.address"),
    )


def _parse_phone(raw: Any, location: str) -> PhoneNumber | None:
    if raw is None:
        return None
    mapping = _ensure_mapping(raw, location, PHONE_KEYS)
    return PhoneNumber(
        area_code=_scalar_text(mapping.get("area_code", ""), f"{location}.area_code"),
        number=_scalar_text(mapping.get("number", ""), f"{location}.number"),
    )


def _parse_address(raw: Any, location: str) -> Address | None:
    if raw is None:
        return None
    mapping = _ensure_mapping(raw, location, ADDRESS_KEYS)
    return Address(
        street=_scalar_text(mapping.get("street", ""), f"{location}.street"),
        city=_scalar_text(mapping.get("city", ""), f"{location}.city"),
        zip_code=_scalar_text(mapping.get("zip", ""), f"{location}.zip"),
    )


def _ensure_mapping(raw: Any, location: str, allowed: frozenset[str]) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise EntryParseError(f"{location} must be a mapping, got {type(raw).__name__}")
    unknown = set(raw) - allowed
    if unknown:
        raise EntryParseError(f"{location} has unknown keys: {', '.join(sorted(map(str, unknown)))}")
    return raw


def _scalar_text(value: Any, location: str) -> str:
    """Accept strings only; YAML reads unquoted numbers such as 02134 as octal."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        raise EntryParseError(f"{location} must be a quoted string, got the number {value!r}")
    if not isinstance(value, str):
        raise EntryParseError(f"{location} must be a string, got {type(value).__name__}")
    return value
