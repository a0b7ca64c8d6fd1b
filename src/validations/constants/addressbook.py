"""Messages and limits for the address book domain."""

from __future__ import annotations

import re

BLANK_MESSAGE: str = "can't be blank"
PHONE_REQUIRED_MESSAGE: str = "at least one phone number is required"
INVALID_CHARACTERS_MESSAGE: str = "has invalid characters"
EMAIL_AT_MESSAGE: str = "must contain an @ symbol"
ZIP_FORMAT_MESSAGE: str = "must be a 5 digit code"

ZIP_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{5}")
PHONE_DIGITS: frozenset[str] = frozenset("0123456789")
PHONE_SEPARATOR: str = "-"

ENTRY_KEYS: frozenset[str] = frozenset({"name", "email", "home_number", "cell_number", "address"})
PHONE_KEYS: frozenset[str] = frozenset({"area_code", "number"})
ADDRESS_KEYS: frozenset[str] = frozenset({"street", "city", "zip"})
ENTRIES_KEY: str = "entries"
DUPLICATE_NAME_MESSAGE: str = "has already been taken"
