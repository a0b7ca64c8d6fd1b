"""Parsing-related exceptions."""

from __future__ import annotations

from validations.exceptions.base import ValidationsError


class EntryParseError(ValidationsError, ValueError):
    """Raised when an address book file cannot be turned into entries."""
