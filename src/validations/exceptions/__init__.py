"""Shared exception hierarchy for validations."""

from __future__ import annotations

from .base import ValidationsError
from .parsing import EntryParseError
from .validation import ContractViolationError, ValidationFailed

__all__ = [
    "ContractViolationError",
    "EntryParseError",
    "ValidationFailed",
    "ValidationsError",
]
