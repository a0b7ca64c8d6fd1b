"""Root exception for the validations package."""

from __future__ import annotations


class ValidationsError(Exception):
    """Base class for all errors raised by validations."""
