"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "validations"
CLI_DESCRIPTION: str = "Validate address book files and report every problem found in one pass."
VALID_MESSAGE: str = "Address book is valid."
