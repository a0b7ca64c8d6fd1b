"""Constants for report rendering."""

from __future__ import annotations

VALIDATION_FAILED_MESSAGE: str = "validation failed"

PATH_SEPARATOR: str = "."
BASE_LABEL: str = "base"

BASE_KEY: str = "base"
FIELDS_KEY: str = "fields"
MESSAGE_KEY: str = "message"
DETAIL_KEY: str = "detail"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json", "yaml"})
DEFAULT_OUTPUT_FORMAT: str = "text"
