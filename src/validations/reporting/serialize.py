"""Structured (JSON / YAML) rendering of an error tree."""

from __future__ import annotations

import dataclasses
import enum
import json
from typing import Any

import yaml

from validations.constants.reporting import (
    BASE_KEY,
    BASE_LABEL,
    DETAIL_KEY,
    FIELDS_KEY,
    MESSAGE_KEY,
    PATH_SEPARATOR,
)
from validations.errors import Error, Errors
from validations.reporting.formatter import format_errors
from validations.types import JsonObject, JsonValue


def errors_to_dict(errors: Errors[Any], *, include_details: bool = True) -> JsonObject:
    """Convert an error tree to nested plain mappings.

    ``base`` and ``fields`` keys are omitted when they would be empty, so an
    empty container becomes ``{}``.
    """
    payload: JsonObject = {}
    base = errors.base()
    if base is not None:
        payload[BASE_KEY] = [_error_to_dict(error, include_details=include_details) for error in base]
    fields: JsonObject = {}
    for name, field_errors in errors.fields():
        fields[name] = errors_to_dict(field_errors, include_details=include_details)
    if fields:
        payload[FIELDS_KEY] = fields
    return payload


def render(
    errors: Errors[Any],
    output_format: str,
    *,
    separator: str = PATH_SEPARATOR,
    base_label: str = BASE_LABEL,
    include_details: bool = True,
) -> str:
    """Render an error tree as ``text``, ``json`` or ``yaml``."""
    if output_format == "text":
        return format_errors(errors, separator=separator, base_label=base_label)
    payload = errors_to_dict(errors, include_details=include_details)
    if output_format == "json":
        return json.dumps(payload, indent=2, ensure_ascii=False)
    if output_format == "yaml":
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True).rstrip("\n")
    raise ValueError(f"unsupported output format: {output_format!r}")


def _error_to_dict(error: Error[Any], *, include_details: bool) -> JsonObject:
    payload: JsonObject = {MESSAGE_KEY: error.message}
    if include_details and error.detail is not None:
        payload[DETAIL_KEY] = _detail_to_json(error.detail)
    return payload


def _detail_to_json(detail: Any) -> JsonValue:
    to_dict = getattr(detail, "to_dict", None)
    if callable(to_dict):
        return _detail_to_json(to_dict())
    if dataclasses.is_dataclass(detail) and not isinstance(detail, type):
        return _detail_to_json(dataclasses.asdict(detail))
    if isinstance(detail, enum.Enum):
        return _detail_to_json(detail.value)
    if isinstance(detail, dict):
        return {str(key): _detail_to_json(value) for key, value in detail.items()}
    if isinstance(detail, (list, tuple)):
        return [_detail_to_json(item) for item in detail]
    if isinstance(detail, (set, frozenset)):
        return sorted((_detail_to_json(item) for item in detail), key=repr)
    return detail
