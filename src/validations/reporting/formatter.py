"""Plain-text formatting of an error tree."""

from __future__ import annotations

from typing import Any

from validations.constants.reporting import BASE_LABEL, PATH_SEPARATOR
from validations.errors import Error, Errors


def flatten[T](errors: Errors[T], *, separator: str = PATH_SEPARATOR) -> list[tuple[str, Error[T]]]:
    """Return ``(dotted_path, error)`` pairs; root base errors get an empty path."""
    return [(separator.join(path), error) for path, error in errors.walk()]


def format_errors(
    errors: Errors[Any],
    *,
    separator: str = PATH_SEPARATOR,
    base_label: str = BASE_LABEL,
) -> str:
    """Format an error tree as one ``<path>: <message>`` line per error."""
    lines = []
    for path, error in flatten(errors, separator=separator):
        lines.append(f"{path or base_label}: {error.message}")
    return "\n".join(lines)
