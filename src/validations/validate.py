"""The validation contract and helpers for implementing it.

A validatable type implements ``validate()`` returning ``None`` when the value
is valid and a non-empty :class:`~validations.errors.Errors` when it is not.
Implementations collect every failing rule across every field in one pass.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from validations.errors import Errors
from validations.exceptions import ContractViolationError, ValidationFailed

logger = logging.getLogger(__name__)


@runtime_checkable
class Validate[T](Protocol):
    """A validatable type."""

    def validate(self) -> Errors[T] | None:
        """Validate the value, returning why it is invalid or ``None``."""
        ...


def to_result[T](errors: Errors[T]) -> Errors[T] | None:
    """Return ``None`` for an empty container and the container otherwise."""
    if errors.is_empty():
        return None
    return errors


def check[T](value: Validate[T]) -> Errors[T] | None:
    """Run ``value.validate()`` and enforce the result contract."""
    result = value.validate()
    if result is None:
        logger.debug("%s is valid", type(value).__name__)
        return None
    if not isinstance(result, Errors):
        raise ContractViolationError(
            f"{type(value).__name__}.validate() returned {type(result).__name__}, expected Errors or None"
        )
    if result.is_empty():
        raise ContractViolationError(f"{type(value).__name__}.validate() reported failure without any errors")
    logger.debug("%s is invalid: %d error(s)", type(value).__name__, len(result.messages()))
    return result


def ensure_valid(value: Validate[Any]) -> None:
    """Raise :class:`ValidationFailed` carrying the error tree if ``value`` is invalid."""
    errors = check(value)
    if errors is not None:
        raise ValidationFailed(errors)


def validate_field[T](errors: Errors[T], name: str, value: Validate[T] | None) -> bool:
    """Delegate to a field value's own validation.

    Failures are merged into ``errors`` under ``name``. Absent values are
    treated as valid. Returns whether the field is valid.
    """
    if value is None:
        return True
    field_errors = check(value)
    if field_errors is None:
        return True
    errors.add_field(name, field_errors)
    return False
