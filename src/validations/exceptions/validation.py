"""Exceptions raised around the validation contract."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from validations.constants.reporting import VALIDATION_FAILED_MESSAGE
from validations.exceptions.base import ValidationsError

if TYPE_CHECKING:
    from validations.errors import Errors


class ValidationFailed(ValidationsError, ValueError):
    """Raised by :func:`validations.ensure_valid` when a value is invalid.

    The full error tree is available as :attr:`errors`.
    """

    def __init__(self, errors: Errors[Any]) -> None:
        super().__init__(VALIDATION_FAILED_MESSAGE)
        self.errors = errors


class ContractViolationError(ValidationsError, TypeError):
    """Raised when ``validate()`` reports failure with an empty container."""
