"""Validations package.

Check whether a value is valid with :class:`Validate`, and report why it is not
with a recursive :class:`Errors` container of :class:`Error` records.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from .errors import Error, Errors, SimpleError, SimpleErrors
from .exceptions import ContractViolationError, ValidationFailed, ValidationsError
from .validate import Validate, check, ensure_valid, to_result, validate_field

__all__ = [
    "ContractViolationError",
    "Error",
    "Errors",
    "SimpleError",
    "SimpleErrors",
    "Validate",
    "ValidationFailed",
    "ValidationsError",
    "__version__",
    "check",
    "ensure_valid",
    "to_result",
    "validate_field",
]

try:
    __version__ = version("validations")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
