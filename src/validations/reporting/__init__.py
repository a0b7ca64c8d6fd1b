"""Rendering of error trees for people and machines."""

from __future__ import annotations

from .formatter import flatten, format_errors
from .serialize import errors_to_dict, render

__all__ = ["errors_to_dict", "flatten", "format_errors", "render"]
