"""Shared type aliases for validations."""

from .common import JsonObject, JsonScalar, JsonValue

__all__ = ["JsonObject", "JsonScalar", "JsonValue"]
