"""Validation error records and the recursive container that holds them.

An :class:`Error` is one human-readable message plus an optional detail payload
of the caller's choice. An :class:`Errors` container holds errors about a value
as a whole (``base``) and, per named field, a nested :class:`Errors` for that
field, so a validated sub-object keeps its own field errors reachable by path::

    errors.field("address").field("zip").base()[0].message
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from validations.constants.reporting import VALIDATION_FAILED_MESSAGE


@dataclass(frozen=True)
class Error[T]:
    """An individual validation error."""

    message: str
    detail: T | None = None

    @classmethod
    def with_detail(cls, message: str, detail: T) -> Error[T]:
        """Construct an error carrying additional contextual information."""
        return cls(message, detail)

    def __str__(self) -> str:
        return self.message


class Errors[T]:
    """Errors returned by a failed validation.

    Containers are built up while a value validates its fields and are read by
    the caller afterwards. Nothing is ever removed, and a field entry is only
    stored when it holds at least one error somewhere below it.
    """

    __slots__ = ("_base", "_fields")

    def __init__(self) -> None:
        self._base: list[Error[T]] | None = None
        self._fields: dict[str, Errors[T]] = {}

    @classmethod
    def empty(cls) -> Errors[T]:
        """Return a container with no errors."""
        return cls()

    def add_base(self, error: Error[T]) -> None:
        """Add an error that is not specific to any field."""
        if self._base is None:
            self._base = []
        self._base.append(error)

    def add_field(self, name: str, errors: Errors[T]) -> None:
        """Attach a copy of ``errors`` to field ``name``, merging with any existing entry.

        Base errors of ``errors`` are appended after the ones already recorded
        for the field and nested field entries are merged recursively. An empty
        ``errors`` leaves the container untouched. Later changes to ``errors``
        do not show up here.
        """
        if errors.is_empty():
            return
        existing = self._fields.get(name)
        if existing is None:
            existing = self._fields[name] = Errors()
        existing.merge(errors)

    def add_field_error(self, name: str, error: Error[T]) -> None:
        """Add a single error for field ``name``."""
        errors: Errors[T] = Errors()
        errors.add_base(error)
        self.add_field(name, errors)

    def merge(self, other: Errors[T]) -> None:
        """Merge every error of ``other`` into this container.

        ``other`` may be this container or one of its entries.
        """
        for error in tuple(other._base or ()):
            self.add_base(error)
        for name, errors in list(other._fields.items()):
            self.add_field(name, errors)

    def base(self) -> tuple[Error[T], ...] | None:
        """Non-field-specific errors in the order they were added, if any."""
        if not self._base:
            return None
        return tuple(self._base)

    def field(self, name: str) -> Errors[T] | None:
        """The errors for field ``name``, if any."""
        return self._fields.get(name)

    def find(self, *names: str) -> Errors[T] | None:
        """Follow ``field()`` along ``names``; ``None`` as soon as a step is missing."""
        node: Errors[T] | None = self
        for name in names:
            if node is None:
                return None
            node = node.field(name)
        return node

    def fields(self) -> tuple[tuple[str, Errors[T]], ...]:
        """``(name, errors)`` for every field with errors, in first-failure order."""
        return tuple(self._fields.items())

    def field_names(self) -> tuple[str, ...]:
        """Names of fields with errors, in the order they first failed."""
        return tuple(self._fields)

    def is_empty(self) -> bool:
        """Return ``True`` if there are no errors."""
        return not self._base and not self._fields

    def walk(self, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Error[T]]]:
        """Yield ``(path, error)`` for every error in the tree, depth first."""
        for error in self._base or ():
            yield path, error
        for name, errors in self._fields.items():
            yield from errors.walk((*path, name))

    def messages(self) -> list[str]:
        """All messages in :meth:`walk` order."""
        return [error.message for _, error in self.walk()]

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Errors):
            return NotImplemented
        return (self._base or []) == (other._base or []) and self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Errors(base={self._base!r}, fields={self._fields!r})"

    def __str__(self) -> str:
        return VALIDATION_FAILED_MESSAGE


type SimpleError = Error[None]
type SimpleErrors = Errors[None]

