"""Address book domain types and their validation rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from validations.constants.addressbook import (
    BLANK_MESSAGE,
    DUPLICATE_NAME_MESSAGE,
    EMAIL_AT_MESSAGE,
    INVALID_CHARACTERS_MESSAGE,
    PHONE_DIGITS,
    PHONE_REQUIRED_MESSAGE,
    PHONE_SEPARATOR,
    ZIP_FORMAT_MESSAGE,
    ZIP_PATTERN,
)
from validations.errors import Error, Errors
from validations.validate import to_result, validate_field


@dataclass(frozen=True)
class InvalidCharacters:
    """Characters that are not allowed in a phone number."""

    characters: tuple[str, ...]

    @classmethod
    def check_digits(cls, number: str) -> InvalidCharacters | None:
        """Return the non-digit characters of ``number``, ignoring separators."""
        invalid = tuple(char for char in number.replace(PHONE_SEPARATOR, "") if char not in PHONE_DIGITS)
        return cls(invalid) if invalid else None


type AddressBookErrors = Errors[InvalidCharacters]


def _is_blank(value: str) -> bool:
    return not value.strip()


@dataclass(frozen=True)
class PhoneNumber:
    area_code: str
    number: str

    def full_number(self) -> str:
        return f"{self.area_code}{PHONE_SEPARATOR}{self.number}"

    def validate(self) -> AddressBookErrors | None:
        errors: AddressBookErrors = Errors()
        invalid = InvalidCharacters.check_digits(self.full_number())
        if invalid is not None:
            errors.add_base(Error.with_detail(INVALID_CHARACTERS_MESSAGE, invalid))
        return to_result(errors)


@dataclass(frozen=True)
class Email:
    address: str

    def validate(self) -> AddressBookErrors | None:
        if "@" not in self.address:
            errors: AddressBookErrors = Errors()
            errors.add_base(Error(EMAIL_AT_MESSAGE))
            return errors
        return None


@dataclass(frozen=True)
class Address:
    street: str
    city: str
    zip_code: str

    def validate(self) -> AddressBookErrors | None:
        errors: AddressBookErrors = Errors()
        if _is_blank(self.street):
            errors.add_field_error("street", Error(BLANK_MESSAGE))
        if _is_blank(self.city):
            errors.add_field_error("city", Error(BLANK_MESSAGE))
        if not ZIP_PATTERN.fullmatch(self.zip_code):
            errors.add_field_error("zip", Error(ZIP_FORMAT_MESSAGE))
        return to_result(errors)


@dataclass(frozen=True)
class AddressBookEntry:
    """One contact. At least one phone number is required."""

    name: str
    email: Email | None = None
    home_number: PhoneNumber | None = None
    cell_number: PhoneNumber | None = None
    address: Address | None = None

    def validate(self) -> AddressBookErrors | None:
        errors: AddressBookErrors = Errors()

        if self.home_number is None and self.cell_number is None:
            errors.add_base(Error(PHONE_REQUIRED_MESSAGE))

        if _is_blank(self.name):
            errors.add_field_error("name", Error(BLANK_MESSAGE))

        validate_field(errors, "email", self.email)
        validate_field(errors, "home_number", self.home_number)
        validate_field(errors, "cell_number", self.cell_number)
        validate_field(errors, "address", self.address)

        return to_result(errors)


@dataclass(frozen=True)
class AddressBook:
    """A collection of entries whose names must be unique."""

    entries: tuple[AddressBookEntry, ...] = field(default_factory=tuple)

    def validate(self) -> AddressBookErrors | None:
        errors: AddressBookErrors = Errors()
        entry_errors: AddressBookErrors = Errors()
        seen: set[str] = set()

        for index, entry in enumerate(self.entries):
            validate_field(entry_errors, str(index), entry)
            key = entry.name.strip().casefold()
            if not key:
                continue
            if key in seen:
                duplicate: AddressBookErrors = Errors()
                duplicate.add_field_error("name", Error(DUPLICATE_NAME_MESSAGE))
                entry_errors.add_field(str(index), duplicate)
            seen.add(key)

        errors.add_field("entries", entry_errors)
        return to_result(errors)
