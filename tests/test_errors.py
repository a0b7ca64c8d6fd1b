"""Tests for the Error record and the recursive Errors container."""

from __future__ import annotations

import enum

import pytest

from validations import Error, Errors


class Kind(enum.Enum):
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"


def _with_base(*messages: str) -> Errors[None]:
    errors: Errors[None] = Errors()
    for message in messages:
        errors.add_base(Error(message))
    return errors


def test_error_without_detail() -> None:
    error: Error[None] = Error("can't be blank")
    assert error.message == "can't be blank"
    assert error.detail is None
    assert str(error) == "can't be blank"


def test_error_with_detail() -> None:
    error = Error.with_detail("is too short", Kind.TOO_SHORT)
    assert error.message == "is too short"
    assert error.detail is Kind.TOO_SHORT


def test_error_accepts_non_ascii_and_empty_messages() -> None:
    assert Error("ne peut pas être vide").message == "ne peut pas être vide"
    assert Error("").message == ""


def test_error_is_immutable() -> None:
    error: Error[None] = Error("boom")
    with pytest.raises(AttributeError):
        error.message = "other"  # type: ignore[misc]


def test_empty_container() -> None:
    errors: Errors[None] = Errors.empty()
    assert errors.is_empty()
    assert not errors
    assert errors.base() is None
    assert errors.field("name") is None
    assert errors.field("") is None
    assert errors.field_names() == ()
    assert list(errors.walk()) == []


def test_add_base_preserves_insertion_order() -> None:
    errors = _with_base("first", "second", "third")
    base = errors.base()
    assert base is not None
    assert [error.message for error in base] == ["first", "second", "third"]
    assert not errors.is_empty()
    assert errors


def test_base_returns_a_snapshot() -> None:
    errors = _with_base("first")
    snapshot = errors.base()
    errors.add_base(Error("second"))
    assert snapshot is not None
    assert len(snapshot) == 1


def test_add_field_with_empty_container_is_noop() -> None:
    errors: Errors[None] = Errors()
    errors.add_field("name", Errors())
    assert errors.field("name") is None
    assert errors.is_empty()


def test_add_field_with_empty_container_keeps_existing_entry() -> None:
    errors: Errors[None] = Errors()
    errors.add_field("name", _with_base("can't be blank"))
    errors.add_field("name", Errors())
    field = errors.field("name")
    assert field is not None
    assert field.messages() == ["can't be blank"]


def test_add_field_inserts_entry() -> None:
    errors: Errors[None] = Errors()
    errors.add_field("name", _with_base("can't be blank"))
    field = errors.field("name")
    assert field is not None
    assert field.base() is not None
    assert field.base()[0].message == "can't be blank"  # type: ignore[index]
    assert errors.base() is None


def test_add_field_merges_base_errors_in_order() -> None:
    errors: Errors[None] = Errors()
    errors.add_field("email", _with_base("must contain an @ symbol"))
    errors.add_field("email", _with_base("is too long", "is taken"))
    field = errors.field("email")
    assert field is not None
    assert [error.message for error in field.base() or ()] == [
        "must contain an @ symbol",
        "is too long",
        "is taken",
    ]


def test_add_field_merges_nested_fields_recursively() -> None:
    first: Errors[None] = Errors()
    first.add_field_error("zip", Error("must be a 5 digit code"))
    first.add_field_error("city", Error("can't be blank"))

    second: Errors[None] = Errors()
    second.add_base(Error("is not deliverable"))
    second.add_field_error("zip", Error("is unknown"))
    second.add_field_error("street", Error("can't be blank"))

    errors: Errors[None] = Errors()
    errors.add_field("address", first)
    errors.add_field("address", second)

    address = errors.field("address")
    assert address is not None
    assert [e.message for e in address.base() or ()] == ["is not deliverable"]
    assert address.field_names() == ("zip", "city", "street")
    zip_errors = address.field("zip")
    assert zip_errors is not None
    assert [e.message for e in zip_errors.base() or ()] == ["must be a 5 digit code", "is unknown"]


def test_add_field_error_and_delegated_errors_compose() -> None:
    delegated: Errors[None] = Errors()
    delegated.add_base(Error("must contain an @ symbol"))

    errors: Errors[None] = Errors()
    errors.add_field_error("email", Error("is already registered"))
    errors.add_field("email", delegated)

    assert errors.find("email") is not None
    assert errors.find("email").messages() == [  # type: ignore[union-attr]
        "is already registered",
        "must contain an @ symbol",
    ]


def test_merge_whole_container() -> None:
    left = _with_base("a")
    left.add_field_error("x", Error("x1"))
    right = _with_base("b")
    right.add_field_error("x", Error("x2"))
    right.add_field_error("y", Error("y1"))

    left.merge(right)

    assert [e.message for e in left.base() or ()] == ["a", "b"]
    assert left.find("x").messages() == ["x1", "x2"]  # type: ignore[union-attr]
    assert left.find("y").messages() == ["y1"]  # type: ignore[union-attr]


def test_find_follows_chained_fields() -> None:
    address: Errors[None] = Errors()
    address.add_field_error("zip", Error("must be a 5 digit code"))
    errors: Errors[None] = Errors()
    errors.add_field("address", address)

    assert errors.find() is errors
    assert errors.find("address", "zip") is not None
    assert errors.find("address", "zip").messages() == ["must be a 5 digit code"]  # type: ignore[union-attr]
    assert errors.find("address", "city") is None
    assert errors.find("missing", "zip") is None


def test_walk_reaches_each_error_once_at_its_path() -> None:
    errors = _with_base("whole")
    errors.add_field_error("name", Error("blank"))
    nested: Errors[None] = Errors()
    nested.add_base(Error("bad address"))
    nested.add_field_error("zip", Error("bad zip"))
    errors.add_field("address", nested)

    walked = [(path, error.message) for path, error in errors.walk()]
    assert walked == [
        ((), "whole"),
        (("name",), "blank"),
        (("address",), "bad address"),
        (("address", "zip"), "bad zip"),
    ]
    assert errors.messages() == ["whole", "blank", "bad address", "bad zip"]


def test_equality_is_structural() -> None:
    left = _with_base("a")
    left.add_field_error("x", Error("x1"))
    right = _with_base("a")
    right.add_field_error("x", Error("x1"))
    assert left == right
    right.add_field_error("x", Error("x2"))
    assert left != right
    assert Errors() == Errors()


def test_str_is_generic_failure_message() -> None:
    assert str(_with_base("a")) == "validation failed"


def test_adding_same_container_twice_concatenates() -> None:
    shared = _with_base("a", "b")
    shared.add_field_error("zip", Error("z"))

    errors: Errors[None] = Errors()
    errors.add_field("address", shared)
    errors.add_field("address", shared)

    address = errors.field("address")
    assert address is not None
    assert [e.message for e in address.base() or ()] == ["a", "b", "a", "b"]
    assert address.find("zip").messages() == ["z", "z"]  # type: ignore[union-attr]
    assert shared.messages() == ["a", "b", "z"]


def test_merging_container_into_itself_doubles_it() -> None:
    errors = _with_base("a")
    errors.add_field_error("x", Error("x1"))
    errors.merge(errors)
    assert errors.messages() == ["a", "a", "x1", "x1"]


def test_container_added_under_two_keys_stays_independent() -> None:
    shared = _with_base("has invalid characters")
    errors: Errors[None] = Errors()
    errors.add_field("home_number", shared)
    errors.add_field("cell_number", shared)
    errors.add_field("home_number", _with_base("is disconnected"))

    assert errors.find("home_number").messages() == [  # type: ignore[union-attr]
        "has invalid characters",
        "is disconnected",
    ]
    assert errors.find("cell_number").messages() == ["has invalid characters"]  # type: ignore[union-attr]
    assert shared.messages() == ["has invalid characters"]


def test_later_changes_to_added_container_are_not_visible() -> None:
    nested: Errors[None] = Errors()
    nested.add_field_error("zip", Error("bad zip"))
    first = _with_base("first")
    first.add_field("address", nested)

    errors: Errors[None] = Errors()
    errors.add_field("entry", first)
    errors.add_field("entry", first)
    first.add_base(Error("late"))
    nested.add_base(Error("late nested"))

    assert errors.messages() == ["first", "first", "bad zip", "bad zip"]
    assert first.messages() == ["first", "late", "bad zip"]


def test_fields_lists_entries_in_order() -> None:
    errors: Errors[None] = Errors()
    errors.add_field_error("name", Error("blank"))
    errors.add_field_error("email", Error("no @"))
    assert [(name, field.messages()) for name, field in errors.fields()] == [
        ("name", ["blank"]),
        ("email", ["no @"]),
    ]
