"""Shared pytest fixtures for address book files."""

from __future__ import annotations

from pathlib import Path

import pytest

VALID_BOOK = """\
entries:
  - name: Rust Cohle
    email: rcohle@dps.la.gov
    home_number:
      area_code: '555'
      number: 555-5555
"""

INVALID_BOOK = """\
entries:
  - name: Rust Cohle
    email: rcohle
  - name: ''
    cell_number:
      area_code: '555'
      number: 555-5555
    address:
      street: 1 Main St
      city: Erath
      zip: '7053'
"""


@pytest.fixture
def valid_book(tmp_path: Path) -> Path:
    """Return the path of an address book with no problems."""
    path = tmp_path / "valid.yaml"
    path.write_text(VALID_BOOK, encoding="utf-8")
    return path


@pytest.fixture
def invalid_book(tmp_path: Path) -> Path:
    """Return the path of an address book with base, field and nested errors."""
    path = tmp_path / "invalid.yaml"
    path.write_text(INVALID_BOOK, encoding="utf-8")
    return path
