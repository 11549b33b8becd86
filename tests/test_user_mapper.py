"""
Tests for the DTO -> User mapper: rejection rules and normalization.
"""

from __future__ import annotations

import pytest

from users_app.domains.user import User
from users_app.infrastructure.data.dto import UserDto
from users_app.infrastructure.data.mapper import Accepted, Rejected, to_domain, validate


def test_normalizes_valid_record() -> None:
    """Name is trimmed, email trimmed and lowercased."""
    user = to_domain(UserDto(id=7, name="  Ann ", email="ANN@EXAMPLE.COM"))
    assert user == User(id=7, name="Ann", email="ann@example.com")


@pytest.mark.parametrize("bad_id", [0, -1, -1000])
def test_rejects_non_positive_id(bad_id: int) -> None:
    """Ids must be positive."""
    assert to_domain(UserDto(id=bad_id, name="Bob", email="bob@x.com")) is None


@pytest.mark.parametrize("name", ["", " ", "\t\n  "])
def test_rejects_blank_name(name: str) -> None:
    """Empty and whitespace-only names are rejected."""
    assert to_domain(UserDto(id=1, name=name, email="bob@x.com")) is None


def test_rejects_name_over_255_chars() -> None:
    """A 300-character name is rejected; length is checked before trimming."""
    assert to_domain(UserDto(id=1, name="a" * 300, email="a@x.com")) is None
    assert to_domain(UserDto(id=1, name="a" * 256, email="a@x.com")) is None


def test_keeps_name_of_exactly_255_chars() -> None:
    """The boundary length is accepted unchanged."""
    user = to_domain(UserDto(id=1, name="b" * 255, email="b@x.com"))
    assert user is not None
    assert len(user.name) == 255


@pytest.mark.parametrize(
    "email",
    ["", "plain", "no-at.example.com", "a@", "@x.com", "a b@x.com", "a@x y.com", "a@@x.com", "é@x.com", "a@x.com\n"],
)
def test_rejects_malformed_email(email: str) -> None:
    """Emails must look like local@domain with the allowed characters."""
    assert to_domain(UserDto(id=1, name="Bob", email=email)) is None


@pytest.mark.parametrize("email", ["bob@x.com", "first.last+tag@sub.example.org", "a_b-c@localhost", "1@2"])
def test_accepts_well_formed_email(email: str) -> None:
    """No TLD segment is required."""
    user = to_domain(UserDto(id=1, name="Bob", email=email))
    assert user is not None
    assert user.email == email.lower()


def test_email_with_surrounding_spaces_is_rejected() -> None:
    """The pattern is checked on the raw email, so padding fails validation."""
    assert to_domain(UserDto(id=1, name="Bob", email=" bob@x.com ")) is None


def test_validate_reports_first_failing_rule() -> None:
    """Rules apply in order: id, blank name, long name, email."""
    assert validate(UserDto(id=0, name="", email="bad")) == Rejected("non-positive id")
    assert validate(UserDto(id=1, name=" ", email="bad")) == Rejected("blank name")
    assert validate(UserDto(id=1, name="x" * 256, email="bad")) == Rejected("name too long")
    assert validate(UserDto(id=1, name="Bob", email="bad")) == Rejected("invalid email")


def test_validate_is_pure() -> None:
    """Same input, same output."""
    dto = UserDto(id=3, name=" Cy ", email="CY@X.COM")
    first = validate(dto)
    second = validate(dto)
    assert first == second
    assert isinstance(first, Accepted)
    assert first.user == User(id=3, name="Cy", email="cy@x.com")
