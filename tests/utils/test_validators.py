"""Tests for shared input rules."""

import pytest

from learng.utils import is_valid_email, is_valid_role, password_problem


@pytest.mark.parametrize("email", ["a@x.com", "first.last+tag@sub.example.org"])
def test_valid_emails(email: str) -> None:
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    ["", "plain", "a@x", "@x.com", "a b@x.com", "a@x.c", "a@x.com\n", " a@x.com"],
)
def test_invalid_emails(email: str) -> None:
    assert not is_valid_email(email)


@pytest.mark.parametrize(
    ("password", "problem"),
    [
        ("Passw0rd", None),
        ("12345678", None),
        ("Pass0", "Password must be at least 8 characters long"),
        ("Password", "Password must contain at least one number"),
    ],
)
def test_password_problem(password: str, problem: str | None) -> None:
    assert password_problem(password) == problem


def test_roles() -> None:
    assert is_valid_role("admin")
    assert is_valid_role("learner")
    assert not is_valid_role("Admin")
    assert not is_valid_role("")
