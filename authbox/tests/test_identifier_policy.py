from __future__ import annotations

import pytest

from authbox.domain.users.exceptions import InvalidIdentifierError
from authbox.domain.users.identifiers import IdentifierPolicy


def test_email_is_trimmed_and_lower_cased() -> None:
    policy = IdentifierPolicy("email")

    assert policy.normalize("  Bob@Example.ORG\t") == "bob@example.org"


def test_username_keeps_case() -> None:
    policy = IdentifierPolicy("username")

    assert policy.normalize("  Bob ") == "Bob"
    assert policy.validate("Bob") == "Bob"


@pytest.mark.parametrize("value", ["bob", "bob@", "bob@host", "b ob@host.io", "a@b@c.io"])
def test_email_shape_is_enforced(value: str) -> None:
    with pytest.raises(InvalidIdentifierError) as excinfo:
        IdentifierPolicy("email").validate(value)

    assert excinfo.value.code == "invalid_identifier"
    assert excinfo.value.status == 400


@pytest.mark.parametrize("value", ["two words", "x" * 65])
def test_username_shape_is_enforced(value: str) -> None:
    with pytest.raises(InvalidIdentifierError):
        IdentifierPolicy("username").validate(value)
