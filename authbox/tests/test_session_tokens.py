from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from authbox.application.services.session_tokens import JwtSessionTokenService
from authbox.domain.users.entities import User
from authbox.domain.users.exceptions import InvalidSessionTokenError

USER = User(id=42, identifier="a@b.com", password_hash="x", created_at=datetime.now(UTC))


@pytest.fixture()
def service(clock) -> JwtSessionTokenService:
    return JwtSessionTokenService(secret="s3cret", ttl=timedelta(days=7), clock=clock)


def test_issue_embeds_subject_and_expiry(service: JwtSessionTokenService, clock) -> None:
    issued = service.issue(USER)

    assert issued.claims.subject_id == 42
    assert issued.claims.identifier == "a@b.com"
    assert issued.claims.expires_at == clock.now + timedelta(days=7)

    raw = jwt.get_unverified_claims(issued.token)
    assert raw["sub"] == "42"
    assert raw["exp"] - raw["iat"] == 7 * 24 * 60 * 60


def test_token_accepted_at_six_days_rejected_at_eight(
    service: JwtSessionTokenService, clock
) -> None:
    token = service.issue(USER).token

    clock.advance(timedelta(days=6))
    assert service.decode(token).subject_id == 42

    clock.advance(timedelta(days=2))
    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)


def test_token_rejected_exactly_at_expiry(service: JwtSessionTokenService, clock) -> None:
    token = service.issue(USER).token

    clock.advance(timedelta(days=7))
    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)


def test_token_signed_with_other_secret_is_rejected(clock) -> None:
    foreign = JwtSessionTokenService(secret="other", clock=clock).issue(USER).token
    service = JwtSessionTokenService(secret="s3cret", clock=clock)

    with pytest.raises(InvalidSessionTokenError):
        service.decode(foreign)


def test_tampered_payload_is_rejected(service: JwtSessionTokenService) -> None:
    header, _, signature = service.issue(USER).token.split(".")
    forged_payload = jwt.encode(
        {"sub": "1", "identifier": "admin@b.com", "exp": 4102444800}, "guess"
    ).split(".")[1]

    with pytest.raises(InvalidSessionTokenError):
        service.decode(f"{header}.{forged_payload}.{signature}")


def test_token_without_identifier_is_rejected(service: JwtSessionTokenService, clock) -> None:
    exp = int((clock.now + timedelta(days=1)).timestamp())
    token = jwt.encode({"sub": "1", "exp": exp}, "s3cret", algorithm="HS256")

    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_garbage_is_rejected(service: JwtSessionTokenService, token: str) -> None:
    with pytest.raises(InvalidSessionTokenError):
        service.decode(token)
