"""Signed, time-bounded session tokens.

Sessions are not stored server-side: the token itself carries the subject id
and identifier, signed with the server secret. Expiry is checked against an
injectable clock instead of the wall clock inside ``jose`` so the lifetime can
be exercised deterministically.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from authbox.domain.users.entities import IssuedSession, SessionClaims, User
from authbox.domain.users.exceptions import InvalidSessionTokenError
from authbox.domain.users.repositories import SessionTokenService

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class JwtSessionTokenService(SessionTokenService):
    def __init__(
        self,
        *,
        secret: str,
        ttl: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
        clock: Clock = utc_now,
    ) -> None:
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user: User) -> IssuedSession:
        issued_at = self._clock()
        expires_at = issued_at + self._ttl
        payload = {
            "sub": str(user.id),
            "identifier": user.identifier,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        claims = SessionClaims(
            subject_id=user.id,
            identifier=user.identifier,
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
        return IssuedSession(token=token, claims=claims)

    def decode(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "require_exp": True, "require_sub": True},
            )
        except JWTError as exc:
            raise InvalidSessionTokenError(str(exc)) from exc

        try:
            subject_id = int(payload["sub"])
            identifier = str(payload["identifier"])
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidSessionTokenError("malformed claims") from exc

        if expires_at <= self._clock():
            raise InvalidSessionTokenError("token expired")

        return SessionClaims(subject_id=subject_id, identifier=identifier, expires_at=expires_at)
