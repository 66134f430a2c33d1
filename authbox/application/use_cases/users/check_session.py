"""Use-case for resolving the caller from a session token."""

from __future__ import annotations

from authbox.domain.users.entities import SessionClaims
from authbox.domain.users.exceptions import InvalidSessionTokenError, UnauthenticatedError
from authbox.domain.users.repositories import SessionTokenService
from authbox.shared.logging import logger


class CheckSessionUseCase:
    def __init__(self, *, tokens: SessionTokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> SessionClaims:
        if not token:
            raise UnauthenticatedError()
        try:
            return self._tokens.decode(token)
        except InvalidSessionTokenError as exc:
            logger.debug(f"auth.session: rejected token ({exc})")
            raise UnauthenticatedError() from exc
