"""Use-case for ending a session.

Tokens are stateless, so nothing is revoked server-side; the controller
clears the cookie and a replayed token stays valid until it expires.
"""

from __future__ import annotations

from authbox.domain.users.exceptions import InvalidSessionTokenError
from authbox.domain.users.repositories import SessionTokenService
from authbox.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, tokens: SessionTokenService) -> None:
        self._tokens = tokens

    def execute(self, token: str | None) -> int | None:
        subject_id = None
        if token:
            try:
                subject_id = self._tokens.decode(token).subject_id
            except InvalidSessionTokenError:
                subject_id = None
        logger.info(f"auth.logout: ok user_id={subject_id}")
        return subject_id
