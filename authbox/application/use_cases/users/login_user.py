# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from authbox.domain.users.entities import IssuedSession
from authbox.domain.users.exceptions import (
    InvalidCredentialsError,
    MissingFieldsError,
    StoreUnavailableError,
)
from authbox.domain.users.identifiers import IdentifierPolicy
from authbox.domain.users.repositories import (
    CredentialStore,
    PasswordHasher,
    SessionTokenService,
)
from authbox.shared.errors.base import InternalError
from authbox.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: CredentialStore,
        password_hasher: PasswordHasher,
        tokens: SessionTokenService,
        identifiers: IdentifierPolicy,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._identifiers = identifiers
        self._timing_hash: str | None = None

    def _dummy_hash(self) -> str:
        """Hash compared against when the identifier is unknown, made once with the same cost."""
        if self._timing_hash is None:
            self._timing_hash = self._password_hasher.hash(secrets.token_urlsafe(16))
        return self._timing_hash

    def execute(self, identifier: str | None, password: str | None) -> IssuedSession:
        normalized = self._identifiers.normalize(identifier or "")
        if not normalized or not password:
            raise MissingFieldsError()

        try:
            user = self._users.find_by_identifier(normalized)
        except StoreUnavailableError as exc:
            logger.opt(exception=exc).error("auth.login: credential store failure")
            raise InternalError() from exc

        # Unknown identifier and wrong password must be indistinguishable,
        # in timing as well as in the response.
        if user is None:
            self._password_hasher.verify(password, self._dummy_hash())
            password_valid = False
        else:
            password_valid = self._password_hasher.verify(password, user.password_hash)
        if user is None or not password_valid:
            logger.warning("auth.login: invalid credentials")
            raise InvalidCredentialsError()

        session = self._tokens.issue(user)
        logger.info(f"auth.login: ok user_id={user.id}")
        return session
