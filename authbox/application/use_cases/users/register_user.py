# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authbox.domain.users.exceptions import (
    DuplicateIdentifierError,
    IdentifierTakenError,
    MissingFieldsError,
    StoreUnavailableError,
    WeakPasswordError,
)
from authbox.domain.users.identifiers import IdentifierPolicy
from authbox.domain.users.repositories import CredentialStore, PasswordHasher
from authbox.shared.errors.base import InternalError
from authbox.shared.logging import logger


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: CredentialStore,
        password_hasher: PasswordHasher,
        identifiers: IdentifierPolicy,
        min_password_length: int = 6,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._identifiers = identifiers
        self._min_password_length = min_password_length

    def execute(self, identifier: str | None, password: str | None) -> int:
        normalized = self._identifiers.normalize(identifier or "")
        if not normalized or not password:
            raise MissingFieldsError()
        self._identifiers.validate(normalized)
        if len(password) < self._min_password_length:
            raise WeakPasswordError(self._min_password_length)

        hashed = self._password_hasher.hash(password)
        try:
            user_id = self._users.create_user(normalized, hashed)
        except DuplicateIdentifierError as exc:
            logger.info("auth.register: identifier taken")
            raise IdentifierTakenError() from exc
        except StoreUnavailableError as exc:
            logger.opt(exception=exc).error("auth.register: credential store failure")
            raise InternalError() from exc

        logger.info(f"auth.register: ok user_id={user_id}")
        return user_id
