# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from authbox.domain.users.entities import UserSummary
from authbox.domain.users.exceptions import StoreUnavailableError
from authbox.domain.users.repositories import CredentialStore
from authbox.shared.errors.base import InternalError
from authbox.shared.logging import logger


class ListUsersUseCase:
    def __init__(self, users: CredentialStore) -> None:
        self._users = users

    def execute(self) -> list[UserSummary]:
        try:
            return list(self._users.list_users())
        except StoreUnavailableError as exc:
            logger.opt(exception=exc).error("users.list: credential store failure")
            raise InternalError() from exc


__all__ = ["ListUsersUseCase"]
