# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import IssuedSession, SessionClaims, User, UserSummary


class CredentialStore(Protocol):
    def create_user(self, identifier: str, password_hash: str) -> int: ...
    def find_by_identifier(self, identifier: str) -> User | None: ...
    def list_users(self) -> Sequence[UserSummary]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionTokenService(Protocol):
    def issue(self, user: User) -> IssuedSession: ...
    def decode(self, token: str) -> SessionClaims: ...
