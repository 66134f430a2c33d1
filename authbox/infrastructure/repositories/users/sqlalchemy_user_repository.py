# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from authbox.domain.users.entities import User as DomainUser
from authbox.domain.users.entities import UserSummary
from authbox.domain.users.exceptions import DuplicateIdentifierError, StoreUnavailableError
from authbox.domain.users.repositories import CredentialStore
from authbox.infrastructure.db.models import User
from authbox.infrastructure.db.session import SessionFactory, session_scope


def _aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class SqlAlchemyCredentialStore(CredentialStore):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def create_user(self, identifier: str, password_hash: str) -> int:
        try:
            with session_scope(self._session_factory) as session:
                row = User(identifier=identifier, password_hash=password_hash)
                session.add(row)
                session.flush()
                return row.id
        except IntegrityError as exc:
            raise DuplicateIdentifierError(identifier) from exc
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"create_user failed: {type(exc).__name__}") from exc

    def find_by_identifier(self, identifier: str) -> DomainUser | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.scalars(
                    select(User).where(User.identifier == identifier)
                ).first()
                if row is None:
                    return None
                return DomainUser(
                    id=row.id,
                    identifier=row.identifier,
                    password_hash=row.password_hash,
                    created_at=_aware(row.created_at),
                )
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(
                f"find_by_identifier failed: {type(exc).__name__}"
            ) from exc

    def list_users(self) -> Sequence[UserSummary]:
        try:
            with session_scope(self._session_factory) as session:
                rows = session.execute(
                    select(User.id, User.identifier, User.created_at).order_by(User.id.desc())
                ).all()
        except SQLAlchemyError as exc:
            raise StoreUnavailableError(f"list_users failed: {type(exc).__name__}") from exc
        return [
            UserSummary(id=row.id, identifier=row.identifier, created_at=_aware(row.created_at))
            for row in rows
        ]
