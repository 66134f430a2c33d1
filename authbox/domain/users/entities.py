# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    identifier: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class UserSummary:

    id: int
    identifier: str
    created_at: datetime

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "identifier": self.identifier,
            "createdAt": self.created_at.isoformat(),
        }


@dataclass(slots=True, frozen=True)
class SessionClaims:

    subject_id: int
    identifier: str
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedSession:

    token: str
    claims: SessionClaims
