# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from .exceptions import InvalidIdentifierError

IdentifierKind = Literal["email", "username"]

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
USERNAME_PATTERN = re.compile(r"^\S{1,64}$")
MAX_IDENTIFIER_LENGTH = 255


@dataclass(slots=True, frozen=True)
class IdentifierPolicy:
    """Normalization and shape rules for the login identifier.

    Emails are compared case-insensitively, so they are trimmed and
    lower-cased before every write and lookup. Usernames are only trimmed.
    """

    kind: IdentifierKind = "email"

    def normalize(self, raw: str) -> str:
        value = raw.strip()
        if self.kind == "email":
            value = value.lower()
        return value

    def validate(self, normalized: str) -> str:
        pattern = EMAIL_PATTERN if self.kind == "email" else USERNAME_PATTERN
        if len(normalized) > MAX_IDENTIFIER_LENGTH or not pattern.match(normalized):
            raise InvalidIdentifierError(context={"kind": self.kind})
        return normalized
