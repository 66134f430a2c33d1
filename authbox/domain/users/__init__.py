# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import IssuedSession, SessionClaims, User, UserSummary
from .exceptions import (
    CredentialStoreError,
    DuplicateIdentifierError,
    IdentifierTakenError,
    InvalidCredentialsError,
    InvalidIdentifierError,
    InvalidSessionTokenError,
    MissingFieldsError,
    StoreUnavailableError,
    UnauthenticatedError,
    WeakPasswordError,
)
from .identifiers import IdentifierPolicy
from .repositories import CredentialStore, PasswordHasher, SessionTokenService

__all__ = [
    "CredentialStore",
    "CredentialStoreError",
    "DuplicateIdentifierError",
    "IdentifierPolicy",
    "IdentifierTakenError",
    "InvalidCredentialsError",
    "InvalidIdentifierError",
    "InvalidSessionTokenError",
    "IssuedSession",
    "MissingFieldsError",
    "PasswordHasher",
    "SessionClaims",
    "SessionTokenService",
    "StoreUnavailableError",
    "UnauthenticatedError",
    "User",
    "UserSummary",
    "WeakPasswordError",
]
