# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from authbox.shared.errors.base import DomainError


class MissingFieldsError(DomainError):
    default_code = "missing_fields"
    default_message = "Identifier and password are required"


class InvalidIdentifierError(DomainError):
    default_code = "invalid_identifier"
    default_message = "Identifier is not valid"


class WeakPasswordError(DomainError):
    default_code = "weak_password"

    def __init__(self, min_length: int) -> None:
        super().__init__(
            message=f"Password must be at least {min_length} characters long",
            context={"min_length": min_length},
        )


class IdentifierTakenError(DomainError):
    default_code = "identifier_taken"
    default_status = HTTPStatus.CONFLICT
    default_message = "Identifier is already registered"


class InvalidCredentialsError(DomainError):
    default_code = "invalid_credentials"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Invalid identifier or password"


class UnauthenticatedError(DomainError):
    default_code = "unauthenticated"
    default_status = HTTPStatus.UNAUTHORIZED
    default_message = "Not authenticated"


# Credential store failures. Use cases translate these; they never reach clients.


class CredentialStoreError(Exception):
    pass


class DuplicateIdentifierError(CredentialStoreError):
    def __init__(self, identifier: str) -> None:
        super().__init__(f"identifier already exists: {identifier}")
        self.identifier = identifier


class StoreUnavailableError(CredentialStoreError):
    pass


class InvalidSessionTokenError(Exception):
    """Raised by token services for bad signatures, malformed or expired tokens."""
