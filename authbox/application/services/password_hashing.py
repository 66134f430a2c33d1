"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from authbox.domain.users.repositories import PasswordHasher

# bcrypt only looks at the first 72 bytes of the secret.
_BCRYPT_MAX_BYTES = 72


def _secret_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_secret_bytes(password), salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(_secret_bytes(password), hashed.encode("ascii"))
        except (ValueError, TypeError, UnicodeEncodeError):
            return False
