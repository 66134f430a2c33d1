# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.password_hashing import BcryptPasswordHasher
from .services.session_tokens import JwtSessionTokenService
from .use_cases.users.check_session import CheckSessionUseCase
from .use_cases.users.list_users import ListUsersUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "BcryptPasswordHasher",
    "CheckSessionUseCase",
    "JwtSessionTokenService",
    "ListUsersUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
]
