# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from authbox.application.services.password_hashing import BcryptPasswordHasher
from authbox.application.services.session_tokens import JwtSessionTokenService
from authbox.application.use_cases.users.check_session import CheckSessionUseCase
from authbox.application.use_cases.users.list_users import ListUsersUseCase
from authbox.application.use_cases.users.login_user import LoginUserUseCase
from authbox.application.use_cases.users.logout_user import LogoutUserUseCase
from authbox.application.use_cases.users.register_user import RegisterUserUseCase
from authbox.domain.users.identifiers import IdentifierPolicy
from authbox.infrastructure.db import build_engine, build_session_factory
from authbox.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyCredentialStore,
)
from authbox.interfaces.http.controllers.auth_controller import AuthController
from authbox.interfaces.http.controllers.misc_controller import MiscController
from authbox.interfaces.http.controllers.users_controller import UsersController
from authbox.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    # Storage

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return build_session_factory(self.engine)

    @cached_property
    def credential_store(self) -> SqlAlchemyCredentialStore:
        return SqlAlchemyCredentialStore(self.session_factory)

    # Services

    @cached_property
    def identifier_policy(self) -> IdentifierPolicy:
        return IdentifierPolicy(kind=self.config.identifier_kind)  # type: ignore[arg-type]

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.security.bcrypt_rounds)

    @cached_property
    def session_token_service(self) -> JwtSessionTokenService:
        return JwtSessionTokenService(
            secret=self.config.jwt_secret,
            ttl=timedelta(seconds=self.config.security.session_ttl_seconds),
            algorithm=self.config.security.jwt_algorithm,
        )

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.credential_store,
            password_hasher=self.password_hasher,
            identifiers=self.identifier_policy,
            min_password_length=self.config.security.min_password_length,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.credential_store,
            password_hasher=self.password_hasher,
            tokens=self.session_token_service,
            identifiers=self.identifier_policy,
        )

    @cached_property
    def check_session_use_case(self) -> CheckSessionUseCase:
        return CheckSessionUseCase(tokens=self.session_token_service)

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.session_token_service)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.credential_store)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            config=self.config,
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            check_session_use_case=self.check_session_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(list_users_use_case=self.list_users_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(engine=self.engine)
