# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from authbox.application.use_cases.users.check_session import CheckSessionUseCase
from authbox.application.use_cases.users.login_user import LoginUserUseCase
from authbox.application.use_cases.users.logout_user import LogoutUserUseCase
from authbox.application.use_cases.users.register_user import RegisterUserUseCase
from authbox.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginSuccessDTO,
    MessageDTO,
    RegisterRequestDTO,
    RegisterSuccessDTO,
    SessionDTO,
)
from authbox.shared.config import AppConfig
from authbox.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(
        self,
        *,
        config: AppConfig,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        check_session_use_case: CheckSessionUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._config = config
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._check_session_use_case = check_session_use_case
        self._logout_use_case = logout_use_case

    @property
    def _cookie_name(self) -> str:
        return self._config.security.cookie_name

    def _session_cookie(self) -> str | None:
        return request.cookies.get(self._cookie_name) or None

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user_id = self._register_use_case.execute(dto.identifier, dto.password)

        payload = RegisterSuccessDTO(id=user_id).model_dump()
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        session = self._login_use_case.execute(dto.identifier, dto.password)

        payload = LoginSuccessDTO(redirect=self._config.login_redirect_url)
        response = jsonify(payload.model_dump(exclude_none=True))
        response.set_cookie(
            self._cookie_name,
            session.token,
            max_age=self._config.security.session_ttl_seconds,
            path="/",
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.secure_cookies(),
        )
        return response, HTTPStatus.OK

    def me(self) -> tuple[Response, int]:
        claims = self._check_session_use_case.execute(self._session_cookie())
        payload = SessionDTO(id=claims.subject_id, identifier=claims.identifier).model_dump()
        return jsonify(payload), HTTPStatus.OK

    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(self._session_cookie())

        response = jsonify(MessageDTO(message="Logged out").model_dump())
        response.delete_cookie(
            self._cookie_name,
            path="/",
            httponly=True,
            samesite=self._config.security.cookie_samesite,
            secure=self._config.secure_cookies(),
        )
        return response, HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
