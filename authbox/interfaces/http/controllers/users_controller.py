# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from authbox.application.use_cases.users.list_users import ListUsersUseCase


class UsersController:
    """Unauthenticated user listing, meant for local development only."""

    def __init__(self, *, list_users_use_case: ListUsersUseCase) -> None:
        self._list_users_use_case = list_users_use_case

    def list_users(self) -> Response:
        users = self._list_users_use_case.execute()
        return jsonify([user.to_dict() for user in users])

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__)
        bp.add_url_rule("/users", view_func=self.list_users, methods=["GET"])
        return bp
